from typing import List
from pydantic import BaseModel, Field, field_validator


class TextLine(BaseModel):
    """One OCR line; extra fields from the editor (ids, flags) ride along."""

    text: str = Field("", description="Line text")
    is_footnote: bool = Field(False, alias="isFootnote", description="Line belongs to the footnote area")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "allow",
    }

    @field_validator('text', mode='before')
    @classmethod
    def none_text_is_empty(cls, v):
        return "" if v is None else v


class Sheet(BaseModel):
    """The lines observed on one manuscript page."""

    page: int = Field(..., description="Page number")
    lines: List[TextLine] = Field(default_factory=list)

    model_config = {"frozen": True}


class ReferenceScan(BaseModel):
    """Reference marker counts over a set of lines."""

    body_references: int = Field(0, ge=0, description="Valid (٠-٩) markers anywhere in body lines")
    footnote_references: int = Field(0, ge=0, description="Valid markers opening footnote lines")
    empty_markers: int = Field(0, ge=0, description="Lines containing ()")
    confusable_markers: int = Field(0, ge=0, description="Markers holding an OCR look-alike of a digit")
    unmapped_markers: int = Field(0, ge=0, description="Single-character markers with no known digit")

    @property
    def counts_match(self) -> bool:
        return self.body_references == self.footnote_references

    @property
    def needs_correction(self) -> bool:
        return (
            self.empty_markers > 0
            or not self.counts_match
            or self.confusable_markers > 0
        )
