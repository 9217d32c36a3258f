from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Page(BaseModel):
    """One physical manuscript page as supplied by the editor."""

    page_number: int = Field(..., alias="page", description="Page number in the book")
    text: str = Field("", description="Body text of the page")
    footnotes: Optional[str] = Field(None, description="Footnote text, if any")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @field_validator('text', mode='before')
    @classmethod
    def none_text_is_empty(cls, v):
        return "" if v is None else v

    def footnote_text(self) -> str:
        """Stripped footnote text, empty when the page has none."""
        return (self.footnotes or "").strip()

    def has_footnotes(self) -> bool:
        return bool(self.footnote_text())


class Segment(BaseModel):
    """A citation-labeled run of text bounded by sentence punctuation."""

    label: str = Field(..., description="P3, P3_5, F7, F7_9")
    text: str = Field(..., description="Segment text, possibly spanning pages")

    model_config = {"frozen": True}

    def render(self) -> str:
        return f"{self.label}\n{self.text}"


class TranslationOptions(BaseModel):
    max_tokens: int = Field(
        default=1000,
        ge=1,
        description="Token ceiling per batch, checked against estimate_tokens()"
    )
