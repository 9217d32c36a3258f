"""
Reference Reconciler

Single left-to-right pass that repairs reference markers OCR damaged:

- "()" in a body line gets the next ordinal, written in Arabic-indic digits
- "()" opening a footnote line gets the marker most recently given to the
  body, since a footnote follows its reference in reading order; with none
  given yet, it gets a fresh ordinal
- look-alike markers such as (1), (V) or (.) are rewritten to the digit they
  stand for; this never consumes an ordinal

The only state carried between lines is CorrectionState.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..schemas import TextLine
from .extractor import EMPTY_MARKER, substitute_confusables

ARABIC_INDIC_DIGITS = {ord(str(d)): chr(0x0660 + d) for d in range(10)}


def to_arabic_indic(number: int) -> str:
    return str(number).translate(ARABIC_INDIC_DIGITS)


@dataclass(frozen=True)
class CorrectionState:
    next_ordinal: int = 1
    last_minted: Optional[str] = None

    def mint(self) -> Tuple[str, "CorrectionState"]:
        """A new canonical marker and the state after handing it out."""
        marker = f"({to_arabic_indic(self.next_ordinal)})"
        return marker, CorrectionState(next_ordinal=self.next_ordinal + 1, last_minted=marker)


def correct_body_text(text: str, state: CorrectionState) -> Tuple[str, CorrectionState]:
    if EMPTY_MARKER in text:
        marker, state = state.mint()
        text = text.replace(EMPTY_MARKER, marker, 1)
    return substitute_confusables(text), state


def correct_footnote_text(text: str, state: CorrectionState) -> Tuple[str, CorrectionState]:
    if text.startswith(EMPTY_MARKER):
        if state.last_minted:
            marker = state.last_minted
        else:
            marker, state = state.mint()
        text = marker + text[len(EMPTY_MARKER):]
    return substitute_confusables(text, leading_only=True), state


def correct_line(line: TextLine, state: CorrectionState) -> Tuple[TextLine, CorrectionState]:
    """Corrected line (the same object when nothing changed) and the next state."""
    correct = correct_footnote_text if line.is_footnote else correct_body_text
    text, state = correct(line.text, state)

    if text == line.text:
        return line, state
    return line.model_copy(update={"text": text}), state


def reconcile(lines: Sequence[TextLine]) -> List[TextLine]:
    state = CorrectionState()
    corrected = []

    for line in lines:
        line, state = correct_line(line, state)
        corrected.append(line)

    return corrected
