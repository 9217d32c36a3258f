"""
Reference marker extraction.

A reference marker is "(", at most one character, ")". Body lines may carry
markers anywhere; a footnote line only counts the marker that opens it.

Arabic-indic digits are recognised by code point (U+0660 to U+0669) so the
result does not depend on regex Unicode handling.
"""

from typing import Iterable, Iterator, NamedTuple, Optional

from ..schemas import ReferenceScan, TextLine

ARABIC_INDIC_ZERO = 0x0660
ARABIC_INDIC_NINE = 0x0669

EMPTY_MARKER = '()'

# Characters OCR commonly reads in place of an Arabic-indic digit.
OCR_CONFUSABLES = {
    '1': '١',
    '9': '٩',
    '.': '٠',
    'O': '٥',
    'V': '٧',
}


class Marker(NamedTuple):
    start: int
    char: str  # '' for an empty marker

    @property
    def end(self) -> int:
        return self.start + len(self.char) + 2


def is_arabic_indic_digit(char: str) -> bool:
    return len(char) == 1 and ARABIC_INDIC_ZERO <= ord(char) <= ARABIC_INDIC_NINE


def _marker_at(text: str, index: int) -> Optional[Marker]:
    if index >= len(text) or text[index] != '(':
        return None
    if index + 1 < len(text) and text[index + 1] == ')':
        return Marker(index, '')
    if index + 2 < len(text) and text[index + 2] == ')' and text[index + 1] != '(':
        return Marker(index, text[index + 1])
    return None


def iter_markers(text: str) -> Iterator[Marker]:
    """Non-overlapping markers, left to right."""
    index = 0
    while index < len(text):
        marker = _marker_at(text, index)
        if marker is None:
            index += 1
            continue
        yield marker
        index = marker.end


def leading_marker(text: str) -> Optional[Marker]:
    return _marker_at(text, 0)


def line_markers(line: TextLine) -> Iterable[Marker]:
    """Markers that count for a line: all of them in body, the opening one in footnotes."""
    if not line.is_footnote:
        return iter_markers(line.text)
    marker = leading_marker(line.text)
    return [marker] if marker else []


def substitute_confusables(text: str, leading_only: bool = False) -> str:
    """Replace markers like (1) or (V) with their Arabic-indic digit."""
    if leading_only:
        marker = leading_marker(text)
        markers = [marker] if marker else []
    else:
        markers = iter_markers(text)

    pieces = []
    position = 0
    for marker in markers:
        if marker.char not in OCR_CONFUSABLES:
            continue
        pieces.append(text[position:marker.start])
        pieces.append(f"({OCR_CONFUSABLES[marker.char]})")
        position = marker.end

    if not pieces:
        return text

    pieces.append(text[position:])
    return ''.join(pieces)


def scan_references(lines: Iterable[TextLine]) -> ReferenceScan:
    body_references = 0
    footnote_references = 0
    empty_markers = 0
    confusable_markers = 0
    unmapped_markers = 0

    for line in lines:
        if EMPTY_MARKER in line.text:
            empty_markers += 1

        for marker in line_markers(line):
            if is_arabic_indic_digit(marker.char):
                if line.is_footnote:
                    footnote_references += 1
                else:
                    body_references += 1
            elif marker.char in OCR_CONFUSABLES:
                confusable_markers += 1
            elif marker.char:
                unmapped_markers += 1

    return ReferenceScan(
        body_references=body_references,
        footnote_references=footnote_references,
        empty_markers=empty_markers,
        confusable_markers=confusable_markers,
        unmapped_markers=unmapped_markers,
    )


def needs_correction(lines: Iterable[TextLine]) -> bool:
    return scan_references(lines).needs_correction
