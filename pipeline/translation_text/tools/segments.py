"""
Page Segment Builder

Walks an ordered page list and cuts the running text into segments that end
on sentence punctuation. A sentence that runs over a page break is carried
forward until the first stop mark on a later page; whatever follows that mark
becomes the pending remainder and opens the next segment.

Labels cite the pages a segment came from:
    P3      text from page 3 only
    P3_5    text starting on page 3 and ending on page 5

The page that produced a remainder is the first page of the next label, so a
sentence finishing on page 5 after a remainder from page 5 is labeled P5 or
P5_<n>, never P6.
"""

import logging
from typing import Callable, List, NamedTuple, Sequence

from ..schemas import Page, Segment
from .punctuation import NOT_FOUND, ends_with_punctuation, find_first_punctuation

logger = logging.getLogger(__name__)

BODY_PREFIX = "P"
FOOTNOTE_PREFIX = "F"


class _Span(NamedTuple):
    text: str
    end_index: int
    remainder: str


def _label(prefix: str, pages: Sequence[Page], start_index: int, end_index: int) -> str:
    start = f"{prefix}{pages[start_index].page_number}"
    if start_index == end_index:
        return start
    return f"{start}_{pages[end_index].page_number}"


def _scan_to_boundary(
    pages: Sequence[Page],
    start_index: int,
    initial_text: str,
    text_of: Callable[[Page], str],
) -> _Span:
    """
    Append following pages onto initial_text until one contains a stop mark.

    The page holding the mark contributes its text up to and including the
    mark; the stripped rest is returned as the remainder. When no later page
    has a mark, everything through the last page is returned with an empty
    remainder.
    """
    buffer = [initial_text]

    for search_index in range(start_index + 1, len(pages)):
        page_text = text_of(pages[search_index])
        cut = find_first_punctuation(page_text)

        if cut != NOT_FOUND:
            buffer.append(page_text[:cut + 1])
            return _Span(
                text=' '.join(buffer),
                end_index=search_index,
                remainder=page_text[cut + 1:].strip(),
            )

        buffer.append(page_text)

    return _Span(text=' '.join(buffer), end_index=len(pages) - 1, remainder='')


def build_segments(
    pages: Sequence[Page],
    text_of: Callable[[Page], str],
    prefix: str,
) -> List[Segment]:
    """
    Cut the text of pages into punctuation-bounded, page-labeled segments.

    Args:
        pages: Pages in reading order
        text_of: Extracts the stream's text from a page (body or footnotes)
        prefix: Label prefix for the stream ("P" or "F")

    Returns:
        Segments in page order; their texts cover every page's text once.
    """
    segments: List[Segment] = []
    index = 0
    remainder = ''

    while index < len(pages):
        page = pages[index]
        current = remainder or text_of(page)
        remainder = ''

        if ends_with_punctuation(current):
            segments.append(Segment(label=f"{prefix}{page.page_number}", text=current))
            index += 1
            continue

        span = _scan_to_boundary(pages, index, current, text_of)
        label = _label(prefix, pages, index, span.end_index)
        segments.append(Segment(label=label, text=span.text))

        if span.end_index > index:
            logger.debug("Joined pages into %s", label)

        remainder = span.remainder
        index = span.end_index if remainder else span.end_index + 1

    return segments


def build_body_segments(pages: Sequence[Page]) -> List[Segment]:
    return build_segments(pages, lambda page: page.text, BODY_PREFIX)


def build_footnote_segments(pages: Sequence[Page]) -> List[Segment]:
    """Footnote stream; pages with blank footnotes are left out entirely."""
    with_footnotes = [page for page in pages if page.has_footnotes()]
    return build_segments(with_footnotes, Page.footnote_text, FOOTNOTE_PREFIX)
