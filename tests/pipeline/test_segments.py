"""Tests for the punctuation scanner and the page segment builder."""

import pytest

from pipeline.translation_text.schemas import Page, Segment
from pipeline.translation_text.tools import (
    NOT_FOUND,
    build_body_segments,
    build_footnote_segments,
    build_segments,
    ends_with_punctuation,
    find_first_punctuation,
)


def pages_of(*texts, start=1):
    return [Page(page=start + i, text=text) for i, text in enumerate(texts)]


# ============================================================================
# Punctuation Boundary Scanner
# ============================================================================

@pytest.mark.parametrize("text, expected", [
    ("", NOT_FOUND),
    ("بلا علامة", NOT_FOUND),
    ("جملة. وأخرى!", 4),
    ("سؤال؟", 4),
    ("فاصلة منقوطة؛ بعدها", 12),
    ("انتظار… ثم", 6),
    ("a!b?c", 1),
    ("قال، ثم", NOT_FOUND),
])
def test_find_first_punctuation(text, expected):
    assert find_first_punctuation(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("", False),
    ("   ", False),
    ("نص.", True),
    ("نص.   \n", True),
    ("نص،", True),
    ("نص؛", True),
    ("نص…", True),
    ("نص. ثم", False),
])
def test_ends_with_punctuation(text, expected):
    assert ends_with_punctuation(text) is expected


# ============================================================================
# Page Segment Builder
# ============================================================================

def test_empty_page_list():
    assert build_segments([], lambda p: p.text, "P") == []


def test_custom_prefix_and_extractor():
    pages = pages_of("one", "two.")
    segments = build_segments(pages, lambda p: p.text.upper(), "X")
    assert segments == [Segment(label="X1_2", text="ONE TWO.")]


def test_every_page_ends_cleanly():
    segments = build_body_segments(pages_of("أ.", "ب!", "ج؟"))
    assert [s.label for s in segments] == ["P1", "P2", "P3"]
    assert [s.text for s in segments] == ["أ.", "ب!", "ج؟"]


def test_long_run_without_punctuation():
    texts = [f"كلمة{n}" for n in range(1, 201)]
    segments = build_body_segments(pages_of(*texts))

    assert len(segments) == 1
    assert segments[0].label == "P1_200"
    assert segments[0].text == " ".join(texts)


def test_labels_after_remainder_start_from_terminal_page():
    # page 3 closes the first sentence and opens the second
    segments = build_body_segments(pages_of("أ", "ب", "ج. د", "هـ", "و."))
    assert [s.label for s in segments] == ["P1_3", "P3_5"]
    assert [s.text for s in segments] == ["أ ب ج.", "د هـ و."]


def test_remainder_whitespace_trimmed():
    segments = build_body_segments(pages_of("أ", "ب.    ج.  "))
    assert [s.text for s in segments] == ["أ ب.", "ج."]


def test_punctuation_at_end_of_terminal_page_leaves_no_remainder():
    segments = build_body_segments(pages_of("أ", "ب.", "ج."))
    assert [s.label for s in segments] == ["P1_2", "P3"]


def test_footnote_stream_skips_blank_pages():
    pages = [
        Page(page=1, text="أ.", footnotes="حاشية"),
        Page(page=2, text="ب.", footnotes="  "),
        Page(page=3, text="ج.", footnotes=None),
        Page(page=4, text="د.", footnotes="تتمة."),
    ]
    segments = build_footnote_segments(pages)
    assert segments == [Segment(label="F1_4", text="حاشية تتمة.")]


def test_body_stream_keeps_blank_pages():
    segments = build_body_segments(pages_of("أ.", "", "ب."))
    assert [s.label for s in segments] == ["P1", "P2_3"]
    assert segments[1].text == " ب."


def test_segment_render():
    assert Segment(label="F7_9", text="نص.").render() == "F7_9\nنص."
