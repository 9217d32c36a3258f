"""Tests for pipeline/footnote_references: correct_references and sheet repair."""

import json
import logging

import pytest

from pipeline.footnote_references import (
    Sheet,
    TextLine,
    auto_correct_footnotes,
    check_references,
    correct_references,
)


def body(text, **extra):
    return TextLine(text=text, **extra)


def footnote(text, **extra):
    return TextLine(text=text, isFootnote=True, **extra)


def texts(lines):
    return [line.text for line in lines]


# ============================================================================
# Empty Markers
# ============================================================================

def test_empty_footnote_marker_takes_next_ordinal():
    lines = [body("Some (١) Text"), footnote("() Footnote")]
    assert correct_references(lines) == [body("Some (١) Text"), footnote("(١) Footnote")]


def test_empty_body_marker_and_footnote_share_ordinal():
    lines = [body("Some () Text"), footnote("() Footnote")]
    assert correct_references(lines) == [body("Some (١) Text"), footnote("(١) Footnote")]


def test_orphaned_empty_footnote_marker():
    lines = [body("Text with no references"), footnote("() Orphaned footnote")]
    assert texts(correct_references(lines)) == ["Text with no references", "(١) Orphaned footnote"]


def test_only_first_empty_marker_in_body_line_replaced():
    lines = [body("a () b () c"), footnote("(١) x")]
    assert texts(correct_references(lines)) == ["a (١) b () c", "(١) x"]


def test_ordinals_continue_past_nine():
    lines = [body(f"line {n} ()") for n in range(1, 11)]
    corrected = correct_references(lines)
    assert corrected[0].text == "line 1 (١)"
    assert corrected[8].text == "line 9 (٩)"
    assert corrected[9].text == "line 10 (١٠)"


def test_empty_marker_inside_footnote_body_left_alone():
    lines = [body("Text (١)"), footnote("(١) see () here")]
    assert texts(correct_references(lines)) == ["Text (١)", "(١) see () here"]


# ============================================================================
# OCR Look-alike Markers
# ============================================================================

def test_lookalike_in_footnote():
    lines = [body("Some () Text"), footnote("(1) Footnote")]
    assert correct_references(lines) == [body("Some (١) Text"), footnote("(١) Footnote")]


def test_lookalikes_in_body():
    lines = [
        body("Some (1) Text with (V)"),
        footnote("(١) Footnote"),
        footnote("(٧) Another"),
    ]
    assert texts(correct_references(lines)) == [
        "Some (١) Text with (٧)",
        "(١) Footnote",
        "(٧) Another",
    ]


def test_all_lookalikes_in_body():
    lines = [
        body("Text with (.) and (O) and (9)"),
        footnote("(٠) Zero footnote"),
        footnote("(٥) Five footnote"),
        footnote("(٩) Nine footnote"),
    ]
    assert texts(correct_references(lines))[0] == "Text with (٠) and (٥) and (٩)"


def test_all_lookalikes_in_footnotes():
    lines = [
        body("Text with (٠) and (٥) and (٩)"),
        footnote("(.) Zero footnote"),
        footnote("(O) Five footnote"),
        footnote("(9) Nine footnote"),
    ]
    assert texts(correct_references(lines)) == [
        "Text with (٠) and (٥) and (٩)",
        "(٠) Zero footnote",
        "(٥) Five footnote",
        "(٩) Nine footnote",
    ]


def test_repeated_lookalikes():
    lines = [
        body("Text with (1) and (1) again"),
        footnote("(1) Repeated footnote"),
        footnote("(1) Another repeated footnote"),
    ]
    assert texts(correct_references(lines)) == [
        "Text with (١) and (١) again",
        "(١) Repeated footnote",
        "(١) Another repeated footnote",
    ]


def test_unknown_character_left_unchanged():
    lines = [body("Text with (X) unknown character"), footnote("(X) Unknown footnote")]
    assert correct_references(lines) is lines


def test_complex_mixed_scenario():
    lines = [
        body("Text with (1) and (.) and () and (V)"),
        body("More text with (O) reference"),
        footnote("(1) First footnote"),
        footnote("() Invalid footnote"),
        footnote("(V) Third footnote"),
        footnote("(9) Fourth footnote"),
        footnote("(O) Fifth footnote"),
    ]
    assert texts(correct_references(lines)) == [
        "Text with (١) and (٠) and (١) and (٧)",
        "More text with (٥) reference",
        "(١) First footnote",
        "(١) Invalid footnote",
        "(٧) Third footnote",
        "(٩) Fourth footnote",
        "(٥) Fifth footnote",
    ]


# ============================================================================
# Fast Path and Identity
# ============================================================================

@pytest.mark.parametrize("lines", [
    [],
    [body(""), footnote("")],
    [body("Normal text"), footnote("Normal footnote")],
    [body("Text with (١) and (٢)"), footnote("(١) First footnote"), footnote("(٢) Second footnote")],
])
def test_no_correction_returns_same_list(lines):
    assert correct_references(lines) is lines


def test_untouched_lines_are_same_objects():
    lines = [body("Some (١) Text"), footnote("() Footnote")]
    corrected = correct_references(lines)

    assert corrected is not lines
    assert corrected[0] is lines[0]
    assert corrected[1] is not lines[1]


def test_input_lines_not_modified():
    lines = [body("Some () Text"), footnote("() Footnote")]
    correct_references(lines)
    assert texts(lines) == ["Some () Text", "() Footnote"]


@pytest.mark.parametrize("lines", [
    [body("Some () Text"), footnote("() Footnote")],
    [body("Some (1) Text with (V)"), footnote("(١) a"), footnote("(٧) b")],
    [
        body("Text with (1) and (.) and () and (V)"),
        body("More text with (O) reference"),
        footnote("(1) First"),
        footnote("() Invalid"),
        footnote("(V) Third"),
        footnote("(9) Fourth"),
        footnote("(O) Fifth"),
    ],
])
def test_correction_is_idempotent(lines):
    once = correct_references(lines)
    twice = correct_references(once)

    assert twice == once
    assert twice is once


def test_line_count_and_order_preserved():
    lines = [body("a ()"), footnote("() b"), body("c"), footnote("(9) d"), body("e (O)")]
    corrected = correct_references(lines)

    assert len(corrected) == len(lines)
    assert [line.is_footnote for line in corrected] == [line.is_footnote for line in lines]


# ============================================================================
# Count Mismatches
# ============================================================================

def test_more_body_than_footnote_references(caplog):
    lines = [body("Text with (١) and (٢)"), footnote("(١) Only one footnote")]

    with caplog.at_level(logging.WARNING):
        corrected = correct_references(lines)

    assert corrected is lines
    assert "Reference count mismatch" in caplog.text


def test_more_footnote_than_body_references():
    lines = [body("Text with (١)"), footnote("(١) First footnote"), footnote("(٢) Extra footnote")]
    assert correct_references(lines) is lines


def test_mismatch_left_after_correction_is_stable():
    lines = [
        body("Text with (1) and (.) and () and (V)"),
        footnote("(1) First footnote"),
    ]
    once = correct_references(lines)

    assert texts(once) == ["Text with (١) and (٠) and (١) and (٧)", "(١) First footnote"]
    assert correct_references(once) is once


def test_mismatch_logged_to_pipeline_logger(tmp_path):
    from infra.pipeline.logger import PipelineLogger

    lines = [body("Text with (١) and (٢)"), footnote("(١) Only one footnote")]
    with PipelineLogger("test-book", "footnote-references", log_dir=tmp_path) as logger:
        correct_references(lines, logger)

    entries = [json.loads(line) for line in logger.log_file.read_text(encoding="utf-8").splitlines()]
    assert entries[0]["corrections"] == 0
    assert entries[1]["level"] == "WARNING"


# ============================================================================
# Inputs
# ============================================================================

def test_dict_input():
    lines = [{"text": "Some (١) Text"}, {"isFootnote": True, "text": "() Footnote"}]
    assert correct_references(lines) == [body("Some (١) Text"), footnote("(١) Footnote")]


def test_extra_fields_preserved():
    lines = [body("Some () Text", id=1), footnote("() Footnote", id=2, isPoetic=False)]
    corrected = correct_references(lines)

    dumped = corrected[1].model_dump(by_alias=True)
    assert dumped["id"] == 2
    assert dumped["isPoetic"] is False
    assert dumped["isFootnote"] is True


def test_check_references_counts():
    scan = check_references([body("a (١) (1) () (X)"), footnote("(٢) b (٣)")])

    assert scan.body_references == 1
    assert scan.footnote_references == 1
    assert scan.empty_markers == 1
    assert scan.confusable_markers == 1
    assert scan.unmapped_markers == 1
    assert scan.needs_correction


# ============================================================================
# Sheets
# ============================================================================

def test_auto_correct_footnotes_only_selected_pages():
    clean = Sheet(page=1, lines=[body("a (١)"), footnote("(١) b")])
    broken = Sheet(page=2, lines=[body("a ()"), footnote("() b")])
    skipped = Sheet(page=3, lines=[body("a ()"), footnote("() b")])

    result = auto_correct_footnotes([clean, broken, skipped], pages=[1, 2])

    assert result[0] is clean
    assert texts(result[1].lines) == ["a (١)", "(١) b"]
    assert result[1].page == 2
    assert result[2] is skipped
    assert texts(broken.lines) == ["a ()", "() b"]


def test_auto_correct_footnotes_keeps_sheet_with_unfixable_mismatch():
    sheet = Sheet(page=4, lines=[body("a (١) b (٢)"), footnote("(١) c")])
    assert auto_correct_footnotes([sheet], pages=[4])[0] is sheet
