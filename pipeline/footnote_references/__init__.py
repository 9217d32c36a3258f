"""
Footnote reference repair.

OCR often drops or garbles the digit inside a reference marker, leaving "()"
or a look-alike such as "(1)" or "(V)". correct_references() puts canonical
Arabic-indic markers back without touching any other text.
"""

import logging
from typing import Collection, Iterable, List, Optional, Sequence, Union

from infra.pipeline.logger import PipelineLogger

from .schemas import ReferenceScan, Sheet, TextLine
from .tools import reconcile, scan_references

logger = logging.getLogger(__name__)

LineInput = Union[TextLine, dict]


def _as_lines(lines: Sequence[LineInput]) -> Sequence[TextLine]:
    if all(isinstance(line, TextLine) for line in lines):
        return lines
    return [line if isinstance(line, TextLine) else TextLine.model_validate(line) for line in lines]


def _warn(pipeline_logger: Optional[PipelineLogger], message: str, **fields):
    if pipeline_logger:
        pipeline_logger.warning(message, **fields)
    else:
        logger.warning(message)


def correct_references(
    lines: Sequence[LineInput],
    pipeline_logger: Optional[PipelineLogger] = None,
) -> Sequence[TextLine]:
    """
    Repair empty and look-alike reference markers.

    Returns the input list itself when nothing needs correcting or the pass
    changes no line, so callers can compare by identity to skip work.
    Otherwise returns a new list of the same length; untouched lines are the
    original objects.

    Body and footnote counts that still differ after the pass are reported
    as a warning and returned as-is.
    """
    lines = _as_lines(lines)
    before = scan_references(lines)

    if not before.needs_correction:
        return lines

    corrected = reconcile(lines)
    changed = sum(1 for old, new in zip(lines, corrected) if old is not new)
    after = scan_references(corrected)

    if pipeline_logger:
        pipeline_logger.info("Corrected reference markers", corrections=changed)

    if not after.counts_match:
        _warn(
            pipeline_logger,
            f"Reference count mismatch after correction: "
            f"{after.body_references} in body, {after.footnote_references} in footnotes",
        )
    if after.unmapped_markers:
        _warn(
            pipeline_logger,
            f"{after.unmapped_markers} reference marker(s) with unrecognised characters left unchanged",
        )

    if not changed:
        return lines
    return corrected


def check_references(lines: Sequence[LineInput]) -> ReferenceScan:
    return scan_references(_as_lines(lines))


def auto_correct_footnotes(
    sheets: Iterable[Sheet],
    pages: Collection[int],
    pipeline_logger: Optional[PipelineLogger] = None,
) -> List[Sheet]:
    """
    Run correct_references() over the sheets for the given page numbers.

    Sheets outside pages, or that needed no correction, come back as the
    same objects.
    """
    result = []
    for sheet in sheets:
        if sheet.page in pages:
            corrected = correct_references(sheet.lines, pipeline_logger)
            if corrected is not sheet.lines:
                if pipeline_logger:
                    pipeline_logger.debug("Replaced lines", page=sheet.page)
                sheet = sheet.model_copy(update={"lines": list(corrected)})
        result.append(sheet)
    return result


__all__ = [
    "TextLine",
    "Sheet",
    "ReferenceScan",
    "correct_references",
    "check_references",
    "auto_correct_footnotes",
]
