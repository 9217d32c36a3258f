from .extractor import (
    EMPTY_MARKER,
    OCR_CONFUSABLES,
    Marker,
    is_arabic_indic_digit,
    iter_markers,
    leading_marker,
    substitute_confusables,
    scan_references,
    needs_correction,
)
from .reconciler import (
    CorrectionState,
    to_arabic_indic,
    correct_line,
    reconcile,
)

__all__ = [
    "EMPTY_MARKER",
    "OCR_CONFUSABLES",
    "Marker",
    "is_arabic_indic_digit",
    "iter_markers",
    "leading_marker",
    "substitute_confusables",
    "scan_references",
    "needs_correction",
    "CorrectionState",
    "to_arabic_indic",
    "correct_line",
    "reconcile",
]
