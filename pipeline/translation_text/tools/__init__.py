from .punctuation import (
    STOP_PUNCTUATION,
    NOT_FOUND,
    find_first_punctuation,
    ends_with_punctuation,
)
from .segments import (
    BODY_PREFIX,
    FOOTNOTE_PREFIX,
    build_segments,
    build_body_segments,
    build_footnote_segments,
)
from .batching import (
    CHARACTERS_PER_TOKEN,
    BATCH_SEPARATOR,
    estimate_tokens,
    split_into_batches,
    batch_cost,
)

__all__ = [
    "STOP_PUNCTUATION",
    "NOT_FOUND",
    "find_first_punctuation",
    "ends_with_punctuation",
    "BODY_PREFIX",
    "FOOTNOTE_PREFIX",
    "build_segments",
    "build_body_segments",
    "build_footnote_segments",
    "CHARACTERS_PER_TOKEN",
    "BATCH_SEPARATOR",
    "estimate_tokens",
    "split_into_batches",
    "batch_cost",
]
