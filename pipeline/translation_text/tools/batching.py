"""
Token estimation and greedy batch packing.

Arabic script packs more tokens per character than English, so the estimate
uses 3.5 characters per token rather than the usual 4.
"""

import math
from typing import List, Sequence

CHARACTERS_PER_TOKEN = 3.5
BATCH_SEPARATOR = "\n\n"


def estimate_tokens(text: str) -> int:
    return math.ceil(len(text) / CHARACTERS_PER_TOKEN)


def split_into_batches(segments: Sequence[str], max_tokens: int) -> List[str]:
    """
    Pack rendered segments into batches under max_tokens, in order.

    Every segment after the first in a batch costs one extra token for the
    separator, so a batch never costs more than max_tokens unless it holds a
    single oversized segment. Segments are never split.
    """
    batches: List[str] = []
    current_batch: List[str] = []
    current_tokens = 0

    for segment in segments:
        segment_tokens = estimate_tokens(segment)
        join_tokens = 1 if current_batch else 0

        if current_batch and current_tokens + segment_tokens + join_tokens > max_tokens:
            batches.append(BATCH_SEPARATOR.join(current_batch))
            current_batch = [segment]
            current_tokens = segment_tokens
        else:
            current_batch.append(segment)
            current_tokens += segment_tokens + join_tokens

    if current_batch:
        batches.append(BATCH_SEPARATOR.join(current_batch))

    return batches


def batch_cost(batch_segments: Sequence[str]) -> int:
    """Token total the packer assigns to one batch, separators included."""
    if not batch_segments:
        return 0
    return sum(estimate_tokens(s) for s in batch_segments) + len(batch_segments) - 1
