"""
Translation text preparation.

Turns manuscript pages into translation-ready batches: body text first, then
footnotes, each cut at sentence punctuation, labeled with the pages it came
from, and packed under a token ceiling.
"""

import time
from typing import Iterable, List, Optional, Union

from infra.pipeline.logger import PipelineLogger

from .schemas import Page, Segment, TranslationOptions
from .tools import (
    build_body_segments,
    build_footnote_segments,
    split_into_batches,
)

PageInput = Union[Page, dict]


def _as_pages(pages: Iterable[PageInput]) -> List[Page]:
    return [p if isinstance(p, Page) else Page.model_validate(p) for p in pages]


def build_translation_segments(pages: Iterable[PageInput]) -> List[Segment]:
    """All body segments in page order, followed by all footnote segments."""
    pages = _as_pages(pages)
    if not pages:
        return []
    return build_body_segments(pages) + build_footnote_segments(pages)


def generate_translation_text(
    pages: Iterable[PageInput],
    options: Optional[TranslationOptions] = None,
    logger: Optional[PipelineLogger] = None,
) -> List[str]:
    """
    Build the translation batches for a run of pages.

    Args:
        pages: Page models or dicts with page, text and optional footnotes
        options: Batch settings (max_tokens defaults to 1000)
        logger: Optional pipeline logger for stage events

    Returns:
        Batches; each joins "label\\ntext" segments with a blank line.
    """
    options = options or TranslationOptions()
    start_time = time.time()

    segments = build_translation_segments(pages)
    batches = split_into_batches([s.render() for s in segments], options.max_tokens)

    if logger:
        logger.complete_stage(
            duration_seconds=time.time() - start_time,
            segments=len(segments),
            batches=len(batches),
        )

    return batches


def compose_translation_prompt(batch: str, prompt: Optional[str] = None) -> str:
    """Instructions and one batch, separated by a blank line."""
    if prompt is None:
        from infra.config import get_translation_prompt
        prompt = get_translation_prompt()
    return '\n\n'.join([prompt, batch])


__all__ = [
    "Page",
    "Segment",
    "TranslationOptions",
    "build_translation_segments",
    "generate_translation_text",
    "compose_translation_prompt",
]
