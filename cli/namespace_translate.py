import json

from pydantic import ValidationError
from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from infra.config import get_default_max_tokens, get_pipeline_logger
from pipeline.translation_text import (
    TranslationOptions,
    build_translation_segments,
    compose_translation_prompt,
    generate_translation_text,
)
from pipeline.translation_text.tools import batch_cost, estimate_tokens
from cli.constants import PAGES_KEY, TRANSLATION_STAGE
from cli.helpers import book_id_for, fail, load_records, write_json


def _load_pages(path: str):
    try:
        return load_records(path, PAGES_KEY)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        fail(f"Could not read pages from {path}: {e}")


def cmd_translate(args):
    pages = _load_pages(args.pages)
    max_tokens = args.max_tokens if args.max_tokens is not None else get_default_max_tokens()

    try:
        options = TranslationOptions(max_tokens=max_tokens)
        with get_pipeline_logger(book_id_for(args.pages), TRANSLATION_STAGE) as logger:
            logger.start_stage()
            batches = generate_translation_text(pages, options, logger=logger)
    except ValidationError as e:
        fail(f"Invalid input: {e}")

    if args.prompt:
        batches = [compose_translation_prompt(batch) for batch in batches]

    if args.json:
        write_json(batches, args.output)
        return

    console = Console()
    for i, batch in enumerate(batches, 1):
        console.print(Rule(f"Batch {i}/{len(batches)}"))
        console.print(batch, markup=False, highlight=False)


def cmd_segments(args):
    pages = _load_pages(args.pages)
    max_tokens = args.max_tokens if args.max_tokens is not None else get_default_max_tokens()

    try:
        segments = build_translation_segments(pages)
    except ValidationError as e:
        fail(f"Invalid input: {e}")

    if not segments:
        print("No segments (empty page list)")
        return

    rendered = [s.render() for s in segments]

    table = Table(title=f"{args.pages} - {len(segments)} segments")
    table.add_column("#", justify="right")
    table.add_column("Label", style="cyan")
    table.add_column("Chars", justify="right")
    table.add_column("Tokens", justify="right")
    table.add_column("Oversized", justify="center")

    for i, (segment, text) in enumerate(zip(segments, rendered), 1):
        tokens = estimate_tokens(text)
        table.add_row(
            str(i),
            segment.label,
            str(len(segment.text)),
            str(tokens),
            "⚠️" if tokens > max_tokens else "",
        )

    Console().print(table)
    print(f"\nTotal tokens (joined): {batch_cost(rendered)}  |  max_tokens per batch: {max_tokens}")


def setup_parser(subparsers):
    translate_parser = subparsers.add_parser(
        'translate',
        help='Build token-bounded translation batches from a pages JSON file'
    )
    translate_parser.add_argument('pages', help='JSON file: list of {page, text, footnotes}')
    translate_parser.add_argument('--max-tokens', type=int, help='Token ceiling per batch (default: from config)')
    translate_parser.add_argument('--prompt', action='store_true', help='Prefix each batch with the translation prompt')
    translate_parser.add_argument('--json', action='store_true', help='Output batches as a JSON array')
    translate_parser.add_argument('--output', '-o', help='Write JSON output to a file instead of stdout')
    translate_parser.set_defaults(func=cmd_translate)

    segments_parser = subparsers.add_parser(
        'segments',
        help='Show labeled segments and token estimates before batching'
    )
    segments_parser.add_argument('pages', help='JSON file: list of {page, text, footnotes}')
    segments_parser.add_argument('--max-tokens', type=int, help='Flag segments above this many tokens')
    segments_parser.set_defaults(func=cmd_segments)
