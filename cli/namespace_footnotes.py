import json

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from infra.config import get_pipeline_logger
from pipeline.footnote_references import check_references, correct_references
from pipeline.footnote_references.schemas import TextLine
from cli.constants import FOOTNOTES_STAGE, LINES_KEY
from cli.helpers import book_id_for, fail, load_records, write_json


def _load_lines(path: str):
    try:
        records = load_records(path, LINES_KEY)
        return [TextLine.model_validate(r) for r in records]
    except (OSError, json.JSONDecodeError, ValueError) as e:
        # ValidationError is a ValueError subclass
        fail(f"Could not read lines from {path}: {e}")


def cmd_check(args):
    lines = _load_lines(args.lines)
    scan = check_references(lines)

    table = Table(title=f"{args.lines} - {len(lines)} lines")
    table.add_column("Check")
    table.add_column("Count", justify="right")

    table.add_row("Body references", str(scan.body_references))
    table.add_row("Footnote references", str(scan.footnote_references))
    table.add_row("Empty markers ()", str(scan.empty_markers))
    table.add_row("OCR look-alike markers", str(scan.confusable_markers))
    table.add_row("Unrecognised markers", str(scan.unmapped_markers))

    Console().print(table)

    if scan.needs_correction:
        print(f"\n⚠️  Needs correction. Run: makhtut footnotes fix {args.lines}")
    else:
        print("\n✅ References look consistent")


def cmd_fix(args):
    lines = _load_lines(args.lines)

    with get_pipeline_logger(book_id_for(args.lines), FOOTNOTES_STAGE) as logger:
        corrected = correct_references(lines, logger)

    if corrected is lines:
        print("✅ No correction needed")
        return

    changed = sum(1 for old, new in zip(lines, corrected) if old is not new)
    write_json(
        [line.model_dump(by_alias=True, exclude_unset=True) for line in corrected],
        args.output,
    )
    if args.output:
        print(f"✓ Corrected {changed} line(s), wrote {args.output}")


def setup_parser(subparsers):
    footnotes_parser = subparsers.add_parser(
        'footnotes',
        help='Check and repair footnote reference markers'
    )
    footnotes_subparsers = footnotes_parser.add_subparsers(
        dest='footnotes_command',
        help='Footnotes command'
    )
    footnotes_subparsers.required = True

    check_parser = footnotes_subparsers.add_parser('check', help='Count reference markers')
    check_parser.add_argument('lines', help='JSON file: list of {text, isFootnote}')
    check_parser.set_defaults(func=cmd_check)

    fix_parser = footnotes_subparsers.add_parser('fix', help='Repair empty and look-alike markers')
    fix_parser.add_argument('lines', help='JSON file: list of {text, isFootnote}')
    fix_parser.add_argument('--output', '-o', help='Write corrected lines here (default: stdout)')
    fix_parser.set_defaults(func=cmd_fix)
