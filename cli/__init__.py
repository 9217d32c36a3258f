import argparse
import cli.config
import cli.namespace_translate
import cli.namespace_footnotes


def create_parser():
    parser = argparse.ArgumentParser(
        prog='makhtut',
        description='makhtut - Prepare OCR\'d Arabic manuscripts for translation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Configuration
  makhtut init                                  # Create config.yaml
  makhtut config show
  makhtut config set translation.max_tokens 1500

  # Translation batches
  makhtut segments book.json                    # Preview labels and token estimates
  makhtut translate book.json
  makhtut translate book.json --max-tokens 800 --prompt
  makhtut translate book.json --json -o batches.json

  # Footnote references
  makhtut footnotes check page-12.json
  makhtut footnotes fix page-12.json -o page-12.fixed.json
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Command namespace')
    subparsers.required = True

    cli.config.setup_parser(subparsers)
    cli.namespace_translate.setup_parser(subparsers)
    cli.namespace_footnotes.setup_parser(subparsers)

    return parser


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    args.func(args)
