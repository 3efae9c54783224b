"""Command-line interface for the Content Consistency Grader."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .analysis.summary import format_report
from .core.config import settings
from .core.constants import FileConstants
from .core.errors import InputValidationError
from .pipeline import analyze_consistency, warm_up
from .utils.data_prep import export_to_json, load_content_set, parse_platform_args, prepare_export

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def cmd_analyze(args):
    """Analyze command."""
    warm_up()

    content = {}
    if args.file:
        content.update(load_content_set(args.file))
    if args.platform:
        content.update(parse_platform_args(args.platform))

    report = analyze_consistency(content)

    if args.out:
        export_to_json(prepare_export(report), args.out)
        print(f"Results exported to {args.out}")

    if args.pretty:
        print(report.to_json(indent=settings.export_indent))
    else:
        print(format_report(report))


def cmd_export(args):
    """Export command."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return EXIT_FAILURE
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return EXIT_FAILURE

    if args.pretty:
        print(json.dumps(data, indent=settings.export_indent, ensure_ascii=False))
    else:
        source = Path(args.input_file)
        output_file = args.output or str(source.with_name(f"{source.stem}_export.json"))
        export_to_json(data, output_file)
        print(f"Exported to {output_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Content Consistency Grader - score brand message consistency across platforms"
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze content samples')
    analyze_parser.add_argument('--file', help='JSON or YAML file mapping platform to content')
    analyze_parser.add_argument('--platform', action='append', metavar='LABEL=TEXT',
                                help='Inline content sample (repeatable)')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--pretty', action='store_true', help='Print the full JSON report')

    # Export command
    export_parser = subparsers.add_parser('export', help='Export a saved report')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging()

    try:
        if args.command == 'analyze':
            return cmd_analyze(args) or 0
        elif args.command == 'export':
            return cmd_export(args) or 0
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return EXIT_FAILURE
    except InputValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except Exception as e:
        logger.error(f"Command failed: {e}")
        return EXIT_FAILURE
    return 0
