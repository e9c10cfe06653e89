"""
Command-line interface for feed validation.

Usage:
    python -m feed_validator.cli.validate_cli validate --input <feed_dir> [options]
    python -m feed_validator.cli.validate_cli list-notices
"""

import argparse
import csv
import json
import sys
from pathlib import Path

from feed_validator.batch.pipeline import FeedValidationPipeline
from feed_validator.core.notices import registered_notice_kinds
from feed_validator.observability.logger import get_logger, reconfigure_loggers
from feed_validator.observability.metrics import generate_metrics, start_metrics_server

EXIT_OK = 0
EXIT_FEED_INVALID = 1
EXIT_BAD_INPUT = 2

logger = get_logger(__name__)


def validate_command(args) -> int:
    """
    Execute the validate command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit status
    """
    input_path = Path(args.input)
    if not input_path.is_dir():
        logger.error(f"Feed directory not found: {args.input}")
        return EXIT_BAD_INPUT

    if args.metrics_port:
        start_metrics_server(args.metrics_port)

    try:
        pipeline = FeedValidationPipeline(
            validation_rules_path=args.validation_rules,
            max_workers=args.workers,
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid rule configuration: {e}")
        return EXIT_BAD_INPUT

    try:
        report = pipeline.validate_directory(input_path)
    except (UnicodeDecodeError, csv.Error, OSError) as e:
        logger.error(f"Cannot read feed {input_path}: {e}", exc_info=True)
        return EXIT_BAD_INPUT

    report_json = report.model_dump_json(indent=2)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(report_json, encoding="utf-8")
        logger.info(f"Report written to {output_path}")
    else:
        sys.stdout.write(report_json + "\n")

    if args.metrics_file:
        metrics_path = Path(args.metrics_file)
        metrics_path.parent.mkdir(parents=True, exist_ok=True)
        metrics_path.write_bytes(generate_metrics())

    logger.info(
        f"Validation finished: {report.error_count} errors, {report.warning_count} warnings",
        extra={"passed": report.passed, "counts_by_code": report.counts_by_code},
    )
    return EXIT_OK if report.passed else EXIT_FEED_INVALID


def list_notices_command(args) -> int:
    """Print the notice catalog as JSON."""
    catalog = [
        {"code": code, "severity": kind.severity.value, "title": kind.title}
        for code, kind in sorted(registered_notice_kinds().items())
    ]
    sys.stdout.write(json.dumps(catalog, indent=2) + "\n")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Transit feed validator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate an unzipped feed and print the report
  python -m feed_validator.cli.validate_cli validate --input data/feed

  # Validate with custom rule settings, write the report to a file
  python -m feed_validator.cli.validate_cli validate --input data/feed \\
      --validation-rules config/validation_rules.yaml --output out/report.json

  # Show every notice code
  python -m feed_validator.cli.validate_cli list-notices
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: $LOG_FORMAT or json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a feed directory")
    validate_parser.add_argument(
        "--input",
        required=True,
        help="Path to the unzipped feed directory"
    )
    validate_parser.add_argument(
        "--validation-rules",
        default="config/validation_rules.yaml",
        help="Path to rule configuration YAML file"
    )
    validate_parser.add_argument(
        "--output",
        default=None,
        help="Write the JSON report to this file instead of stdout"
    )
    validate_parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker threads for building files and running rules (default: 1)"
    )
    validate_parser.add_argument(
        "--metrics-port",
        type=int,
        default=None,
        help="Expose Prometheus metrics on this port"
    )
    validate_parser.add_argument(
        "--metrics-file",
        default=None,
        help="Write Prometheus metrics in text format to this file after validating"
    )

    subparsers.add_parser("list-notices", help="List notice codes")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_BAD_INPUT

    if args.log_level or args.log_format:
        reconfigure_loggers(level=args.log_level, format_type=args.log_format)

    if args.command == "validate":
        if args.workers < 1:
            parser.error("--workers must be >= 1")
        return validate_command(args)
    return list_notices_command(args)


if __name__ == "__main__":
    sys.exit(main())
