"""Command line entry point for locsync."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from locsync import __version__
from locsync.config import load_config
from locsync.errors import LocSyncError, UsageError
from locsync.runner import Command, run


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging on stderr; stdout is reserved for the report."""
    level = logging.DEBUG if debug else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=True)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="locsync",
        description="Merge and validate translation files against the default language",
        epilog=(
            "arg may name one translation file to process, or a previous manifest\n"
            "to process only translations added since then."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"locsync {__version__}")

    parser.add_argument("command", nargs="?", help=f"One of: {', '.join(Command.names())}")
    parser.add_argument("arg", nargs="?", help="Translation file or previous manifest")

    parser.add_argument("--manifest", type=Path, help="Manifest file (default: index.json)")
    parser.add_argument("--result-file", type=Path, help="Report file (default: .result.json)")
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")

    args, ignored = parser.parse_known_args(argv)
    args.ignored = ignored
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(bool(args.debug))
    logger = structlog.get_logger()

    try:
        command = Command.parse(args.command)
    except UsageError as e:
        print(e.message)
        return e.exit_code

    try:
        settings = load_config(
            manifest_path=args.manifest,
            result_file=args.result_file,
            debug=args.debug,
        )
    except LocSyncError as e:
        logger.error("Invalid configuration", **e.to_dict())
        return e.exit_code

    if settings.debug != bool(args.debug):
        setup_logging(settings.debug)

    logger.debug(
        "Configuration loaded",
        manifest=str(settings.manifest_path),
        base_dir=str(settings.base_dir),
        patterns=settings.placeholder_patterns,
    )
    if args.ignored:
        logger.warning("Ignoring extra arguments", arguments=args.ignored)

    try:
        report = run(command, args.arg, settings)
    except LocSyncError as e:
        return e.exit_code

    print(report.to_json(indent=settings.indent))
    report.dump(settings.result_file, indent=settings.indent)
    return 0


def run_cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
