"""Entry point for the finbind CLI."""

import asyncio
import logging
import sys

from finbind.cli.arg_parser import build_parser
from finbind.cli.commands import COMMANDS, run_command


def configure_logging(verbose: bool) -> None:
    """Send finbind log records to stderr.

    Warnings and errors are always shown; --verbose adds debug output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    finbind_logger = logging.getLogger("finbind")
    finbind_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove any existing handlers to avoid duplicates on reconfigure
    finbind_logger.handlers.clear()
    finbind_logger.addHandler(handler)
    finbind_logger.propagate = False


def main(argv: list[str] | None = None) -> None:
    """Entry point for the finbind console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    subcommand = getattr(args, f"{args.command}_command", None) if args.command else None
    command = (args.command, subcommand)
    if command not in COMMANDS:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    configure_logging(args.verbose)
    try:
        exit_code = asyncio.run(run_command(command, args))
    except KeyboardInterrupt:
        exit_code = 130
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
