"""Main entry point for the billboard print CLI."""

import argparse
import logging
import sys

from billboard_print.print_engine.commands import (
    add_init_settings_parser,
    add_preview_parser,
    add_render_parser,
    run_init_settings,
    run_preview,
    run_render,
)


def _setup_logging(log_level: str) -> None:
    """Configure logging based on level.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments with command and command-specific options.
    """
    parser = argparse.ArgumentParser(
        description="Compose printable billboard pages.", allow_abbrev=False
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level. Defaults to WARNING",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    add_render_parser(subparsers)
    add_preview_parser(subparsers)
    add_init_settings_parser(subparsers)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the billboard print CLI.

    Routes to the appropriate subcommand handler.

    Returns:
        Exit code: 0 for success, non-zero on error.
    """
    args = _parse_args(argv)
    _setup_logging(args.log_level)

    if args.command == "render":
        return run_render(args)
    elif args.command == "preview":
        return run_preview(args)
    elif args.command == "init-settings":
        return run_init_settings(args)
    else:
        print(
            "Error: No command specified. Use 'render', 'preview' or "
            "'init-settings'.",
            file=sys.stderr,
        )
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
