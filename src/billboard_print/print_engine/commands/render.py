"""Render command: compose a printable batch document."""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from billboard_print.print_engine.cli.config import (
    ProcessingConfig,
    add_common_arguments,
    load_engine_config,
)
from billboard_print.print_engine.cli.io import open_in_browser, write_document
from billboard_print.print_engine.errors import PrintSurfaceUnavailableError
from billboard_print.print_engine.layout.session import PrintTarget
from billboard_print.print_engine.pipeline import render_batch_document

logger = logging.getLogger(__name__)


def add_render_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add render subcommand parser.

    Args:
        subparsers: The subparsers action from argparse.
    """
    render_parser = subparsers.add_parser(
        "render", help="Compose print pages for a batch of billboards."
    )
    add_common_arguments(render_parser)
    render_parser.add_argument(
        "--target",
        choices=[t.value for t in PrintTarget],
        default=PrintTarget.CUSTOMER.value,
        help="Customer copy, installation team copy, or both (customer first)",
    )
    render_parser.add_argument(
        "--team-name",
        default=None,
        help="Team name for the document title",
    )
    render_parser.add_argument(
        "--removal",
        action="store_true",
        help="Title the document as a removal batch",
    )
    render_parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while preparing billboards",
    )


def run_render(args: argparse.Namespace) -> int:
    """Execute the render command.

    Args:
        args: Parsed command-line arguments for the render command.

    Returns:
        Exit code: 0 for success, 1 on bad input, 2 if the output cannot be
        opened for printing.
    """
    try:
        config = ProcessingConfig.from_args(args)
        engine_config = load_engine_config(config.engine_config_path)
        html = asyncio.run(render_batch_document(config, engine_config))
    except (ValueError, OSError, ValidationError) as e:
        logger.error("Cannot render: %s", e)
        return 1

    try:
        path = write_document(config.output, html)
        if config.open_output:
            open_in_browser(path)
    except PrintSurfaceUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0
