"""Preview command: one billboard as the live settings editor shows it."""

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
from billboard_print.print_engine.layout.modes import PreviewStatus
from billboard_print.print_engine.layout.session import CopyKind
from billboard_print.print_engine.pipeline import render_preview_document

logger = logging.getLogger(__name__)


def add_preview_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add preview subcommand parser.

    Args:
        subparsers: The subparsers action from argparse.
    """
    preview_parser = subparsers.add_parser(
        "preview", help="Render the editor preview of one billboard."
    )
    add_common_arguments(preview_parser)
    preview_parser.add_argument(
        "--target",
        choices=[c.value for c in CopyKind],
        default=CopyKind.CUSTOMER.value,
        help="Copy to preview",
    )
    preview_parser.add_argument(
        "--zoom",
        type=float,
        default=1.0,
        help="Scale factor applied to every length. Defaults to 1.0",
    )
    preview_parser.add_argument(
        "--preview-status",
        choices=[s.value for s in PreviewStatus],
        default=PreviewStatus.NONE.value,
        help="Simulate an exception status and apply its overrides",
    )


def run_preview(args: argparse.Namespace) -> int:
    """Execute the preview command.

    Args:
        args: Parsed command-line arguments for the preview command.

    Returns:
        Exit code: 0 for success, 1 on bad input, 2 if the output cannot be
        opened.
    """
    try:
        config = ProcessingConfig.from_args(args)
        if config.zoom <= 0:
            raise ValueError(f"Zoom must be positive, got {config.zoom}")
        engine_config = load_engine_config(config.engine_config_path)
        html = asyncio.run(render_preview_document(config, engine_config))
    except (ValueError, OSError, ValidationError) as e:
        logger.error("Cannot preview: %s", e)
        return 1

    try:
        path = write_document(config.output, html)
        if config.open_output:
            open_in_browser(path)
    except PrintSurfaceUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0
