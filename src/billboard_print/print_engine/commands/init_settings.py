"""init-settings command: write the built-in default settings records."""

import argparse
import logging
from pathlib import Path

from billboard_print.print_engine.storage.store import SettingsStore

logger = logging.getLogger(__name__)


def add_init_settings_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add init-settings subcommand parser.

    Args:
        subparsers: The subparsers action from argparse.
    """
    init_parser = subparsers.add_parser(
        "init-settings",
        help="Write default settings for every print mode and global settings.",
    )
    init_parser.add_argument(
        "--settings-dir",
        default="print-settings",
        help="Directory to write settings records to",
    )
    init_parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace existing records with the defaults",
    )


def run_init_settings(args: argparse.Namespace) -> int:
    """Execute the init-settings command.

    Returns:
        Exit code: 0 for success, 1 if the directory cannot be written.
    """
    store = SettingsStore(Path(args.settings_dir))
    try:
        written = store.init_defaults(overwrite=args.overwrite)
    except OSError as e:
        logger.error("Cannot write settings to %s: %s", args.settings_dir, e)
        return 1
    for path in written:
        print(f"Wrote {path}")
    if not written:
        print(f"All settings already exist in {args.settings_dir}")
    return 0
