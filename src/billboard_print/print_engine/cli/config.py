"""CLI configuration and argument parsing."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

import pytimeparse2

from billboard_print.print_engine.cli.io import load_json
from billboard_print.print_engine.layout.config import EngineConfig, PrintToggles
from billboard_print.print_engine.layout.modes import (
    PRINT_MODE_LABELS,
    PreviewStatus,
    PrintMode,
)
from billboard_print.print_engine.layout.session import CopyKind, PrintTarget


def parse_period(value: str) -> float:
    """Parse a duration such as "1s", "30s" or "2m" into seconds.

    Raises:
        ValueError: If the duration cannot be parsed or is not positive.
    """
    duration = pytimeparse2.parse(value, as_timedelta=True)
    if not isinstance(duration, timedelta) or duration.total_seconds() <= 0:
        raise ValueError(f"Invalid duration: {value!r}")
    return duration.total_seconds()


def load_engine_config(path: Path | None) -> EngineConfig:
    """Load an EngineConfig from JSON, or the defaults when no path is given."""
    if path is None:
        return EngineConfig()
    return EngineConfig.model_validate(load_json(path))


@dataclass
class ProcessingConfig:
    """Configuration for one render or preview run."""

    settings_dir: Path
    facts_path: Path | None = None
    api_url: str | None = None
    billboard_ids: list[int] = field(default_factory=list)
    output: Path = Path("print.html")
    open_output: bool = False

    mode: PrintMode = PrintMode.DEFAULT
    smart: bool = True
    target: PrintTarget = PrintTarget.CUSTOMER
    toggles: PrintToggles = field(default_factory=PrintToggles)
    removal: bool = False
    team_name: str | None = None

    # Preview only
    zoom: float = 1.0
    preview_status: PreviewStatus = PreviewStatus.NONE

    # HTTP source
    max_calls: int = 10
    period: float = 1.0

    engine_config_path: Path | None = None
    show_progress: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ProcessingConfig:
        """Create config from parsed arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            ProcessingConfig instance

        Raises:
            ValueError: If an argument value is invalid.
        """
        toggles = PrintToggles(
            show_designs=not args.hide_designs,
            show_cutouts=not args.hide_cutouts,
            show_installation_images=not args.hide_installation_images,
            show_status_badges=not args.hide_badges,
            show_background=not args.hide_background,
        )
        return cls(
            settings_dir=Path(args.settings_dir),
            facts_path=Path(args.facts) if args.facts else None,
            api_url=args.api_url,
            billboard_ids=list(args.billboard or []),
            output=Path(args.output),
            open_output=args.open,
            mode=PrintMode(args.mode),
            smart=not args.no_smart,
            target=PrintTarget(getattr(args, "target", PrintTarget.CUSTOMER.value)),
            toggles=toggles,
            removal=getattr(args, "removal", False),
            team_name=getattr(args, "team_name", None),
            zoom=getattr(args, "zoom", 1.0),
            preview_status=PreviewStatus(
                getattr(args, "preview_status", PreviewStatus.NONE.value)
            ),
            max_calls=args.max_calls,
            period=parse_period(args.period),
            engine_config_path=Path(args.config) if args.config else None,
            show_progress=getattr(args, "progress", False),
        )

    @property
    def copy_kind(self) -> CopyKind:
        """Copy kind of a single-copy run; team for ``both``."""
        if self.target == PrintTarget.CUSTOMER:
            return CopyKind.CUSTOMER
        return CopyKind.TEAM


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the arguments shared by the render and preview commands."""
    source_group = parser.add_argument_group("Facts source")
    source = source_group.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--facts",
        help="JSON file of billboard records (.json, .json.gz or .json.bz2)",
    )
    source.add_argument(
        "--api-url",
        help="Base URL serving billboard records at /billboards/<id>",
    )
    source_group.add_argument(
        "--max-calls",
        type=int,
        default=10,
        help="Maximum API requests per period. Defaults to 10.",
    )
    source_group.add_argument(
        "--period",
        default="1s",
        help="Rate limit period (e.g., 1s, 2m). Defaults to 1s.",
    )

    parser.add_argument(
        "--settings-dir",
        default="print-settings",
        help="Directory holding <mode>.json and global.json settings records",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file of engine configuration (labels, ranks, fallbacks)",
    )
    parser.add_argument(
        "--billboard",
        type=int,
        action="append",
        help="Billboard id to print; repeat for several. Defaults to all.",
    )
    parser.add_argument(
        "--output",
        "-o",
        default="print.html",
        help="Output HTML file. Defaults to print.html",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open the output in a browser for printing",
    )

    layout_group = parser.add_argument_group("Layout")
    layout_group.add_argument(
        "--mode",
        choices=[m.value for m in PrintMode],
        default=PrintMode.DEFAULT.value,
        help="Print mode used when smart classification is off ("
        + "; ".join(f"{m.value}: {label}" for m, label in PRINT_MODE_LABELS.items())
        + ")",
    )
    layout_group.add_argument(
        "--no-smart",
        action="store_true",
        help="Disable smart mode classification and use --mode",
    )

    toggle_group = parser.add_argument_group("Content toggles")
    toggle_group.add_argument("--hide-designs", action="store_true")
    toggle_group.add_argument("--hide-cutouts", action="store_true")
    toggle_group.add_argument("--hide-installation-images", action="store_true")
    toggle_group.add_argument("--hide-badges", action="store_true")
    toggle_group.add_argument("--hide-background", action="store_true")
