"""Command implementations for the billboard print CLI."""

from .init_settings import add_init_settings_parser, run_init_settings
from .preview import add_preview_parser, run_preview
from .render import add_render_parser, run_render

__all__ = [
    "add_init_settings_parser",
    "add_preview_parser",
    "add_render_parser",
    "run_init_settings",
    "run_preview",
    "run_render",
]
