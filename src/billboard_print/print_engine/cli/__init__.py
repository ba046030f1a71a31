"""CLI support for the billboard print engine."""

from .config import (
    ProcessingConfig,
    add_common_arguments,
    load_engine_config,
    parse_period,
)
from .io import load_json, open_compressed, open_in_browser, write_document

__all__ = [
    "ProcessingConfig",
    "add_common_arguments",
    "load_engine_config",
    "parse_period",
    "load_json",
    "open_compressed",
    "open_in_browser",
    "write_document",
]
