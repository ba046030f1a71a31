"""File-backed settings store: one JSON record per print mode plus global."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from billboard_print.print_engine.layout.modes import PrintMode, StatusOverrideKey
from billboard_print.print_engine.layout.settings import (
    GlobalSettings,
    ModeSettings,
    resolve_with_defaults,
)

logger = logging.getLogger(__name__)

GLOBAL_KEY = "global"


class SettingsStore:
    """Reads and writes print settings under one directory.

    Records are ``<mode>.json`` for each PrintMode and ``global.json``. A
    missing or unreadable record loads as the built-in defaults.
    """

    def __init__(self, directory: Path):
        self.directory = directory

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def _read(self, key: str) -> dict[str, Any] | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable settings %s: %s", path, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring settings %s: not a JSON object", path)
            return None
        return data

    def _write(self, key: str, record: dict[str, Any]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2, ensure_ascii=False)
        logger.debug("Saved %s", path)

    def load_mode(self, mode: PrintMode) -> ModeSettings:
        """Load a mode's settings merged over the built-in defaults."""
        return resolve_with_defaults(self._read(mode.value))

    def load_all_modes(self) -> dict[PrintMode, ModeSettings]:
        return {mode: self.load_mode(mode) for mode in PrintMode}

    def save_mode(self, mode: PrintMode, settings: ModeSettings) -> None:
        self._write(mode.value, settings.to_record())

    def load_global(self) -> GlobalSettings:
        record = self._read(GLOBAL_KEY)
        if record is None:
            return GlobalSettings()
        try:
            return GlobalSettings.model_validate(record)
        except ValidationError as e:
            logger.warning("Using default global settings: %s", e)
            return GlobalSettings()

    def save_global(self, settings: GlobalSettings) -> None:
        self._write(GLOBAL_KEY, settings.model_dump(exclude_none=True))

    def apply_to_all_modes(self, settings: ModeSettings) -> None:
        """Copy the element settings of ``settings`` to every mode.

        Each mode keeps its own status overrides.
        """
        for mode in PrintMode:
            self.save_mode(mode, self.load_mode(mode).with_elements_of(settings))
        logger.info("Applied element settings to %d modes", len(PrintMode))

    def reset_mode(self, mode: PrintMode) -> ModeSettings:
        """Replace a mode's stored record with the built-in defaults."""
        settings = ModeSettings.defaults()
        self.save_mode(mode, settings)
        return settings

    def delete_status_overrides(
        self, mode: PrintMode, status: StatusOverrideKey
    ) -> ModeSettings:
        """Remove every override of ``status`` from a mode.

        The mode's base element settings are written back unchanged.
        """
        settings = self.load_mode(mode).without_status(status)
        self.save_mode(mode, settings)
        return settings

    def init_defaults(self, *, overwrite: bool = False) -> list[Path]:
        """Write the built-in defaults for every mode and global settings.

        Existing records are kept unless ``overwrite`` is set.

        Returns:
            The paths written.
        """
        written = []
        for mode in PrintMode:
            if overwrite or not self._path(mode.value).exists():
                self.save_mode(mode, ModeSettings.defaults())
                written.append(self._path(mode.value))
        if overwrite or not self._path(GLOBAL_KEY).exists():
            self.save_global(GlobalSettings())
            written.append(self._path(GLOBAL_KEY))
        return written
