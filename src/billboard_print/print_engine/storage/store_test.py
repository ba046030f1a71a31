"""Tests for the file-backed settings store."""

import json
from pathlib import Path

import pytest

from billboard_print.print_engine.layout.elements import ElementKey
from billboard_print.print_engine.layout.modes import PrintMode, StatusOverrideKey
from billboard_print.print_engine.layout.settings import GlobalSettings, ModeSettings
from billboard_print.print_engine.storage.store import SettingsStore


@pytest.fixture
def store(tmp_path: Path) -> SettingsStore:
    return SettingsStore(tmp_path / "settings")


class TestLoad:
    """Loading records merges them over the defaults."""

    def test_missing_directory(self, store) -> None:
        assert store.load_mode(PrintMode.DEFAULT) == ModeSettings.defaults()
        assert store.load_global() == GlobalSettings()

    def test_partial_record(self, store) -> None:
        store.directory.mkdir()
        (store.directory / "two_faces.json").write_text(
            json.dumps({"size": {"top": "1mm"}}), encoding="utf-8"
        )
        settings = store.load_mode(PrintMode.TWO_FACES)
        assert settings.element(ElementKey.SIZE).top == "1mm"
        assert settings.element(ElementKey.QR_CODE).width == "100px"

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_unreadable_record(self, store, content) -> None:
        store.directory.mkdir()
        (store.directory / "default.json").write_text(content, encoding="utf-8")
        assert store.load_mode(PrintMode.DEFAULT) == ModeSettings.defaults()

    def test_invalid_global(self, store) -> None:
        store.directory.mkdir()
        (store.directory / "global.json").write_text(
            json.dumps({"primary_font": ["not", "a", "font"]}), encoding="utf-8"
        )
        assert store.load_global() == GlobalSettings()


class TestSave:
    """Saved records round-trip through the store."""

    def test_mode_round_trip(self, store) -> None:
        settings = ModeSettings.defaults().with_field(
            ElementKey.IMAGE, "top", "2mm", status=StatusOverrideKey.ONE_INSTALL
        )
        store.save_mode(PrintMode.SINGLE_FACE, settings)

        assert store.load_mode(PrintMode.SINGLE_FACE) == settings
        record = json.loads(
            (store.directory / "single_face.json").read_text(encoding="utf-8")
        )
        assert record["__statusOverrides"]["one-install"]["image"] == {"top": "2mm"}

    def test_global_round_trip(self, store) -> None:
        settings = GlobalSettings(background_url="https://x/bg.png", custom_css="p {}")
        store.save_global(settings)
        assert store.load_global() == settings

    def test_modes_are_independent(self, store) -> None:
        store.save_mode(
            PrintMode.WITH_DESIGN,
            ModeSettings.defaults().with_field(ElementKey.SIZE, "top", "3mm"),
        )
        assert store.load_mode(PrintMode.DEFAULT).element(ElementKey.SIZE).top == (
            "184px"
        )


class TestBulkOperations:
    """Apply-to-all, reset and override deletion."""

    def test_apply_to_all_keeps_each_modes_overrides(self, store) -> None:
        with_override = ModeSettings.defaults().with_field(
            ElementKey.SIZE, "color", "#f00", status=StatusOverrideKey.NO_DESIGN
        )
        store.save_mode(PrintMode.TWO_FACES, with_override)
        source = ModeSettings.defaults().with_field(ElementKey.SIZE, "top", "9mm")

        store.apply_to_all_modes(source)

        for mode in PrintMode:
            assert store.load_mode(mode).element(ElementKey.SIZE).top == "9mm"
        two_faces = store.load_mode(PrintMode.TWO_FACES)
        assert two_faces.override(StatusOverrideKey.NO_DESIGN, ElementKey.SIZE)
        default = store.load_mode(PrintMode.DEFAULT)
        assert default.override(StatusOverrideKey.NO_DESIGN, ElementKey.SIZE) is None

    def test_reset_mode(self, store) -> None:
        store.save_mode(
            PrintMode.DEFAULT,
            ModeSettings.defaults().with_field(ElementKey.SIZE, "top", "3mm"),
        )
        assert store.reset_mode(PrintMode.DEFAULT) == ModeSettings.defaults()
        assert store.load_mode(PrintMode.DEFAULT) == ModeSettings.defaults()

    def test_delete_status_overrides(self, store) -> None:
        base = ModeSettings.defaults().with_field(ElementKey.SIZE, "top", "3mm")
        settings = base.with_field(
            ElementKey.SIZE, "top", "4mm", status=StatusOverrideKey.ONE_DESIGN
        )
        store.save_mode(PrintMode.DEFAULT, settings)

        deleted = store.delete_status_overrides(
            PrintMode.DEFAULT, StatusOverrideKey.ONE_DESIGN
        )

        assert deleted == base
        assert store.load_mode(PrintMode.DEFAULT) == base


class TestInitDefaults:
    """Tests for init_defaults."""

    def test_writes_every_record(self, store) -> None:
        written = store.init_defaults()
        assert len(written) == len(PrintMode) + 1
        assert all(path.exists() for path in written)

    def test_keeps_existing_records(self, store) -> None:
        edited = ModeSettings.defaults().with_field(ElementKey.SIZE, "top", "3mm")
        store.save_mode(PrintMode.DEFAULT, edited)

        written = store.init_defaults()

        assert store.directory / "default.json" not in written
        assert store.load_mode(PrintMode.DEFAULT) == edited

    def test_overwrite(self, store) -> None:
        store.init_defaults()
        assert len(store.init_defaults(overwrite=True)) == len(PrintMode) + 1
        assert store.init_defaults() == []
