"""Tests for element settings, linked fields and stored-record merging."""

import pytest

from billboard_print.print_engine.layout.elements import (
    DEFAULT_ELEMENT_RECORDS,
    FACE_PAIR,
    LINKED_FIELDS,
    ElementKey,
)
from billboard_print.print_engine.layout.modes import StatusOverrideKey
from billboard_print.print_engine.layout.overrides import effective
from billboard_print.print_engine.layout.settings import (
    STATUS_OVERRIDES_KEY,
    ElementPatch,
    ElementSettings,
    ModeSettings,
    apply_patch,
    resolve_with_defaults,
)


class TestElementSettings:
    """Tests for the ElementSettings model."""

    def test_accepts_stored_camel_case(self) -> None:
        settings = ElementSettings.model_validate(
            {"fontSize": "12px", "borderRadiusTopLeft": "4px", "objectFit": "cover"}
        )
        assert settings.font_size == "12px"
        assert settings.border_radius_top_left == "4px"
        assert settings.object_fit == "cover"

    def test_numbers_become_lengths(self) -> None:
        settings = ElementSettings.model_validate({"top": 0, "rotation": "15"})
        assert settings.top == "0"
        assert settings.rotation == 15.0

    def test_to_record_round_trips_names(self) -> None:
        settings = ElementSettings(font_size="12px", visible=False)
        assert settings.to_record() == {"visible": False, "fontSize": "12px"}

    def test_every_default_validates(self) -> None:
        for key, record in DEFAULT_ELEMENT_RECORDS.items():
            assert ElementSettings.model_validate(record).visible, key


class TestApplyPatch:
    """Tests for apply_patch."""

    def test_patch_wins_per_field(self) -> None:
        base = ElementSettings(top="10mm", left="5mm", color="#000")
        patch = ElementPatch(top="20mm")

        merged = apply_patch(base, patch)

        assert merged.top == "20mm"
        assert merged.left == "5mm"
        assert merged.color == "#000"
        assert base.top == "10mm"

    def test_unset_visibility_falls_through(self) -> None:
        base = ElementSettings(visible=False)
        assert apply_patch(base, ElementPatch(top="1mm")).visible is False

    def test_patch_can_hide(self) -> None:
        base = ElementSettings(visible=True)
        assert apply_patch(base, ElementPatch(visible=False)).visible is False

    def test_none_patch(self) -> None:
        base = ElementSettings(top="1mm")
        assert apply_patch(base, None) is base


class TestLinkedFields:
    """Writing a linked field to one face writes it to the other."""

    @pytest.mark.parametrize("field", LINKED_FIELDS)
    @pytest.mark.parametrize("key", [ElementKey.FACE_A_IMAGE, ElementKey.FACE_B_IMAGE])
    def test_write_is_mirrored(self, key, field) -> None:
        settings = ModeSettings.defaults().with_field(key, field, "77px")
        partner = FACE_PAIR.partner(key)
        assert getattr(settings.element(key), field) == "77px"
        assert getattr(settings.element(partner), field) == "77px"

    def test_stored_field_name_is_accepted(self) -> None:
        settings = ModeSettings.defaults().with_field(
            ElementKey.FACE_A_IMAGE, "borderWidth", "9px"
        )
        assert settings.element(ElementKey.FACE_B_IMAGE).border_width == "9px"

    def test_unlinked_field_stays_local(self) -> None:
        settings = ModeSettings.defaults().with_field(
            ElementKey.FACE_B_IMAGE, "left", "500px"
        )
        assert settings.element(ElementKey.FACE_B_IMAGE).left == "500px"
        assert settings.element(ElementKey.FACE_A_IMAGE).left == "75px"

    def test_override_write_is_mirrored(self) -> None:
        settings = ModeSettings.defaults().with_field(
            ElementKey.FACE_A_IMAGE,
            "height",
            "120px",
            status=StatusOverrideKey.ONE_INSTALL,
        )
        patch_b = settings.override(
            StatusOverrideKey.ONE_INSTALL, ElementKey.FACE_B_IMAGE
        )
        assert patch_b is not None
        assert patch_b.height == "120px"

    def test_with_element_relinks_partner(self) -> None:
        settings = ModeSettings.defaults().with_element(
            ElementKey.FACE_A_IMAGE, ElementSettings(top="1mm", width="2mm")
        )
        face_b = settings.element(ElementKey.FACE_B_IMAGE)
        assert (face_b.top, face_b.width) == ("1mm", "2mm")
        assert face_b.left == "380px"

    def test_unknown_field_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown element setting"):
            ModeSettings.defaults().with_field(ElementKey.IMAGE, "zIndex", "3")


class TestStatusOverrides:
    """Base settings and override maps never write into each other."""

    def test_status_edit_leaves_base_untouched(self) -> None:
        base = ModeSettings.defaults()
        edited = base.with_field(
            ElementKey.IMAGE, "top", "99mm", status=StatusOverrideKey.NO_DESIGN
        )
        resolved = effective(edited, ElementKey.IMAGE, StatusOverrideKey.NO_DESIGN)
        assert edited.element(ElementKey.IMAGE) == base.element(ElementKey.IMAGE)
        assert resolved.top == "99mm"

    def test_base_edit_leaves_overrides_untouched(self) -> None:
        settings = ModeSettings.defaults().with_field(
            ElementKey.IMAGE, "top", "99mm", status=StatusOverrideKey.NO_DESIGN
        )
        edited = settings.with_field(ElementKey.IMAGE, "top", "5mm")
        patch = edited.override(StatusOverrideKey.NO_DESIGN, ElementKey.IMAGE)
        assert patch is not None and patch.top == "99mm"
        assert edited.element(ElementKey.IMAGE).top == "5mm"

    def test_deleting_overrides_restores_base_everywhere(self) -> None:
        base = ModeSettings.defaults()
        settings = base
        for key in (ElementKey.IMAGE, ElementKey.QR_CODE, ElementKey.FACE_A_IMAGE):
            settings = settings.with_field(
                key, "left", "1mm", status=StatusOverrideKey.ONE_DESIGN
            )

        deleted = settings.without_status(StatusOverrideKey.ONE_DESIGN)

        assert deleted.elements == base.elements
        assert deleted.to_record() == base.to_record()
        for key in ElementKey:
            assert effective(deleted, key, StatusOverrideKey.ONE_DESIGN) == effective(
                deleted, key
            )

    def test_deleting_one_status_keeps_others(self) -> None:
        settings = ModeSettings.defaults()
        settings = settings.with_field(
            ElementKey.IMAGE, "top", "1mm", status=StatusOverrideKey.NO_DESIGN
        )
        settings = settings.with_field(
            ElementKey.IMAGE, "top", "2mm", status=StatusOverrideKey.ONE_DESIGN
        )
        deleted = settings.without_status(StatusOverrideKey.NO_DESIGN)
        assert deleted.override(StatusOverrideKey.NO_DESIGN, ElementKey.IMAGE) is None
        assert deleted.override(StatusOverrideKey.ONE_DESIGN, ElementKey.IMAGE)


class TestResolveWithDefaults:
    """Tests for resolve_with_defaults."""

    def test_empty_record_is_defaults(self) -> None:
        assert resolve_with_defaults(None) == ModeSettings.defaults()
        assert resolve_with_defaults({}) == ModeSettings.defaults()

    def test_missing_keys_fall_back(self) -> None:
        """Records saved before an element existed still get it."""
        settings = resolve_with_defaults({"image": {"top": "1mm", "visible": True}})

        assert settings.element(ElementKey.IMAGE).top == "1mm"
        assert set(settings.elements) == set(ElementKey)
        assert settings.element(ElementKey.STATUS_BADGES).top == "260px"

    def test_stored_element_replaces_default(self) -> None:
        settings = resolve_with_defaults({"image": {"top": "1mm"}})
        assert settings.element(ElementKey.IMAGE).width is None

    def test_unknown_keys_are_ignored(self) -> None:
        settings = resolve_with_defaults({"legacyWidget": {"top": "1mm"}})
        assert settings == ModeSettings.defaults()

    def test_invalid_field_falls_back_to_default(self) -> None:
        settings = resolve_with_defaults({"image": {"objectFit": "stretch"}})
        assert settings.element(ElementKey.IMAGE).object_fit == "contain"

    def test_invalid_field_keeps_the_rest(self) -> None:
        settings = resolve_with_defaults(
            {"image": {"top": "10px", "left": "5px", "objectFit": "stretch"}}
        )
        image = settings.element(ElementKey.IMAGE)
        assert (image.top, image.left) == ("10px", "5px")
        assert image.object_fit == "contain"

    @pytest.mark.parametrize("field", ["objectFit", "rotation", "visible"])
    def test_blank_field_keeps_the_rest(self, field) -> None:
        settings = resolve_with_defaults(
            {"image": {"top": "10px", "left": "5px", field: ""}}
        )
        image = settings.element(ElementKey.IMAGE)
        assert (image.top, image.left) == ("10px", "5px")
        assert image.visible

    def test_malformed_element_keeps_default(self) -> None:
        settings = resolve_with_defaults({"image": "10px"})
        assert settings.element(ElementKey.IMAGE) == ModeSettings.defaults().element(
            ElementKey.IMAGE
        )

    def test_invalid_override_field_keeps_the_rest(self) -> None:
        settings = resolve_with_defaults(
            {
                STATUS_OVERRIDES_KEY: {
                    "one-install": {"image": {"top": "5mm", "rotation": "tilted"}}
                }
            }
        )
        patch = settings.override(StatusOverrideKey.ONE_INSTALL, ElementKey.IMAGE)
        assert patch is not None
        assert (patch.top, patch.rotation) == ("5mm", None)

    def test_diverged_pair_is_relinked_from_face_a(self) -> None:
        settings = resolve_with_defaults(
            {
                "faceAImage": {"top": "10px", "width": "200px"},
                "faceBImage": {"top": "90px", "width": "300px", "left": "400px"},
            }
        )
        face_b = settings.element(ElementKey.FACE_B_IMAGE)
        assert (face_b.top, face_b.width, face_b.left) == ("10px", "200px", "400px")

    def test_diverged_override_is_relinked_from_face_a(self) -> None:
        settings = resolve_with_defaults(
            {
                STATUS_OVERRIDES_KEY: {
                    "one-install": {"faceAImage": {"top": "10px", "width": "99px"}}
                }
            }
        )
        status = StatusOverrideKey.ONE_INSTALL
        face_a = effective(settings, ElementKey.FACE_A_IMAGE, status)
        face_b = effective(settings, ElementKey.FACE_B_IMAGE, status)

        assert (face_a.top, face_a.width) == ("10px", "99px")
        assert (face_b.top, face_b.width) == ("10px", "99px")
        assert face_b.left == settings.element(ElementKey.FACE_B_IMAGE).left

    def test_face_b_only_override_keeps_unlinked_fields(self) -> None:
        settings = resolve_with_defaults(
            {
                STATUS_OVERRIDES_KEY: {
                    "one-install": {
                        "faceBImage": {"top": "90px", "objectFit": "contain"}
                    }
                }
            }
        )
        status = StatusOverrideKey.ONE_INSTALL
        patch_b = settings.override(status, ElementKey.FACE_B_IMAGE)

        assert patch_b is not None
        assert patch_b.top is None
        assert patch_b.object_fit == "contain"
        assert (
            effective(settings, ElementKey.FACE_B_IMAGE, status).top
            == effective(settings, ElementKey.FACE_A_IMAGE, status).top
        )

    def test_face_b_only_linked_override_is_dropped(self) -> None:
        settings = resolve_with_defaults(
            {STATUS_OVERRIDES_KEY: {"one-install": {"faceBImage": {"top": "90px"}}}}
        )
        status = StatusOverrideKey.ONE_INSTALL
        assert settings.override(status, ElementKey.FACE_B_IMAGE) is None

    def test_direct_construction_is_linked(self) -> None:
        status = StatusOverrideKey.NO_DESIGN
        settings = ModeSettings(
            elements={
                ElementKey.FACE_A_IMAGE: ElementSettings(top="1px", width="2px"),
                ElementKey.FACE_B_IMAGE: ElementSettings(top="8px", left="3px"),
            },
            status_overrides={
                status: {ElementKey.FACE_A_IMAGE: ElementPatch(height="40px")}
            },
        )
        face_b = settings.element(ElementKey.FACE_B_IMAGE)
        assert (face_b.top, face_b.width, face_b.left) == ("1px", "2px", "3px")
        patch_b = settings.override(status, ElementKey.FACE_B_IMAGE)
        assert patch_b is not None and patch_b.height == "40px"

    def test_overrides_are_parsed(self) -> None:
        settings = resolve_with_defaults(
            {
                STATUS_OVERRIDES_KEY: {
                    "one-install": {"image": {"top": "5mm"}, "nope": {"top": "1"}},
                    "unknown-status": {"image": {"top": "1mm"}},
                }
            }
        )
        assert list(settings.status_overrides) == [StatusOverrideKey.ONE_INSTALL]
        patch = settings.override(StatusOverrideKey.ONE_INSTALL, ElementKey.IMAGE)
        assert patch is not None and patch.top == "5mm"

    def test_record_round_trip(self) -> None:
        settings = ModeSettings.defaults().with_field(
            ElementKey.SIZE, "color", "#f00", status=StatusOverrideKey.NO_DESIGN
        )
        assert resolve_with_defaults(settings.to_record()) == settings
