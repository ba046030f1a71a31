"""Tests for the element registry."""

import pytest

from billboard_print.print_engine.layout.elements import (
    DEFAULT_ELEMENT_RECORDS,
    ELEMENT_LABELS,
    ELEMENT_ORDER,
    FACE_PAIR,
    ElementKey,
    linked_group_for,
)


class TestElementKey:
    """Tests for ElementKey."""

    def test_parse(self) -> None:
        assert ElementKey.parse("faceAImage") == ElementKey.FACE_A_IMAGE
        assert ElementKey.parse("legacyWidget") is None

    def test_every_key_is_registered(self) -> None:
        assert set(DEFAULT_ELEMENT_RECORDS) == set(ElementKey)
        assert set(ELEMENT_LABELS) == set(ElementKey)
        assert len(ELEMENT_ORDER) == len(ElementKey)


class TestLinkedFieldGroup:
    """Tests for the face pair."""

    def test_partner(self) -> None:
        assert FACE_PAIR.partner(ElementKey.FACE_A_IMAGE) == ElementKey.FACE_B_IMAGE
        assert FACE_PAIR.partner(ElementKey.FACE_B_IMAGE) == ElementKey.FACE_A_IMAGE

    def test_partner_of_outsider(self) -> None:
        with pytest.raises(KeyError):
            FACE_PAIR.partner(ElementKey.IMAGE)

    def test_lookup(self) -> None:
        assert linked_group_for(ElementKey.FACE_B_IMAGE) is FACE_PAIR
        assert linked_group_for(ElementKey.DESIGNS) is None

    def test_defaults_agree_on_linked_fields(self) -> None:
        face_a = DEFAULT_ELEMENT_RECORDS[ElementKey.FACE_A_IMAGE]
        face_b = DEFAULT_ELEMENT_RECORDS[ElementKey.FACE_B_IMAGE]
        for field in ("top", "width", "height", "borderWidth", "borderColor"):
            assert face_a.get(field) == face_b.get(field), field
