"""Shared fixtures for print engine tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from billboard_print.print_engine.fixtures import (
    DESIGN_A,
    DESIGN_B,
    INSTALL_A,
    INSTALL_B,
    billboard_record,
)
from billboard_print.print_engine.layout.facts import BillboardPrintFacts


@pytest.fixture
def make_facts() -> Callable[..., BillboardPrintFacts]:
    """Factory for facts from a default record with overrides."""

    def _make(**overrides: Any) -> BillboardPrintFacts:
        return BillboardPrintFacts.model_validate(billboard_record(**overrides))

    return _make


@pytest.fixture
def full_two_face_facts(make_facts) -> BillboardPrintFacts:
    """Two faces, both installation photos and both designs."""
    return make_facts(
        installed_image_face_a_url=INSTALL_A,
        installed_image_face_b_url=INSTALL_B,
        design_face_a=DESIGN_A,
        design_face_b=DESIGN_B,
    )


@pytest.fixture
def bare_facts(make_facts) -> BillboardPrintFacts:
    """No designs and no installation photos."""
    return make_facts()
