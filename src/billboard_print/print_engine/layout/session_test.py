"""Tests for render sessions."""

import pydantic
import pytest

from billboard_print.print_engine.layout.modes import PrintMode
from billboard_print.print_engine.layout.session import (
    CopyKind,
    PrintTarget,
    RenderSession,
    Surface,
)


class TestPrintTarget:
    def test_copies(self) -> None:
        assert PrintTarget.CUSTOMER.copies == (CopyKind.CUSTOMER,)
        assert PrintTarget.TEAM.copies == (CopyKind.TEAM,)
        assert PrintTarget.BOTH.copies == (CopyKind.CUSTOMER, CopyKind.TEAM)


class TestRenderSession:
    """Tests for RenderSession."""

    def test_with_changes_returns_a_new_session(self, bare_facts) -> None:
        session = RenderSession()
        changed = session.with_changes(facts=bare_facts, copy_kind=CopyKind.TEAM)
        assert session.facts is None
        assert changed.facts == bare_facts
        assert changed.target.is_team

    def test_changes_are_validated(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            RenderSession().with_changes(zoom=0)

    def test_sessions_are_frozen(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            RenderSession().zoom = 2

    def test_active_mode(self, full_two_face_facts) -> None:
        session = RenderSession(facts=full_two_face_facts, mode=PrintMode.DEFAULT)
        assert session.active_mode == PrintMode.TWO_FACES_WITH_DESIGNS
        manual = session.with_changes(smart=False)
        assert manual.active_mode == PrintMode.DEFAULT

    def test_target(self) -> None:
        target = RenderSession(surface=Surface.PREVIEW, zoom=0.75).target
        assert target.is_preview
        assert not target.is_team
        assert target.zoom == 0.75
