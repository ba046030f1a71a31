"""Render session: the immutable state of one print or preview pass."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from billboard_print.print_engine.layout.config import PrintToggles
from billboard_print.print_engine.layout.facts import BillboardPrintFacts
from billboard_print.print_engine.layout.mode_classifier import resolve_mode
from billboard_print.print_engine.layout.modes import PreviewStatus, PrintMode


class CopyKind(str, Enum):
    """Audience of one printed page."""

    CUSTOMER = "customer"
    TEAM = "team"


class PrintTarget(str, Enum):
    """Audience selection of a batch. ``BOTH`` prints every page twice."""

    CUSTOMER = "customer"
    TEAM = "team"
    BOTH = "both"

    @property
    def copies(self) -> tuple[CopyKind, ...]:
        """Copy passes of this target, in print order."""
        if self == PrintTarget.BOTH:
            return (CopyKind.CUSTOMER, CopyKind.TEAM)
        return (CopyKind(self.value),)


class Surface(str, Enum):
    """Where the output is shown."""

    PRINT = "print"
    PREVIEW = "preview"


class RenderTarget(BaseModel):
    """Audience and surface of one rendered element."""

    model_config = ConfigDict(frozen=True)

    copy_kind: CopyKind = CopyKind.CUSTOMER
    surface: Surface = Surface.PRINT
    zoom: float = Field(default=1.0, gt=0, description="Preview length scale.")

    @property
    def is_preview(self) -> bool:
        return self.surface == Surface.PREVIEW

    @property
    def is_team(self) -> bool:
        return self.copy_kind == CopyKind.TEAM


class RenderSession(BaseModel):
    """Everything one render pass depends on apart from stored settings.

    Sessions are values: ``with_changes`` returns a new session and the
    original stays untouched.
    """

    model_config = ConfigDict(frozen=True)

    facts: BillboardPrintFacts | None = None
    qr_url: str | None = None
    mode: PrintMode = Field(
        default=PrintMode.DEFAULT, description="Mode used when smart is off."
    )
    smart: bool = Field(default=True, description="Classify the mode from facts.")
    preview_status: PreviewStatus = PreviewStatus.NONE
    copy_kind: CopyKind = CopyKind.CUSTOMER
    surface: Surface = Surface.PRINT
    toggles: PrintToggles = Field(default_factory=PrintToggles)
    zoom: float = Field(default=1.0, gt=0)

    def with_changes(self, **changes: Any) -> RenderSession:
        """Return a copy with ``changes`` applied and validated."""
        return self.model_validate({**dict(self), **changes})

    @property
    def active_mode(self) -> PrintMode:
        return resolve_mode(self.facts, self.mode, self.smart)

    @property
    def target(self) -> RenderTarget:
        return RenderTarget(
            copy_kind=self.copy_kind, surface=self.surface, zoom=self.zoom
        )
