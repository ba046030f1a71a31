"""Resolution of effective element settings under a status override."""

from __future__ import annotations

from billboard_print.print_engine.layout.elements import ElementKey
from billboard_print.print_engine.layout.modes import StatusOverrideKey
from billboard_print.print_engine.layout.settings import (
    ElementSettings,
    ModeSettings,
    apply_patch,
)


def effective(
    settings: ModeSettings,
    key: ElementKey,
    status: StatusOverrideKey | None = None,
) -> ElementSettings:
    """Return the settings an element renders with.

    The mode's base settings for ``key``, with the override of ``status``
    shallow-merged on top when one exists. Fields the override leaves unset
    fall through to the base. Neither input is modified.
    """
    base = settings.element(key)
    if status is None:
        return base
    return apply_patch(base, settings.override(status, key))


def effective_elements(
    settings: ModeSettings, status: StatusOverrideKey | None = None
) -> dict[ElementKey, ElementSettings]:
    """Return the effective settings of every registered element."""
    return {key: effective(settings, key, status) for key in ElementKey}
