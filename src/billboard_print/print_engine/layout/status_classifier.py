"""Exception status classification and badge detection.

Two views of the same predicates exist. ``classify_status`` picks the single
status whose overrides patch a page, first match wins. ``detect_badges``
evaluates the badge predicates on their own, so a billboard may show several
badges at once while still resolving overrides against one status.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from billboard_print.print_engine.layout.config import PrintToggles
from billboard_print.print_engine.layout.facts import BillboardPrintFacts
from billboard_print.print_engine.layout.modes import PreviewStatus, StatusOverrideKey

logger = logging.getLogger(__name__)


def has_no_design(facts: BillboardPrintFacts) -> bool:
    return facts.design_count == 0


def has_one_design_only(facts: BillboardPrintFacts) -> bool:
    return facts.has_two_faces and facts.has_design_a and not facts.has_design_b


def has_one_install_only(facts: BillboardPrintFacts) -> bool:
    return (
        facts.has_two_faces
        and facts.install_a_url is not None
        and facts.install_b_url is None
    )


STATUS_RULES: tuple[
    tuple[StatusOverrideKey, Callable[[BillboardPrintFacts], bool]], ...
] = (
    (StatusOverrideKey.NO_DESIGN, has_no_design),
    (StatusOverrideKey.ONE_DESIGN, has_one_design_only),
    (StatusOverrideKey.ONE_INSTALL, has_one_install_only),
)


def classify_status(facts: BillboardPrintFacts) -> StatusOverrideKey | None:
    """Return the first exception status ``facts`` matches, or None."""
    for status, predicate in STATUS_RULES:
        if predicate(facts):
            logger.debug("Billboard %s: status %s", facts.id, status.value)
            return status
    return None


def override_status(
    facts: BillboardPrintFacts, preview: PreviewStatus = PreviewStatus.NONE
) -> StatusOverrideKey | None:
    """Return the status whose overrides apply to a page.

    A preview that selects one status wins over classification. ``NONE`` and
    ``ALL`` fall back to classifying the facts.
    """
    selected = preview.override_key
    if selected is not None:
        return selected
    return classify_status(facts)


def _badge_enabled(status: StatusOverrideKey, toggles: PrintToggles) -> bool:
    if status == StatusOverrideKey.NO_DESIGN:
        return toggles.show_no_design_badge
    if status == StatusOverrideKey.ONE_DESIGN:
        return toggles.show_one_design_badge
    return toggles.show_one_install_badge


def detect_badges(
    facts: BillboardPrintFacts,
    toggles: PrintToggles,
    preview: PreviewStatus = PreviewStatus.NONE,
) -> list[StatusOverrideKey]:
    """Return the badges to draw on a page, in display order.

    Args:
        facts: The billboard being rendered.
        toggles: The badge layer toggle and the per-badge toggles.
        preview: A previewed status shows exactly its own badge; ``ALL``
            shows every badge regardless of the facts.

    Returns:
        The enabled badges. "no-design" and "one-design" exclude each other;
        "one-install" is evaluated independently of both.
    """
    if not toggles.show_status_badges:
        return []

    if preview == PreviewStatus.ALL:
        found = [status for status, _ in STATUS_RULES]
    elif preview.override_key is not None:
        found = [preview.override_key]
    else:
        found = []
        if has_no_design(facts):
            found.append(StatusOverrideKey.NO_DESIGN)
        elif has_one_design_only(facts):
            found.append(StatusOverrideKey.ONE_DESIGN)
        if has_one_install_only(facts):
            found.append(StatusOverrideKey.ONE_INSTALL)

    return [status for status in found if _badge_enabled(status, toggles)]
