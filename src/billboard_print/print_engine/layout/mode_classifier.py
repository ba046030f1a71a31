"""Smart mode classification.

Selects the layout variant of a page from the billboard's installation and
design state. Rules are evaluated in order and the first match wins; the last
rule always matches so every combination of facts yields a mode.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from billboard_print.print_engine.layout.facts import BillboardPrintFacts
from billboard_print.print_engine.layout.modes import PrintMode

logger = logging.getLogger(__name__)

ModeRule = tuple[str, Callable[[BillboardPrintFacts], bool], PrintMode]

MODE_RULES: tuple[ModeRule, ...] = (
    (
        "both photos and both designs",
        lambda f: f.installation_photo_count == 2 and f.design_count == 2,
        PrintMode.TWO_FACES_WITH_DESIGNS,
    ),
    (
        "both photos",
        lambda f: f.installation_photo_count == 2,
        PrintMode.TWO_FACES,
    ),
    (
        "one photo with designs",
        lambda f: f.installation_photo_count == 1 and f.design_count > 0,
        PrintMode.SINGLE_INSTALLATION_WITH_DESIGNS,
    ),
    (
        "one photo",
        lambda f: f.installation_photo_count == 1,
        PrintMode.SINGLE_FACE,
    ),
    (
        "designs only",
        lambda f: f.design_count > 0,
        PrintMode.WITH_DESIGN,
    ),
    (
        "nothing attached",
        lambda f: True,
        PrintMode.DEFAULT,
    ),
)


def classify_mode(facts: BillboardPrintFacts) -> PrintMode:
    """Return the print mode implied by ``facts``."""
    for name, predicate, mode in MODE_RULES:
        if predicate(facts):
            logger.debug("Billboard %s: %s -> %s", facts.id, name, mode.value)
            return mode
    raise AssertionError("unreachable: the last mode rule always matches")


def resolve_mode(
    facts: BillboardPrintFacts | None, selected: PrintMode, smart: bool
) -> PrintMode:
    """Return the classified mode when smart mode is on, else ``selected``."""
    if smart and facts is not None:
        return classify_mode(facts)
    return selected
