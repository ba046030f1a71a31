"""Deterministic print order of a batch of billboards."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable

from billboard_print.print_engine.layout.config import EngineConfig
from billboard_print.print_engine.layout.facts import BillboardPrintFacts


def collation_key(text: str | None) -> str:
    """Locale-independent collation key: accents stripped, case folded.

    >>> collation_key("Élan") == collation_key("elan")
    True
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text.strip())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def size_rank(size: str | None, config: EngineConfig) -> int:
    if not size:
        return config.unranked_size
    normalized = size.strip().lower().replace("×", "x").replace(" ", "")
    return config.size_ranks.get(normalized, config.unranked_size)


def level_rank(level: str | None, config: EngineConfig) -> int:
    if not level:
        return config.unranked_level
    return config.level_ranks.get(level.strip().upper(), config.unranked_level)


def print_order_key(
    facts: BillboardPrintFacts, config: EngineConfig
) -> tuple[int, str, int]:
    """Sort key of one billboard: size rank, municipality, level rank."""
    return (
        size_rank(facts.size, config),
        collation_key(facts.municipality),
        level_rank(facts.level, config),
    )


def sort_for_print[T](
    items: Iterable[T],
    facts_of: Callable[[T], BillboardPrintFacts] | None = None,
    config: EngineConfig | None = None,
) -> list[T]:
    """Return ``items`` in print order.

    The sort is stable: items whose three keys tie keep their input order,
    so sorting is idempotent.

    Args:
        items: Billboards, or anything ``facts_of`` maps to billboard facts.
        facts_of: Accessor for the facts of an item; the item itself when
            omitted.
        config: Rank tables; defaults when omitted.

    Returns:
        A new list in print order.
    """
    config = config or EngineConfig()
    accessor = facts_of or (lambda item: item)
    return sorted(items, key=lambda item: print_order_key(accessor(item), config))
