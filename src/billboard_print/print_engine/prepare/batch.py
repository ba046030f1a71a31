"""Concurrent preparation of a batch before composition.

Each billboard's facts fetch and QR generation is independent of every other
billboard's. All of them run concurrently and are joined before any page is
composed.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from qrcode.exceptions import DataOverflowError
from tqdm.auto import tqdm

from billboard_print.print_engine.layout.config import EngineConfig
from billboard_print.print_engine.layout.facts import (
    BillboardPrintFacts,
    PreparedBillboard,
)
from billboard_print.print_engine.prepare.qr import qr_payload_url, render_qr_data_url
from billboard_print.print_engine.prepare.sources import FactsSource

logger = logging.getLogger(__name__)

BatchItem = int | BillboardPrintFacts


async def prepare_billboard(
    item: BatchItem,
    source: FactsSource | None = None,
    *,
    config: EngineConfig | None = None,
    with_qr: bool = True,
) -> PreparedBillboard:
    """Fetch the facts of one billboard (unless given) and render its QR code.

    A QR code that cannot be generated leaves ``qr_url`` unset; the page then
    omits the QR element.
    """
    if isinstance(item, BillboardPrintFacts):
        facts = item
    elif source is None:
        raise ValueError(f"Billboard {item} given by id but no facts source")
    else:
        facts = await source.fetch(item)

    qr_url = None
    if with_qr:
        payload = qr_payload_url(facts, config)
        try:
            qr_url = await asyncio.to_thread(render_qr_data_url, payload)
        except DataOverflowError as e:
            logger.warning("No QR code for billboard %s: %s", facts.id, e)
    return PreparedBillboard(facts=facts, qr_url=qr_url)


async def prepare_batch(
    items: Sequence[BatchItem],
    source: FactsSource | None = None,
    *,
    config: EngineConfig | None = None,
    with_qr: bool = True,
    show_progress: bool = False,
) -> list[PreparedBillboard]:
    """Prepare every billboard of a batch concurrently.

    Args:
        items: Billboard ids to fetch from ``source``, or facts already in hand.
        source: Where ids are fetched from.
        config: QR fallback settings; defaults when omitted.
        with_qr: Generate QR code images.
        show_progress: Show a tqdm progress bar.

    Returns:
        The prepared billboards in input order, once all of them are ready.
        Cancelling the caller cancels every pending preparation and returns
        nothing.
    """
    if not items:
        return []

    with tqdm(
        total=len(items), desc="Preparing", unit="billboard", disable=not show_progress
    ) as progress:
        async with asyncio.TaskGroup() as group:
            tasks = [
                group.create_task(
                    prepare_billboard(item, source, config=config, with_qr=with_qr)
                )
                for item in items
            ]
            for task in tasks:
                task.add_done_callback(lambda _: progress.update())

    logger.debug("Prepared %d billboards", len(tasks))
    return [task.result() for task in tasks]
