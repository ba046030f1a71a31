"""End-to-end print runs: gather facts, prepare, sort and compose."""

from __future__ import annotations

import logging

from billboard_print.print_engine.cli.config import ProcessingConfig
from billboard_print.print_engine.layout.composer import (
    compose_batch,
    compose_document,
    compose_page,
    document_title,
)
from billboard_print.print_engine.layout.config import EngineConfig
from billboard_print.print_engine.layout.facts import (
    BillboardPrintFacts,
    PreparedBillboard,
)
from billboard_print.print_engine.layout.session import RenderSession, Surface
from billboard_print.print_engine.layout.sorting import sort_for_print
from billboard_print.print_engine.prepare.batch import BatchItem, prepare_batch
from billboard_print.print_engine.prepare.sources import (
    FactsSource,
    HttpFactsSource,
    JsonFactsSource,
)
from billboard_print.print_engine.storage.store import SettingsStore

logger = logging.getLogger(__name__)


async def _prepare(
    config: ProcessingConfig, engine_config: EngineConfig
) -> list[PreparedBillboard]:
    items: list[BatchItem]
    source: FactsSource
    if config.facts_path is not None:
        source = JsonFactsSource(config.facts_path)
        if config.billboard_ids:
            items = list(config.billboard_ids)
        else:
            items = list(source.all())
        return await prepare_batch(
            items,
            source,
            config=engine_config,
            show_progress=config.show_progress,
        )

    if not config.billboard_ids:
        raise ValueError("--billboard is required with --api-url")
    async with HttpFactsSource(
        config.api_url or "",
        max_calls=config.max_calls,
        period=config.period,
    ) as http_source:
        return await prepare_batch(
            list(config.billboard_ids),
            http_source,
            config=engine_config,
            show_progress=config.show_progress,
        )


def _session(config: ProcessingConfig, surface: Surface) -> RenderSession:
    return RenderSession(
        mode=config.mode,
        smart=config.smart,
        preview_status=config.preview_status,
        copy_kind=config.copy_kind,
        surface=surface,
        toggles=config.toggles,
        zoom=config.zoom if surface == Surface.PREVIEW else 1.0,
    )


async def render_batch_document(
    config: ProcessingConfig, engine_config: EngineConfig
) -> str:
    """Prepare, sort and compose every selected billboard into one document."""
    store = SettingsStore(config.settings_dir)
    prepared = await _prepare(config, engine_config)
    ordered = sort_for_print(prepared, lambda b: b.facts, engine_config)
    global_settings = store.load_global()

    pages = compose_batch(
        ordered,
        config.target,
        _session(config, Surface.PRINT),
        store.load_all_modes(),
        config=engine_config,
        global_settings=global_settings,
    )
    first: BillboardPrintFacts | None = ordered[0].facts if ordered else None
    title = document_title(
        first.contract if first else None,
        len(ordered),
        team_name=config.team_name or (first.team_name if first else None),
        removal=config.removal,
        config=engine_config,
    )
    return compose_document(
        pages, title=title, global_settings=global_settings, config=engine_config
    )


async def render_preview_document(
    config: ProcessingConfig, engine_config: EngineConfig
) -> str:
    """Compose the live preview page of the first selected billboard."""
    store = SettingsStore(config.settings_dir)
    prepared = await _prepare(config, engine_config)
    if not prepared:
        raise ValueError("No billboard to preview")
    billboard = prepared[0]

    session = _session(config, Surface.PREVIEW).with_changes(
        facts=billboard.facts, qr_url=billboard.qr_url
    )
    global_settings = store.load_global()
    page = compose_page(
        session,
        store.load_mode(session.active_mode),
        config=engine_config,
        global_settings=global_settings,
    )
    return compose_document(
        [page],
        title=billboard.facts.name or str(billboard.facts.id),
        global_settings=global_settings,
        config=engine_config,
    )
