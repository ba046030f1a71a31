"""Page and batch composition.

A page is the background layer, every allowed and visible element in
registry order, and the badge layer on top. A batch is one page per
billboard per copy pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from html import escape

from billboard_print.print_engine.layout import markup
from billboard_print.print_engine.layout.config import EngineConfig, PrintToggles
from billboard_print.print_engine.layout.elements import ELEMENT_ORDER, ElementKey
from billboard_print.print_engine.layout.facts import (
    BillboardPrintFacts,
    ContractInfo,
    PreparedBillboard,
    simulate_status,
)
from billboard_print.print_engine.layout.modes import PrintMode
from billboard_print.print_engine.layout.overrides import effective
from billboard_print.print_engine.layout.renderer import render, render_badges
from billboard_print.print_engine.layout.session import (
    CopyKind,
    PrintTarget,
    RenderSession,
    Surface,
)
from billboard_print.print_engine.layout.settings import GlobalSettings, ModeSettings
from billboard_print.print_engine.layout.status_classifier import (
    detect_badges,
    override_status,
)
from billboard_print.print_engine.layout.style import StyleDeclaration

logger = logging.getLogger(__name__)

BASE_ELEMENTS: frozenset[ElementKey] = frozenset(
    {
        ElementKey.CONTRACT_NUMBER,
        ElementKey.AD_TYPE,
        ElementKey.BILLBOARD_NAME,
        ElementKey.SIZE,
        ElementKey.FACES_COUNT,
        ElementKey.IMAGE,
        ElementKey.LOCATION_INFO,
        ElementKey.LANDMARK_INFO,
        ElementKey.QR_CODE,
        ElementKey.INSTALLATION_DATE,
    }
)

# Elements each mode adds in the editor, where every slot must be placeable.
EDITOR_MODE_ELEMENTS: dict[PrintMode, frozenset[ElementKey]] = {
    PrintMode.DEFAULT: frozenset({ElementKey.DESIGNS}),
    PrintMode.WITH_DESIGN: frozenset({ElementKey.DESIGNS}),
    PrintMode.WITHOUT_DESIGN: frozenset(),
    PrintMode.TWO_FACES: frozenset({ElementKey.FACE_A_IMAGE, ElementKey.FACE_B_IMAGE}),
    PrintMode.TWO_FACES_WITH_DESIGNS: frozenset(
        {ElementKey.DESIGNS, ElementKey.TWO_FACES_CONTAINER}
    ),
    PrintMode.SINGLE_FACE: frozenset({ElementKey.FACE_A_IMAGE}),
    PrintMode.SINGLE_INSTALLATION_WITH_DESIGNS: frozenset({ElementKey.DESIGNS}),
}


def print_elements(
    mode: PrintMode,
    facts: BillboardPrintFacts,
    *,
    copy_kind: CopyKind = CopyKind.CUSTOMER,
    toggles: PrintToggles | None = None,
    smart: bool = True,
) -> frozenset[ElementKey]:
    """Return the elements a printed page of ``mode`` may contain.

    Installation photo slots are shown when the installation toggle is on,
    or when smart mode found the photos they need.
    """
    toggles = toggles or PrintToggles()
    allowed = set(BASE_ELEMENTS)
    if copy_kind == CopyKind.TEAM:
        allowed.add(ElementKey.PRINT_TYPE)
    if toggles.show_cutouts and facts.has_cutout_image:
        allowed.add(ElementKey.CUTOUT_IMAGE)

    photos = facts.installation_photo_count
    show_designs = toggles.show_designs
    show_pair = toggles.show_installation_images or (smart and photos == 2)
    show_single = toggles.show_installation_images or (smart and photos >= 1)

    if mode == PrintMode.TWO_FACES_WITH_DESIGNS:
        if show_designs:
            allowed.add(ElementKey.DESIGNS)
        if show_pair:
            allowed.add(ElementKey.TWO_FACES_CONTAINER)
    elif mode == PrintMode.TWO_FACES:
        if show_pair:
            allowed.update((ElementKey.FACE_A_IMAGE, ElementKey.FACE_B_IMAGE))
    elif mode == PrintMode.SINGLE_INSTALLATION_WITH_DESIGNS:
        if show_designs and facts.design_count > 0:
            allowed.add(ElementKey.DESIGNS)
        if show_single:
            allowed.add(ElementKey.SINGLE_INSTALLATION_IMAGE)
    elif mode == PrintMode.SINGLE_FACE:
        if show_single:
            allowed.add(ElementKey.FACE_A_IMAGE)
    elif mode == PrintMode.WITH_DESIGN:
        if show_designs:
            allowed.add(ElementKey.DESIGNS)
    elif mode == PrintMode.DEFAULT:
        if show_designs and facts.design_count > 0:
            allowed.add(ElementKey.DESIGNS)
    return frozenset(allowed)


def editor_elements(
    mode: PrintMode, copy_kind: CopyKind = CopyKind.CUSTOMER
) -> frozenset[ElementKey]:
    """Return the elements the live editor shows for ``mode``."""
    allowed = set(BASE_ELEMENTS)
    allowed.update(
        (
            ElementKey.CUTOUT_IMAGE,
            ElementKey.SINGLE_INSTALLATION_IMAGE,
            ElementKey.LINKED_INSTALLATION_IMAGES,
        )
    )
    allowed.update(EDITOR_MODE_ELEMENTS[mode])
    if copy_kind == CopyKind.TEAM:
        allowed.add(ElementKey.PRINT_TYPE)
    return frozenset(allowed)


def _page_style(
    session: RenderSession, global_settings: GlobalSettings
) -> StyleDeclaration:
    return StyleDeclaration.of(
        position="relative",
        width=global_settings.background_width,
        height=global_settings.background_height,
        overflow="hidden",
    ).scaled(session.zoom)


def compose_page(
    session: RenderSession,
    settings: ModeSettings,
    *,
    config: EngineConfig | None = None,
    global_settings: GlobalSettings | None = None,
    allowed: Iterable[ElementKey] | None = None,
) -> str:
    """Compose one page for the billboard of ``session``.

    Args:
        session: Facts, QR image, copy kind, surface and toggles of the page.
            The session must carry facts.
        settings: Settings of the session's active mode.
        config: Labels and fallbacks; defaults when omitted.
        global_settings: Background and page size; defaults when omitted.
        allowed: Elements the page may contain. When omitted, the editor
            list is used for previews and the print list otherwise.

    Returns:
        The page markup.
    """
    if session.facts is None:
        raise ValueError("compose_page needs a session with facts")
    config = config or EngineConfig()
    global_settings = global_settings or GlobalSettings()

    mode = session.active_mode
    facts = session.facts
    preview = session.surface == Surface.PREVIEW
    if preview:
        facts = simulate_status(
            facts, session.preview_status, config.placeholder_image_url
        )
    status = override_status(facts, session.preview_status)

    if allowed is None:
        if preview:
            allowed = editor_elements(mode, session.copy_kind)
        else:
            allowed = print_elements(
                mode,
                facts,
                copy_kind=session.copy_kind,
                toggles=session.toggles,
                smart=session.smart,
            )
    allowed = frozenset(allowed)

    target = session.target
    layers: list[str] = []
    if session.toggles.show_background:
        background = global_settings.background_url or config.default_background_url
        layers.append(markup.img(background, css_class="background"))

    for key in ELEMENT_ORDER:
        if key not in allowed:
            continue
        element_settings = effective(settings, key, status)
        if not element_settings.visible:
            continue
        rendered = render(
            key,
            element_settings,
            facts,
            target,
            config=config,
            qr_url=session.qr_url,
        )
        if rendered is not None:
            layers.append(rendered.to_html())

    badges = detect_badges(facts, session.toggles, session.preview_status)
    badge_layer = render_badges(
        badges,
        effective(settings, ElementKey.STATUS_BADGES, status),
        target,
        config=config,
    )
    if badge_layer:
        layers.append(badge_layer)

    logger.debug(
        "Billboard %s: mode=%s status=%s copy=%s layers=%d",
        facts.id,
        mode.value,
        status.value if status else None,
        session.copy_kind.value,
        len(layers),
    )
    return markup.div(
        "".join(layers),
        _page_style(session, global_settings),
        css_class="print-page",
        data_billboard_id=str(facts.id),
        data_mode=mode.value,
        data_copy=session.copy_kind.value,
    )


def compose_batch(
    billboards: Sequence[PreparedBillboard],
    target: PrintTarget,
    session: RenderSession,
    settings_by_mode: Mapping[PrintMode, ModeSettings],
    *,
    config: EngineConfig | None = None,
    global_settings: GlobalSettings | None = None,
) -> list[str]:
    """Compose one page per billboard per copy pass.

    With ``PrintTarget.BOTH`` every customer page precedes every team page.
    Modes missing from ``settings_by_mode`` render with built-in defaults.
    """
    pages = []
    for copy_kind in target.copies:
        for billboard in billboards:
            page_session = session.with_changes(
                facts=billboard.facts,
                qr_url=billboard.qr_url,
                copy_kind=copy_kind,
                surface=Surface.PRINT,
            )
            mode = page_session.active_mode
            settings = settings_by_mode.get(mode)
            if settings is None:
                logger.debug("No stored settings for %s, using defaults", mode.value)
                settings = ModeSettings.defaults()
            pages.append(
                compose_page(
                    page_session,
                    settings,
                    config=config,
                    global_settings=global_settings,
                )
            )
    logger.info(
        "Composed %d pages for %d billboards (%s)",
        len(pages),
        len(billboards),
        target.value,
    )
    return pages


DOCUMENT_CSS = """\
@page {{ size: A4; margin: 0; }}
html, body {{ margin: 0; padding: 0; }}
body {{
  font-family: {fonts};
  direction: {direction};
  -webkit-print-color-adjust: exact;
  print-color-adjust: exact;
}}
.print-page {{
  width: 210mm;
  height: 297mm;
  position: relative;
  overflow: hidden;
  page-break-after: always;
}}
.print-page:last-child {{ page-break-after: auto; }}
img.background {{
  position: absolute;
  top: 0;
  left: 0;
  width: 100%;
  height: 100%;
  object-fit: cover;
  z-index: 0;
}}
"""


def _quoted_font(name: str) -> str:
    return "'" + name.replace("'", "").replace("<", "") + "'"


def compose_document(
    pages: Iterable[str],
    *,
    title: str = "",
    global_settings: GlobalSettings | None = None,
    config: EngineConfig | None = None,
) -> str:
    """Wrap page fragments in a printable HTML document."""
    config = config or EngineConfig()
    global_settings = global_settings or GlobalSettings()
    fonts = [
        _quoted_font(font)
        for font in (global_settings.primary_font, global_settings.secondary_font)
        if font
    ]
    css = DOCUMENT_CSS.format(
        fonts=", ".join([*fonts, "Arial", "sans-serif"]),
        direction=config.text_direction,
    )
    if global_settings.custom_css:
        css += global_settings.custom_css.replace("</", "<\\/") + "\n"
    return (
        "<!DOCTYPE html>\n"
        f'<html dir="{config.text_direction}">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>\n{css}</style>\n"
        "</head>\n"
        "<body>\n" + "\n".join(pages) + "\n</body>\n</html>\n"
    )


def document_title(
    contract: ContractInfo | None,
    billboard_count: int,
    *,
    team_name: str | None = None,
    removal: bool = False,
    config: EngineConfig | None = None,
) -> str:
    """Return the window title of a batch, skipping empty parts."""
    labels = (config or EngineConfig()).labels
    parts = [labels.removal_title if removal else labels.installation_title]
    if contract is not None:
        if contract.contract_number is not None:
            parts.append(f"{labels.contract_title} #{contract.contract_number}")
        parts.append(contract.customer_name or "")
        parts.append(contract.ad_type or "")
    parts.append(f"{billboard_count} {labels.billboards_title}")
    parts.append(team_name or "")
    return " - ".join(part for part in parts if part)
