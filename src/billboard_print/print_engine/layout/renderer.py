"""Per-element rendering: effective settings plus facts to positioned markup.

Every ``ElementKey`` has one content resolver in ``RESOLVERS``. A resolver
returns a ``RenderedElement`` or None when the element has nothing to show on
the current surface; missing content never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from billboard_print.print_engine.layout import markup
from billboard_print.print_engine.layout.config import EngineConfig, PrintLabels
from billboard_print.print_engine.layout.elements import ElementKey
from billboard_print.print_engine.layout.facts import BillboardPrintFacts
from billboard_print.print_engine.layout.modes import StatusOverrideKey
from billboard_print.print_engine.layout.session import RenderTarget
from billboard_print.print_engine.layout.settings import ElementSettings
from billboard_print.print_engine.layout.style import (
    StyleDeclaration,
    border_radius,
    is_percentage,
    transform,
)

logger = logging.getLogger(__name__)

EMPTY_TEXT = "---"
DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class RenderedElement:
    """Position/style declarations plus content markup of one element."""

    key: ElementKey
    style: StyleDeclaration
    content: str

    def to_html(self) -> str:
        return markup.div(
            self.content,
            self.style,
            css_class=f"element element-{self.key.value}",
            data_element_key=self.key.value,
        )


@dataclass(frozen=True)
class RenderContext:
    """Inputs shared by every resolver for one element."""

    key: ElementKey
    settings: ElementSettings
    facts: BillboardPrintFacts
    target: RenderTarget
    config: EngineConfig
    qr_url: str | None = None

    @property
    def labels(self) -> PrintLabels:
        return self.config.labels


def box_style(settings: ElementSettings, config: EngineConfig) -> StyleDeclaration:
    """Absolute placement, size and typography shared by all elements."""
    font_family = settings.font_family
    if font_family == "inherit":
        font_family = None
    return StyleDeclaration.of(
        position="absolute",
        font_size=settings.font_size or "14px",
        font_weight=settings.font_weight or "400",
        color=settings.color or "#000",
        direction=config.text_direction,
        font_family=font_family,
        width=settings.width,
        height=settings.height,
        min_width=settings.min_width,
        text_align=settings.text_align,
        top=settings.top,
        left=settings.left,
        right=settings.right,
        bottom=settings.bottom,
        transform=transform(settings.left, settings.text_align, settings.rotation),
    )


def image_style(
    settings: ElementSettings,
    *,
    border_width: str,
    border_color: str,
    object_fit: str,
) -> StyleDeclaration:
    """Style of an ``<img>`` filling its slot.

    The arguments are the element type's fallbacks for unset fields.
    """
    return StyleDeclaration.of(
        width="100%",
        height="100%",
        display="block",
        object_fit=settings.object_fit or object_fit,
        object_position=settings.object_position,
        border_width=settings.border_width or border_width,
        border_style="solid",
        border_color=settings.border_color or border_color,
        border_radius=border_radius(
            settings.border_radius,
            settings.border_radius_top_left,
            settings.border_radius_top_right,
            settings.border_radius_bottom_right,
            settings.border_radius_bottom_left,
        ),
        box_sizing="border-box",
    )


def placeholder(caption: str) -> str:
    """Labeled box shown by the preview in place of a missing image."""
    style = StyleDeclaration.of(
        width="100%",
        height="100%",
        display="flex",
        align_items="center",
        justify_content="center",
        border="2px dashed #ccc",
        color="#999",
        box_sizing="border-box",
    )
    return markup.div(markup.text(caption), style, css_class="placeholder")


def _image_or_placeholder(
    ctx: RenderContext, url: str | None, style: StyleDeclaration, caption: str
) -> str | None:
    if url:
        return markup.img(url, style.scaled(ctx.target.zoom), alt=caption)
    if ctx.target.is_preview:
        return placeholder(caption)
    logger.debug("Billboard %s: no image for %s", ctx.facts.id, ctx.key.value)
    return None


def _element(ctx: RenderContext, content: str, **extra: str | None) -> RenderedElement:
    style = box_style(ctx.settings, ctx.config).with_values(**extra)
    return RenderedElement(ctx.key, style, content)


def _text(ctx: RenderContext, value: str) -> RenderedElement:
    return _element(ctx, markup.text(value))


# Text elements


def _contract_number(ctx: RenderContext) -> RenderedElement:
    contract = ctx.facts.contract
    number = contract.contract_number if contract else None
    prefix = ctx.settings.label or ctx.labels.contract_prefix
    return _text(ctx, f"{prefix} {number if number is not None else EMPTY_TEXT}")


def _ad_type(ctx: RenderContext) -> RenderedElement:
    contract = ctx.facts.contract
    ad_type = contract.ad_type if contract else None
    label = ctx.settings.label or ctx.labels.ad_type_label
    return _text(ctx, f"{label} {ad_type or EMPTY_TEXT}")


def _billboard_name(ctx: RenderContext) -> RenderedElement:
    return _text(ctx, ctx.facts.name or "")


def _size(ctx: RenderContext) -> RenderedElement:
    return _text(ctx, ctx.facts.size or "")


def _faces_count(ctx: RenderContext) -> RenderedElement:
    prefix = ctx.settings.label or ctx.labels.faces_prefix
    value = f"{prefix} {ctx.facts.faces}"
    if ctx.facts.has_cutout_image:
        value = f"{ctx.labels.cutout_prefix} {value}"
    return _text(ctx, value)


def _location_info(ctx: RenderContext) -> RenderedElement:
    parts = [p for p in (ctx.facts.municipality, ctx.facts.district) if p]
    return _text(ctx, " - ".join(parts))


def _landmark_info(ctx: RenderContext) -> RenderedElement:
    return _text(ctx, ctx.facts.nearest_landmark or "")


def _installation_date(ctx: RenderContext) -> RenderedElement:
    date = ctx.facts.installation_date
    if date is None:
        return _text(ctx, ctx.labels.not_installed)
    prefix = ctx.settings.label or ctx.labels.installed_prefix
    return _text(ctx, f"{prefix} {date.strftime(DATE_FORMAT)}")


def _print_type(ctx: RenderContext) -> RenderedElement | None:
    if not ctx.target.is_team:
        return None
    return _text(ctx, ctx.facts.team_name or ctx.labels.team_copy)


# Image elements


def _main_image(ctx: RenderContext) -> RenderedElement:
    facts = ctx.facts
    url = facts.install_a_url or facts.image_url or ctx.config.placeholder_image_url
    style = image_style(
        ctx.settings, border_width="2px", border_color="#000", object_fit="cover"
    )
    img = markup.img(url, style.scaled(ctx.target.zoom), alt=facts.name or "")
    return _element(ctx, img)


def _qr_code(ctx: RenderContext) -> RenderedElement | None:
    style = StyleDeclaration.of(
        width="100%", height="100%", display="block", object_fit="contain"
    )
    content = _image_or_placeholder(ctx, ctx.qr_url, style, ctx.labels.qr_placeholder)
    return _element(ctx, content) if content else None


def _cutout_image(ctx: RenderContext) -> RenderedElement | None:
    style = image_style(
        ctx.settings, border_width="2px", border_color="#000", object_fit="contain"
    )
    content = _image_or_placeholder(
        ctx, ctx.facts.cutout_image_url, style, ctx.labels.image_placeholder
    )
    return _element(ctx, content) if content else None


def _slot(content: str, **extra: str | None) -> str:
    style = StyleDeclaration.of(flex="1", height="100%", **extra)
    return markup.div(content, style, css_class="slot")


def _image_pair(
    ctx: RenderContext,
    urls: tuple[str | None, str | None],
    captions: tuple[str, str],
    img_style: StyleDeclaration,
    *,
    gap: str,
    max_width: str | None = None,
) -> RenderedElement | None:
    """Two side-by-side slots. A missing print image leaves its slot empty."""
    if not any(urls) and not ctx.target.is_preview:
        return None
    slots = []
    for url, caption in zip(urls, captions, strict=True):
        content = _image_or_placeholder(ctx, url, img_style, caption) or ""
        slots.append(_slot(content, max_width=max_width))
    return _element(
        ctx, "".join(slots), display="flex", gap=ctx.settings.gap or gap
    )


def _designs(ctx: RenderContext) -> RenderedElement | None:
    facts = ctx.facts
    style = image_style(
        ctx.settings, border_width="1px", border_color="#ddd", object_fit="contain"
    )
    if facts.design_face_a and not facts.has_design_b:
        # A lone design A spans the whole element.
        content = _image_or_placeholder(
            ctx, facts.design_face_a, style, ctx.labels.design_a_placeholder
        )
        return _element(ctx, content or "")
    return _image_pair(
        ctx,
        (facts.design_face_a, facts.design_face_b),
        (ctx.labels.design_a_placeholder, ctx.labels.design_b_placeholder),
        style,
        gap="12px",
    )


def _single_installation_image(ctx: RenderContext) -> RenderedElement | None:
    style = image_style(
        ctx.settings, border_width="3px", border_color="#ccc", object_fit="cover"
    )
    content = _image_or_placeholder(
        ctx, ctx.facts.install_a_url, style, ctx.labels.face_a_placeholder
    )
    return _element(ctx, content) if content else None


def _linked_installation_images(ctx: RenderContext) -> RenderedElement | None:
    style = image_style(
        ctx.settings, border_width="3px", border_color="#ccc", object_fit="cover"
    )
    return _image_pair(
        ctx,
        (ctx.facts.install_a_url, ctx.facts.install_b_url),
        (ctx.labels.face_a_placeholder, ctx.labels.face_b_placeholder),
        style,
        gap="12px",
        max_width="48%",
    )


def _face_image(
    ctx: RenderContext, url: str | None, caption: str
) -> RenderedElement | None:
    style = image_style(
        ctx.settings, border_width="3px", border_color="#ccc", object_fit="cover"
    )
    content = _image_or_placeholder(ctx, url, style, caption)
    return _element(ctx, content) if content else None


def _face_a_image(ctx: RenderContext) -> RenderedElement | None:
    return _face_image(ctx, ctx.facts.install_a_url, ctx.labels.face_a_placeholder)


def _face_b_image(ctx: RenderContext) -> RenderedElement | None:
    # No face B slot on single-face billboards without a face B photo.
    if not ctx.facts.has_two_faces and ctx.facts.install_b_url is None:
        return None
    return _face_image(ctx, ctx.facts.install_b_url, ctx.labels.face_b_placeholder)


def _two_faces_container(ctx: RenderContext) -> RenderedElement | None:
    style = image_style(
        ctx.settings, border_width="3px", border_color="#ccc", object_fit="cover"
    )
    return _image_pair(
        ctx,
        (ctx.facts.install_a_url, ctx.facts.install_b_url),
        (ctx.labels.face_a_placeholder, ctx.labels.face_b_placeholder),
        style,
        gap="20px",
    )


def _status_badges(ctx: RenderContext) -> RenderedElement | None:
    # Drawn by the badge layer, which evaluates its own predicates.
    return None


RESOLVERS: dict[ElementKey, Callable[[RenderContext], RenderedElement | None]] = {
    ElementKey.CONTRACT_NUMBER: _contract_number,
    ElementKey.AD_TYPE: _ad_type,
    ElementKey.BILLBOARD_NAME: _billboard_name,
    ElementKey.SIZE: _size,
    ElementKey.FACES_COUNT: _faces_count,
    ElementKey.IMAGE: _main_image,
    ElementKey.LOCATION_INFO: _location_info,
    ElementKey.LANDMARK_INFO: _landmark_info,
    ElementKey.QR_CODE: _qr_code,
    ElementKey.DESIGNS: _designs,
    ElementKey.INSTALLATION_DATE: _installation_date,
    ElementKey.PRINT_TYPE: _print_type,
    ElementKey.CUTOUT_IMAGE: _cutout_image,
    ElementKey.SINGLE_INSTALLATION_IMAGE: _single_installation_image,
    ElementKey.LINKED_INSTALLATION_IMAGES: _linked_installation_images,
    ElementKey.FACE_A_IMAGE: _face_a_image,
    ElementKey.FACE_B_IMAGE: _face_b_image,
    ElementKey.TWO_FACES_CONTAINER: _two_faces_container,
    ElementKey.STATUS_BADGES: _status_badges,
}


def render(
    key: ElementKey,
    settings: ElementSettings,
    facts: BillboardPrintFacts,
    target: RenderTarget,
    *,
    config: EngineConfig | None = None,
    qr_url: str | None = None,
) -> RenderedElement | None:
    """Render one element with its effective settings.

    Args:
        key: The element to render.
        settings: Effective settings, overrides already applied.
        facts: The billboard being printed.
        target: Copy kind, surface and preview zoom.
        config: Labels and fallbacks; defaults when omitted.
        qr_url: Image URL of the billboard's QR code, if one was prepared.

    Returns:
        The rendered element with lengths scaled for the preview zoom, or
        None when the element has nothing to show on this surface.
    """
    ctx = RenderContext(
        key=key,
        settings=settings,
        facts=facts,
        target=target,
        config=config or EngineConfig(),
        qr_url=qr_url,
    )
    rendered = RESOLVERS[key](ctx)
    if rendered is None or target.zoom == 1:
        return rendered
    return RenderedElement(
        rendered.key, rendered.style.scaled(target.zoom), rendered.content
    )


# Status badges


@dataclass(frozen=True)
class BadgeStyle:
    background: str
    icon: str


BADGE_STYLES: dict[StatusOverrideKey, BadgeStyle] = {
    StatusOverrideKey.NO_DESIGN: BadgeStyle("#ef4444", "⚠"),
    StatusOverrideKey.ONE_DESIGN: BadgeStyle("#f59e0b", "◐"),
    StatusOverrideKey.ONE_INSTALL: BadgeStyle("#3b82f6", "①"),
}


def _badge_caption(status: StatusOverrideKey, config: EngineConfig) -> str:
    labels = config.labels
    if status == StatusOverrideKey.NO_DESIGN:
        return labels.badge_no_design
    if status == StatusOverrideKey.ONE_DESIGN:
        return labels.badge_one_design
    return labels.badge_one_install


def render_badges(
    badges: list[StatusOverrideKey],
    settings: ElementSettings,
    target: RenderTarget,
    *,
    config: EngineConfig | None = None,
) -> str:
    """Return the badge layer markup, or "" when there is nothing to show."""
    config = config or EngineConfig()
    if not badges or not settings.visible:
        return ""

    spans = []
    for status in badges:
        badge = BADGE_STYLES[status]
        style = StyleDeclaration.of(
            background=badge.background,
            color=settings.color or "#fff",
            padding="2px 8px",
            border_radius="12px",
            font_size=settings.font_size or "11px",
            font_weight=settings.font_weight or "600",
        ).scaled(target.zoom)
        caption = f"{badge.icon} {_badge_caption(status, config)}"
        spans.append(
            f'<span class="status-badge status-{status.value}" '
            f'style="{style.to_css()}">{markup.text(caption)}</span>'
        )

    container = StyleDeclaration.of(
        position="absolute",
        display="flex",
        gap="6px",
        flex_wrap="wrap",
        justify_content="center",
        direction=config.text_direction,
        top=settings.top,
        left=settings.left,
        width=settings.width,
        transform="translateX(-50%)" if is_percentage(settings.left) else None,
    ).scaled(target.zoom)
    return markup.div(
        " ".join(spans),
        container,
        css_class="status-badges",
        data_element_key=ElementKey.STATUS_BADGES.value,
    )
