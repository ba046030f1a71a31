"""Minimal HTML fragment builders with escaping."""

from __future__ import annotations

from html import escape

from billboard_print.print_engine.layout.style import StyleDeclaration


def _attributes(attrs: dict[str, str | None]) -> str:
    parts = [
        f'{name}="{escape(value, quote=True)}"'
        for name, value in attrs.items()
        if value is not None
    ]
    return (" " + " ".join(parts)) if parts else ""


def div(
    content: str = "",
    style: StyleDeclaration | None = None,
    *,
    css_class: str | None = None,
    **attrs: str | None,
) -> str:
    """Return a ``<div>``. ``content`` is inserted as-is; escape text first."""
    all_attrs: dict[str, str | None] = {"class": css_class}
    if style:
        all_attrs["style"] = style.to_css()
    all_attrs.update({name.replace("_", "-"): value for name, value in attrs.items()})
    return f"<div{_attributes(all_attrs)}>{content}</div>"


def img(
    src: str,
    style: StyleDeclaration | None = None,
    *,
    alt: str = "",
    css_class: str | None = None,
) -> str:
    all_attrs: dict[str, str | None] = {"class": css_class, "src": src, "alt": alt}
    if style:
        all_attrs["style"] = style.to_css()
    return f"<img{_attributes(all_attrs)}>"


def text(value: str) -> str:
    """Escape literal text for element content."""
    return escape(value, quote=False)
