"""Structured CSS declarations.

Renderers build a ``StyleDeclaration`` value and serialize it once at the
output boundary, so unit handling and optional fields live in one place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Properties whose values are CSS lengths and follow the preview zoom.
LENGTH_PROPERTIES: frozenset[str] = frozenset(
    {
        "top",
        "left",
        "right",
        "bottom",
        "width",
        "height",
        "min-width",
        "max-width",
        "font-size",
        "border-width",
        "border-radius",
        "gap",
        "padding",
    }
)

_LENGTH_TOKEN = re.compile(r"^-?(\d+\.?\d*|\.\d+)(px|mm|cm|in|pt|pc|em|rem)$")


def scale_length(value: str, zoom: float) -> str:
    """Scale every absolute length token of ``value`` by ``zoom``.

    Percentages, unitless zeros and keywords are returned unchanged, so
    percentage offsets stay relative to the (already scaled) page.

    >>> scale_length("0 0 10px 10px", 0.5)
    '0 0 calc(10px * 0.5) calc(10px * 0.5)'
    """
    if zoom == 1:
        return value
    tokens = value.split()
    return " ".join(
        f"calc({token} * {zoom:g})" if _LENGTH_TOKEN.match(token) else token
        for token in tokens
    )


def is_percentage(value: str | None) -> bool:
    return value is not None and value.strip().endswith("%")


def border_radius(
    uniform: str | None,
    top_left: str | None = None,
    top_right: str | None = None,
    bottom_right: str | None = None,
    bottom_left: str | None = None,
) -> str | None:
    """Return the ``border-radius`` value, or None when nothing is set.

    Any corner value takes precedence over the uniform value. Unset corners
    then fall back to the uniform value, or to 0.
    """
    corners = (top_left, top_right, bottom_right, bottom_left)
    if all(corner is None for corner in corners):
        return uniform
    fallback = uniform if uniform is not None and " " not in uniform.strip() else "0"
    return " ".join(corner if corner is not None else fallback for corner in corners)


def transform(
    left: str | None, text_align: str | None, rotation: float | None
) -> str | None:
    """Return the ``transform`` value, or None when no transform applies.

    A percentage ``left`` with centered text implies a horizontal centering
    translation. Rotation is composed after the translation.
    """
    parts: list[str] = []
    if is_percentage(left) and text_align == "center":
        parts.append("translateX(-50%)")
    if rotation:
        parts.append(f"rotate({rotation:g}deg)")
    return " ".join(parts) if parts else None


@dataclass(frozen=True)
class StyleDeclaration:
    """An ordered, immutable list of CSS property/value pairs."""

    declarations: tuple[tuple[str, str], ...] = ()

    @classmethod
    def of(cls, **properties: str | None) -> StyleDeclaration:
        """Build from keyword arguments; underscores become hyphens."""
        return cls().with_values(**properties)

    def set(self, prop: str, value: str | None) -> StyleDeclaration:
        """Return a copy with ``prop`` set; None or empty leaves it unchanged.

        An existing property keeps its position.
        """
        if value is None or value == "":
            return self
        if prop in self:
            return StyleDeclaration(
                tuple((p, value if p == prop else v) for p, v in self.declarations)
            )
        return StyleDeclaration(self.declarations + ((prop, value),))

    def with_values(self, **properties: str | None) -> StyleDeclaration:
        style = self
        for name, value in properties.items():
            style = style.set(name.replace("_", "-"), value)
        return style

    def merged(self, other: StyleDeclaration) -> StyleDeclaration:
        """Return a copy with ``other``'s declarations set on top."""
        style = self
        for prop, value in other.declarations:
            style = style.set(prop, value)
        return style

    def get(self, prop: str) -> str | None:
        for p, value in self.declarations:
            if p == prop:
                return value
        return None

    def scaled(self, zoom: float) -> StyleDeclaration:
        """Return a copy with every length property scaled by ``zoom``."""
        if zoom == 1:
            return self
        return StyleDeclaration(
            tuple(
                (p, scale_length(v, zoom) if p in LENGTH_PROPERTIES else v)
                for p, v in self.declarations
            )
        )

    def to_css(self) -> str:
        return "; ".join(f"{prop}: {value}" for prop, value in self.declarations)

    def __contains__(self, prop: object) -> bool:
        return any(p == prop for p, _ in self.declarations)

    def __bool__(self) -> bool:
        return bool(self.declarations)
