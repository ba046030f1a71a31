"""Tests for CSS declaration helpers."""

import pytest

from billboard_print.print_engine.layout.style import (
    StyleDeclaration,
    border_radius,
    is_percentage,
    scale_length,
    transform,
)


class TestScaleLength:
    """Tests for scale_length."""

    def test_identity_zoom(self) -> None:
        assert scale_length("10px", 1) == "10px"

    @pytest.mark.parametrize("value", ["50%", "0", "auto"])
    def test_non_lengths_are_kept(self, value) -> None:
        assert scale_length(value, 0.5) == value

    def test_each_token_is_scaled(self) -> None:
        assert scale_length("0 0 10px 2mm", 0.5) == (
            "0 0 calc(10px * 0.5) calc(2mm * 0.5)"
        )

    def test_decimal_lengths(self) -> None:
        assert scale_length("1.5mm", 2) == "calc(1.5mm * 2)"


class TestBorderRadius:
    """Tests for border_radius."""

    def test_nothing_set(self) -> None:
        assert border_radius(None) is None

    def test_uniform_only(self) -> None:
        assert border_radius("8px") == "8px"

    def test_corners_win_over_uniform(self) -> None:
        """Corners are emitted in top-left, top-right, bottom-right, bottom-left."""
        assert border_radius("8px", "1px", None, "3px", None) == "1px 8px 3px 8px"

    def test_unset_corners_default_to_zero(self) -> None:
        assert border_radius(None, top_left="4px") == "4px 0 0 0"

    def test_shorthand_uniform_is_not_a_corner_fallback(self) -> None:
        assert border_radius("0 0 10px 10px", bottom_left="2px") == "0 0 0 2px"


class TestTransform:
    """Tests for transform."""

    def test_centered_percentage(self) -> None:
        assert transform("50%", "center", None) == "translateX(-50%)"

    def test_percentage_without_centering(self) -> None:
        assert transform("50%", "left", None) is None

    def test_absolute_left_is_not_translated(self) -> None:
        assert transform("10mm", "center", None) is None

    def test_rotation_after_translation(self) -> None:
        assert transform("16%", "center", 12.5) == "translateX(-50%) rotate(12.5deg)"

    def test_rotation_only(self) -> None:
        assert transform(None, None, -3) == "rotate(-3deg)"

    def test_zero_rotation(self) -> None:
        assert transform("0", None, 0.0) is None

    def test_is_percentage(self) -> None:
        assert is_percentage(" 63% ")
        assert not is_percentage("63px")
        assert not is_percentage(None)


class TestStyleDeclaration:
    """Tests for StyleDeclaration."""

    def test_of_skips_unset_values(self) -> None:
        style = StyleDeclaration.of(top="1mm", left=None, font_size="", color="#000")
        assert style.to_css() == "top: 1mm; color: #000"

    def test_underscores_become_hyphens(self) -> None:
        style = StyleDeclaration.of(min_width="10px")
        assert "min-width" in style
        assert style.get("min-width") == "10px"

    def test_set_keeps_position(self) -> None:
        style = StyleDeclaration.of(top="1mm", left="2mm").set("top", "3mm")
        assert style.declarations == (("top", "3mm"), ("left", "2mm"))

    def test_values_are_immutable(self) -> None:
        style = StyleDeclaration.of(top="1mm")
        style.set("top", "2mm")
        assert style.get("top") == "1mm"

    def test_merged(self) -> None:
        base = StyleDeclaration.of(top="1mm", color="#000")
        merged = base.merged(StyleDeclaration.of(color="#fff", width="5mm"))
        assert merged.to_css() == "top: 1mm; color: #fff; width: 5mm"

    def test_scaled_touches_only_lengths(self) -> None:
        style = StyleDeclaration.of(
            top="10px", left="50%", color="#000", font_weight="700", font_size="14px"
        )
        scaled = style.scaled(0.5)
        assert scaled.get("top") == "calc(10px * 0.5)"
        assert scaled.get("left") == "50%"
        assert scaled.get("font-weight") == "700"
        assert scaled.get("font-size") == "calc(14px * 0.5)"

    def test_empty_is_falsy(self) -> None:
        assert not StyleDeclaration()
        assert StyleDeclaration.of(top="0")
