"""
Tests for the case style registry.
"""

import pytest

from case_convert import CONVERTERS, CaseStyle, InvalidInputError, available_styles, convert
from case_convert.string_case import camelcase, camelcase_loose, dotcase, kebabcase


class TestCaseStyleRegistry:
    """Test style lookup and dispatch."""

    def test_every_style_has_converter(self) -> None:
        """Test that each declared style is registered."""
        assert set(CONVERTERS) == set(CaseStyle)

    def test_registered_converters(self) -> None:
        """Test that the registry points at the module converters."""
        assert CONVERTERS[CaseStyle.CAMEL] is camelcase
        assert CONVERTERS[CaseStyle.CAMEL_LOOSE] is camelcase_loose
        assert CONVERTERS[CaseStyle.DOT] is dotcase
        assert CONVERTERS[CaseStyle.KEBAB] is kebabcase

    def test_registry_is_read_only(self) -> None:
        """Test that the registry cannot be modified."""
        with pytest.raises(TypeError):
            CONVERTERS[CaseStyle.CAMEL] = kebabcase  # type: ignore[index]

    def test_available_styles_order(self) -> None:
        """Test that style names come back in declaration order."""
        assert available_styles() == ["camel", "camel_loose", "dot", "kebab"]

    @pytest.mark.parametrize(
        ("style", "value", "expected"),
        [
            (CaseStyle.CAMEL, "first name", "firstName"),
            ("camel", "SCREEN_NAME", "screenName"),
            ("camel_loose", "CSS-style-property", "cssStyleProperty"),
            (CaseStyle.DOT, "SCREEN_NAME", "screen.name"),
            ("dot", "convert-to-dot", "convert.to.dot"),
            (CaseStyle.KEBAB, "NASASpaceship", "nasa-spaceship"),
            ("kebab", "Wait*For*It", "wait-for-it"),
        ],
    )
    def test_convert_dispatch(self, style: CaseStyle | str, value: str, expected: str) -> None:
        """Test that convert selects the right converter by member or name."""
        assert convert(value, style) == expected

    def test_convert_keeps_sentinel_policy(self) -> None:
        """Test that each converter's None handling is preserved through dispatch."""
        assert convert(None, CaseStyle.CAMEL) is None
        assert convert(None, CaseStyle.DOT) is None
        assert convert(None, CaseStyle.KEBAB) == ""

    def test_unknown_style(self) -> None:
        """Test that an unknown style name lists the known ones."""
        with pytest.raises(ValueError, match="Unknown case style 'snake'") as exc_info:
            convert("user_id", "snake")

        assert "camel, camel_loose, dot, kebab" in str(exc_info.value)
        assert not isinstance(exc_info.value, InvalidInputError)

    def test_converter_errors_propagate(self) -> None:
        """Test that converter rejections reach the caller unchanged."""
        with pytest.raises(InvalidInputError, match="ending with a dot"):
            convert("invalid.end.", CaseStyle.DOT)
