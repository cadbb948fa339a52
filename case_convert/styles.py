"""
Case style registry.

Maps each supported naming convention to its converter so callers can
select a conversion by name.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

from case_convert.string_case import camelcase, camelcase_loose, dotcase, kebabcase


class CaseStyle(str, Enum):
    """Supported identifier styles."""

    CAMEL = "camel"
    CAMEL_LOOSE = "camel_loose"
    DOT = "dot"
    KEBAB = "kebab"


CONVERTERS: Final[Mapping[CaseStyle, Callable[[str | None], str | None]]] = MappingProxyType(
    {
        CaseStyle.CAMEL: camelcase,
        CaseStyle.CAMEL_LOOSE: camelcase_loose,
        CaseStyle.DOT: dotcase,
        CaseStyle.KEBAB: kebabcase,
    }
)


def available_styles() -> list[str]:
    """Return the style names in declaration order."""
    return [style.value for style in CaseStyle]


def convert(string: str | None, style: CaseStyle | str) -> str | None:
    """Convert ``string`` using the converter registered for ``style``.

    Args:
        string: String to convert, or None.
        style: A CaseStyle member or its string value.

    Returns:
        The converted string, following the sentinel policy of the
        selected converter.

    Raises:
        ValueError: If ``style`` names no known style.
        InvalidInputError: If the selected converter rejects the input.

    Examples:
        >>> convert("user_id", "dot")
        'user.id'
        >>> convert("myVar", CaseStyle.KEBAB)
        'my-var'
    """
    try:
        case_style = CaseStyle(style)
    except ValueError:
        msg = f"Unknown case style {style!r}, expected one of: {', '.join(available_styles())}"
        raise ValueError(msg) from None

    return CONVERTERS[case_style](string)
