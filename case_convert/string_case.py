"""
String case conversion utilities.

This module provides the identifier case converters: strict and loose
camelCase, dot.case and kebab-case. Each converter is a pure function over
a single string, with ``None`` standing in for "no value provided".

Based on the regex pipelines of https://github.com/okunishinishi/python-stringcase
with strict trailing character validation.
"""

import logging
import re
from collections.abc import Callable
from typing import Final

from case_convert.errors import InvalidInputError

logger = logging.getLogger(__name__)

# camelCase patterns
_CAMEL_SEPARATOR_PATTERN: Final = re.compile(r"[-_\s]+(.)?")
_LOOSE_CAMEL_SEPARATOR_PATTERN: Final = re.compile(r"[^a-zA-Z0-9]+(.)")

# dot.case patterns
_DOT_LOWER_UPPER_PATTERN: Final = re.compile(r"([a-z])([A-Z])")
_DOT_SEPARATOR_PATTERN: Final = re.compile(r"[\s\-_]+")
_DOT_RUN_PATTERN: Final = re.compile(r"\.+")
_LEADING_DOTS_PATTERN: Final = re.compile(r"^\.+")

# kebab-case patterns
_KEBAB_SEPARATOR_PRESENT_PATTERN: Final = re.compile(r"[\s\-_]")
_UPPER_PRESENT_PATTERN: Final = re.compile(r"[A-Z]")
_KEBAB_SEPARATOR_PATTERN: Final = re.compile(r"[\s_]+")
_NON_KEBAB_PATTERN: Final = re.compile(r"[^a-zA-Z0-9-]")
_LOWER_UPPER_PATTERN: Final = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_PATTERN: Final = re.compile(r"([A-Z])([A-Z][a-z])")
_HYPHEN_RUN_PATTERN: Final = re.compile(r"-+")
_EDGE_HYPHENS_PATTERN: Final = re.compile(r"^-+|-+$")


def _convert_if_not_none(string: str | None, conversion_func: Callable[[str], str]) -> str | None:
    """Convert a string, passing None through unchanged."""
    return conversion_func(string) if string is not None else None


def _reject_suffix(string: str, suffix: str, converter: str) -> None:
    """Raise InvalidInputError if ``string`` ends with ``suffix``."""
    if string.endswith(suffix):
        logger.debug("%s rejected %r: trailing %r", converter, string, suffix)
        raise InvalidInputError(string, suffix)


def _upper_following_char(match: re.Match[str]) -> str:
    char = match.group(1)
    return char.upper() if char else ""


def camelcase(string: str | None) -> str | None:
    """Convert string into camelCase, rejecting a trailing underscore.

    The whole string is lower-cased first, so acronyms and SCREAMING_SNAKE
    words collapse before word boundaries are found. Each run of spaces,
    hyphens and underscores marks one boundary; digits and symbols are kept
    as they are.

    Args:
        string: String to convert.

    Returns:
        camelCase string, or None if the input was None.

    Raises:
        InvalidInputError: If the string ends with an underscore.

    Examples:
        >>> camelcase("first name")
        'firstName'
        >>> camelcase("SCREEN_NAME")
        'screenName'
        >>> camelcase("Single")
        'single'
        >>> camelcase(None) is None
        True
    """

    def _camelcase(s: str) -> str:
        _reject_suffix(s, "_", "camelcase")
        s = _CAMEL_SEPARATOR_PATTERN.sub(_upper_following_char, s.lower())
        # a leading separator upper-cases the first word
        return s[:1].lower() + s[1:]

    return _convert_if_not_none(string, _camelcase)


def camelcase_loose(string: str | None) -> str | None:
    """Convert string into camelCase treating any non-alphanumeric run as a boundary.

    Unlike :func:`camelcase` there is no trailing character validation, and a
    boundary run at the very end of the string is left in place.

    Examples:
        >>> camelcase_loose("get_user_info")
        'getUserInfo'
        >>> camelcase_loose("CSS-style-property")
        'cssStyleProperty'
        >>> camelcase_loose("trailing_")
        'trailing_'
    """

    def _camelcase_loose(s: str) -> str:
        return _LOOSE_CAMEL_SEPARATOR_PATTERN.sub(_upper_following_char, s.lower())

    return _convert_if_not_none(string, _camelcase_loose)


def dotcase(string: str | None) -> str | None:
    """Convert string into dot.case, rejecting a trailing dot.

    Only a lower-case to upper-case transition splits a word, so runs of
    capitals (acronyms) stay together. Leading dots are stripped.

    Args:
        string: String to convert.

    Returns:
        dot.case string, or None if the input was None.

    Raises:
        InvalidInputError: If the string ends with a dot.

    Examples:
        >>> dotcase("user_id")
        'user.id'
        >>> dotcase("convert-to-dot")
        'convert.to.dot'
        >>> dotcase("helloWorld")
        'hello.world'
    """

    def _dotcase(s: str) -> str:
        _reject_suffix(s, ".", "dotcase")
        s = _DOT_LOWER_UPPER_PATTERN.sub(r"\1.\2", s)
        s = _DOT_SEPARATOR_PATTERN.sub(".", s)
        s = s.lower()
        s = _DOT_RUN_PATTERN.sub(".", s)
        return _LEADING_DOTS_PATTERN.sub("", s)

    return _convert_if_not_none(string, _dotcase)


def kebabcase(string: str | None) -> str:
    """Convert string into kebab-case, rejecting a trailing underscore.

    Word boundaries come from whitespace and underscores, from lower-case or
    digit to upper-case transitions, and from the end of an acronym run
    (``NASASpaceship``). Symbols are dropped before the case transitions are
    looked at, so ``Wait*For*It`` still splits into three words. ``None``
    yields an empty string.

    Args:
        string: String to convert.

    Returns:
        kebab-case string.

    Raises:
        InvalidInputError: If the string ends with an underscore.

    Examples:
        >>> kebabcase("myVar")
        'my-var'
        >>> kebabcase("NASASpaceship")
        'nasa-spaceship'
        >>> kebabcase("Wait*For*It")
        'wait-for-it'
        >>> kebabcase(None)
        ''
    """
    if string is None:
        return ""

    _reject_suffix(string, "_", "kebabcase")

    # Nothing to split: single lower-case word
    if not _KEBAB_SEPARATOR_PRESENT_PATTERN.search(string) and not _UPPER_PRESENT_PATTERN.search(string):
        return string.lower()

    s = _KEBAB_SEPARATOR_PATTERN.sub("-", string)
    s = _NON_KEBAB_PATTERN.sub("", s)
    s = _LOWER_UPPER_PATTERN.sub(r"\1-\2", s)
    s = _ACRONYM_PATTERN.sub(r"\1-\2", s)
    s = s.lower()
    s = _HYPHEN_RUN_PATTERN.sub("-", s)
    return _EDGE_HYPHENS_PATTERN.sub("", s)


# Aliases naming the camelCase variant explicitly
camelcase_strict = camelcase
