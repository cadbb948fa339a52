"""
Errors raised by the case converters.
"""

from typing import Final

TRAILING_UNDERSCORE_MESSAGE: Final = "Invalid input: Strings ending with an underscore are not allowed."
TRAILING_DOT_MESSAGE: Final = "Invalid input: Strings ending with a dot are not allowed."

_SUFFIX_MESSAGES: Final = {
    "_": TRAILING_UNDERSCORE_MESSAGE,
    ".": TRAILING_DOT_MESSAGE,
}


class InvalidInputError(ValueError):
    """Raised when a converter is given a string ending in a disallowed character.

    Attributes:
        value: The rejected input string.
        suffix: The trailing character that caused the rejection.
    """

    def __init__(self, value: str, suffix: str) -> None:
        self.value = value
        self.suffix = suffix
        msg = _SUFFIX_MESSAGES.get(suffix, f"Invalid input: Strings ending with {suffix!r} are not allowed.")
        super().__init__(msg)
