"""
case_convert

Identifier case converters (camelCase, dot.case, kebab-case) with strict
trailing character validation, plus a style registry and Jinja2 filters.
"""

import logging

from .errors import TRAILING_DOT_MESSAGE, TRAILING_UNDERSCORE_MESSAGE, InvalidInputError
from .string_case import camelcase, camelcase_loose, camelcase_strict, dotcase, kebabcase
from .styles import CONVERTERS, CaseStyle, available_styles, convert

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CONVERTERS",
    "TRAILING_DOT_MESSAGE",
    "TRAILING_UNDERSCORE_MESSAGE",
    "CaseStyle",
    "InvalidInputError",
    "available_styles",
    "camelcase",
    "camelcase_loose",
    "camelcase_strict",
    "convert",
    "dotcase",
    "kebabcase",
]
