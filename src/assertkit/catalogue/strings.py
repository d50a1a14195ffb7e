"""Text predicates: containment, patterns, character classes, lengths.

Character classes (``alpha``, ``digits``, ``alnum``, ``lower``, ``upper``,
``starts_with_letter``) are ASCII-only and never consult the process
locale. ``unicode_letters`` accepts any Unicode letter category.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

from assertkit.catalogue.base import assertion, fail
from assertkit.catalogue.types import string
from assertkit.domain.formatting import str_length, value_to_string
from assertkit.errors import ErrorTypeRef, InvalidArgumentError

ASCII_ALPHA = re.compile(r"[A-Za-z]+")
ASCII_DIGITS = re.compile(r"[0-9]+")
ASCII_ALNUM = re.compile(r"[A-Za-z0-9]+")
ASCII_LOWER = re.compile(r"[a-z]+")
ASCII_UPPER = re.compile(r"[A-Z]+")

Pattern = str | re.Pattern[str]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _matches_class(value: Any, char_class: re.Pattern[str]) -> bool:
    return isinstance(value, str) and char_class.fullmatch(value) is not None


@assertion
def contains(
    value: Any,
    sub_string: str,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if sub_string not in _text(value):
        fail(
            message,
            "Expected a value to contain {1}. Got: {0}",
            (value_to_string(value), value_to_string(sub_string)),
            error_type,
        )


@assertion
def not_contains(
    value: Any,
    sub_string: str,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if sub_string in _text(value):
        fail(
            message,
            "{1} was not expected to be contained in a value. Got: {0}",
            (value_to_string(value), value_to_string(sub_string)),
            error_type,
        )


@assertion
def not_whitespace_only(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not _text(value).strip():
        fail(message, "Expected a non-whitespace string. Got: {0}", (value_to_string(value),), error_type)


@assertion
def starts_with(
    value: Any,
    prefix: str,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not _text(value).startswith(prefix):
        fail(
            message,
            "Expected a value to start with {1}. Got: {0}",
            (value_to_string(value), value_to_string(prefix)),
            error_type,
        )


@assertion
def not_starts_with(
    value: Any,
    prefix: str,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if _text(value).startswith(prefix):
        fail(
            message,
            "Expected a value not to start with {1}. Got: {0}",
            (value_to_string(value), value_to_string(prefix)),
            error_type,
        )


@assertion
def starts_with_letter(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    string(value, error_type=error_type)
    if not (value and ASCII_ALPHA.fullmatch(value[0])):
        fail(
            message,
            "Expected a value to start with a letter. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def ends_with(
    value: Any,
    suffix: str,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not _text(value).endswith(suffix):
        fail(
            message,
            "Expected a value to end with {1}. Got: {0}",
            (value_to_string(value), value_to_string(suffix)),
            error_type,
        )


@assertion
def not_ends_with(
    value: Any,
    suffix: str,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if _text(value).endswith(suffix):
        fail(
            message,
            "Expected a value not to end with {1}. Got: {0}",
            (value_to_string(value), value_to_string(suffix)),
            error_type,
        )


@assertion
def regex(
    value: Any,
    pattern: Pattern,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    """Passes when *pattern* is found anywhere in *value* (``re.search``)."""
    if re.search(pattern, _text(value)) is None:
        fail(
            message,
            "The value {0} does not match the expected pattern.",
            (value_to_string(value),),
            error_type,
        )


@assertion
def not_regex(
    value: Any,
    pattern: Pattern,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    found = re.search(pattern, _text(value))
    if found is not None:
        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        fail(
            message,
            "The value {0} matches the pattern {1} (at offset {2}).",
            (value_to_string(value), value_to_string(source), found.start()),
            error_type,
        )


@assertion
def unicode_letters(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    string(value, error_type=error_type)
    if not (value and all(unicodedata.category(ch).startswith("L") for ch in value)):
        fail(
            message,
            "Expected a value to contain only Unicode letters. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def alpha(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    string(value, error_type=error_type)
    if not _matches_class(value, ASCII_ALPHA):
        fail(
            message,
            "Expected a value to contain only letters. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def digits(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not _matches_class(value, ASCII_DIGITS):
        fail(
            message,
            "Expected a value to contain digits only. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def alnum(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not _matches_class(value, ASCII_ALNUM):
        fail(
            message,
            "Expected a value to contain letters and digits only. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def lower(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not _matches_class(value, ASCII_LOWER):
        fail(
            message,
            "Expected a value to contain lowercase characters only. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def upper(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not _matches_class(value, ASCII_UPPER):
        fail(
            message,
            "Expected a value to contain uppercase characters only. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def length(
    value: Any,
    length: int,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if str_length(value) != length:
        fail(
            message,
            "Expected a value to contain {1} characters. Got: {0}",
            (value_to_string(value), length),
            error_type,
        )


@assertion
def min_length(
    value: Any,
    min: int,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if str_length(value) < min:
        fail(
            message,
            "Expected a value to contain at least {1} characters. Got: {0}",
            (value_to_string(value), min),
            error_type,
        )


@assertion
def max_length(
    value: Any,
    max: int,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if str_length(value) > max:
        fail(
            message,
            "Expected a value to contain at most {1} characters. Got: {0}",
            (value_to_string(value), max),
            error_type,
        )


@assertion
def length_between(
    value: Any,
    min: int,  # noqa: A002
    max: int,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    size = str_length(value)
    if size < min or size > max:
        fail(
            message,
            "Expected a value to contain between {1} and {2} characters. Got: {0}",
            (value_to_string(value), min, max),
            error_type,
        )
