"""Filesystem predicates: thin wrappers over the host's path queries.

These read live filesystem state, so they are the only predicates whose
outcome may change between two identical calls.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from assertkit.catalogue.base import assertion, fail
from assertkit.catalogue.types import string
from assertkit.domain.formatting import value_to_string
from assertkit.errors import ErrorTypeRef, InvalidArgumentError


@assertion
def file_exists(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not isinstance(value, os.PathLike):
        string(value, error_type=error_type)
    if not Path(value).exists():
        fail(message, "The file {0} does not exist.", (value_to_string(os.fspath(value)),), error_type)


@assertion
def file_(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    file_exists(value, message, error_type)
    if not Path(value).is_file():
        fail(message, "The path {0} is not a file.", (value_to_string(os.fspath(value)),), error_type)


@assertion
def directory(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    file_exists(value, message, error_type)
    if not Path(value).is_dir():
        fail(message, "The path {0} is no directory.", (value_to_string(os.fspath(value)),), error_type)


@assertion
def readable(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not _accessible(value, os.R_OK):
        fail(message, "The path {0} is not readable.", (value_to_string(value),), error_type)


@assertion
def writable(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not _accessible(value, os.W_OK):
        fail(message, "The path {0} is not writable.", (value_to_string(value),), error_type)


def _accessible(value: Any, mode: int) -> bool:
    if not isinstance(value, (str, os.PathLike)):
        return False
    return os.path.exists(value) and os.access(value, mode)
