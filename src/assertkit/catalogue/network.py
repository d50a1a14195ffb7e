"""Address and identifier predicates: IP, e-mail, UUID."""

from __future__ import annotations

import ipaddress
import re
from typing import Any

from email_validator import EmailNotValidError, validate_email

from assertkit.catalogue.base import assertion, fail
from assertkit.domain.formatting import value_to_string
from assertkit.errors import ErrorTypeRef, InvalidArgumentError

NIL_UUID = "00000000-0000-0000-0000-000000000000"

UUID_PATTERN = re.compile(
    r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"
)


def _ip_version(value: Any) -> int | None:
    if not isinstance(value, str):
        return None
    try:
        return ipaddress.ip_address(value).version
    except ValueError:
        return None


@assertion
def ip(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if _ip_version(value) is None:
        fail(message, "Expected a value to be an IP. Got: {0}", (value_to_string(value),), error_type)


@assertion
def ipv4(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if _ip_version(value) != 4:
        fail(message, "Expected a value to be an IPv4. Got: {0}", (value_to_string(value),), error_type)


@assertion
def ipv6(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if _ip_version(value) != 6:
        fail(message, "Expected a value to be an IPv6. Got: {0}", (value_to_string(value),), error_type)


@assertion
def email(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    """Syntax-only check; no DNS lookups are performed.

    ``.test`` domains are accepted. Other special-use names such as
    ``localhost`` or ``.local`` are rejected by email-validator.
    """
    valid = isinstance(value, str)
    if valid:
        try:
            validate_email(value, check_deliverability=False, test_environment=True)
        except EmailNotValidError:
            valid = False
    if not valid:
        fail(
            message,
            "Expected a value to be a valid e-mail address. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def uuid(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    """Accepts ``urn:uuid:`` prefixes and braces; the nil UUID is valid."""
    text = value if isinstance(value, str) else ""
    for token in ("urn:", "uuid:", "{", "}"):
        text = text.replace(token, "")

    if text == NIL_UUID:
        return

    if not UUID_PATTERN.fullmatch(text):
        fail(message, "Value {0} is not a valid UUID.", (value_to_string(value),), error_type)
