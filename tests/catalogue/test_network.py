"""Tests for IP, e-mail and UUID predicates."""

from __future__ import annotations

import pytest

from assertkit.catalogue import network
from assertkit.errors import InvalidArgumentError


class TestIp:
    @pytest.mark.parametrize("value", ["127.0.0.1", "10.0.0.255", "::1", "2001:db8::ff00:42:8329"])
    def test_ip_passes(self, value: str) -> None:
        network.ip(value)

    @pytest.mark.parametrize("value", ["256.0.0.1", "1.2.3", "host.local", "", 2130706433])
    def test_ip_fails(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="Expected a value to be an IP"):
            network.ip(value)

    def test_ipv4(self) -> None:
        network.ipv4("192.168.1.1")
        with pytest.raises(InvalidArgumentError, match='^Expected a value to be an IPv4. Got: "::1"$'):
            network.ipv4("::1")

    def test_ipv6(self) -> None:
        network.ipv6("fe80::1")
        with pytest.raises(InvalidArgumentError, match="Expected a value to be an IPv6"):
            network.ipv6("192.168.1.1")


class TestEmail:
    @pytest.mark.parametrize("value", ["jane.doe@company.org", "dev+tag@mail.company.org"])
    def test_passes(self, value: str) -> None:
        network.email(value)

    @pytest.mark.parametrize("value", ["plainaddress", "@company.org", "jane@", "jane doe@company.org", None])
    def test_fails(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="Expected a value to be a valid e-mail address"):
            network.email(value)

    def test_test_domain_passes(self) -> None:
        network.email("dev@mail.test")

    @pytest.mark.parametrize("value", ["dev@printer.local", "root@localhost", "dev@example.invalid"])
    def test_other_special_use_domains_fail(self, value: str) -> None:
        with pytest.raises(InvalidArgumentError, match="valid e-mail address"):
            network.email(value)


class TestUuid:
    @pytest.mark.parametrize(
        "value",
        [
            "ff6f8cb0-c57d-11e1-9b21-0800200c9a66",
            "FF6F8CB0-C57D-11E1-9B21-0800200C9A66",
            "urn:uuid:ff6f8cb0-c57d-11e1-9b21-0800200c9a66",
            "{ff6f8cb0-c57d-11e1-9b21-0800200c9a66}",
            "00000000-0000-0000-0000-000000000000",
        ],
    )
    def test_passes(self, value: str) -> None:
        network.uuid(value)

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "ff6f8cb0c57d11e19b210800200c9a66",
            "zf6f8cb0-c57d-11e1-9b21-0800200c9a66",
            "ff6f8cb0-c57d-11e1-9b21-0800200c9a66\n",
            "",
        ],
    )
    def test_fails(self, value: str) -> None:
        with pytest.raises(InvalidArgumentError, match="is not a valid UUID"):
            network.uuid(value)

    def test_non_string_fails(self) -> None:
        with pytest.raises(InvalidArgumentError, match="^Value 5 is not a valid UUID.$"):
            network.uuid(5)
