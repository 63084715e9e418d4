"""Tests for ipv4_cidr.ip.classifier module."""

from ipaddress import IPv4Address, IPv6Address

import pytest

from ipv4_cidr.ip.classifier import is_ipv4, is_ipv6, parse_address


class TestParseAddress:
    def test_dotted_quad(self):
        assert parse_address("192.168.1.1") == IPv4Address("192.168.1.1")

    def test_ipv6(self):
        assert parse_address("2001:db8::1") == IPv6Address("2001:db8::1")

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not-an-ip",
            "10.1",
            "1.2.3",
            "1.2.3.4.5",
            "256.0.0.1",
            "0x0A.0.0.1",
            "010.0.0.1",
            "1.2.3.-4",
            " 1.2.3.4",
        ],
    )
    def test_rejects_non_dotted_quad(self, text):
        with pytest.raises(ValueError):
            parse_address(text)

    def test_rejects_integer(self):
        with pytest.raises(ValueError):
            parse_address(167772161)


class TestIsIPv4:
    def test_string(self):
        assert is_ipv4("10.0.0.1") is True

    def test_address_object(self):
        assert is_ipv4(IPv4Address("10.0.0.1")) is True

    def test_ipv6(self):
        assert is_ipv4("::1") is False

    def test_invalid(self):
        assert is_ipv4("invalid") is False

    def test_empty_string(self):
        assert is_ipv4("") is False


class TestIsIPv6:
    def test_string(self):
        assert is_ipv6("fe80::1") is True

    def test_address_object(self):
        assert is_ipv6(IPv6Address("::1")) is True

    def test_ipv4(self):
        assert is_ipv6("10.0.0.1") is False

    def test_none(self):
        assert is_ipv6(None) is False
