"""Tests for ipv4_cidr.errors module."""

import pytest

from ipv4_cidr.errors import (
    CidrError,
    ErrorKind,
    HostBitsSetError,
    InvalidAddressError,
    InvalidPrefixError,
    MalformedCidrError,
    PrefixOutOfRangeError,
    UnsupportedAddressFamilyError,
)

ALL_ERRORS = [
    MalformedCidrError,
    InvalidAddressError,
    InvalidPrefixError,
    PrefixOutOfRangeError,
    UnsupportedAddressFamilyError,
    HostBitsSetError,
]


class TestCidrError:
    @pytest.mark.parametrize("error_cls", ALL_ERRORS)
    def test_is_value_error(self, error_cls):
        assert issubclass(error_cls, CidrError)
        assert issubclass(error_cls, ValueError)

    def test_each_kind_has_one_error(self):
        assert sorted(cls.kind.value for cls in ALL_ERRORS) == sorted(k.value for k in ErrorKind)

    def test_stores_text(self):
        err = InvalidPrefixError("10.0.0.0/x")
        assert err.text == "10.0.0.0/x"

    def test_default_message_includes_text(self):
        err = MalformedCidrError("10.0.0.0")
        assert "'10.0.0.0'" in str(err)
        assert "'/'" in str(err)

    def test_custom_message(self):
        err = InvalidAddressError("x/1", "bad address")
        assert str(err) == "bad address"
        assert err.kind is ErrorKind.INVALID_ADDRESS
