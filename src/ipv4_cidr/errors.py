"""Errors raised while parsing CIDR notation."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Reason a CIDR string was rejected."""

    MALFORMED_CIDR = "malformed_cidr"
    INVALID_ADDRESS = "invalid_address"
    INVALID_PREFIX = "invalid_prefix"
    PREFIX_OUT_OF_RANGE = "prefix_out_of_range"
    UNSUPPORTED_ADDRESS_FAMILY = "unsupported_address_family"
    HOST_BITS_SET = "host_bits_set"


class CidrError(ValueError):
    """Base class for CIDR parsing errors.

    Attributes:
        kind: Which validation step rejected the input
        text: The offending input string
    """

    kind: ErrorKind
    default_message = "Invalid CIDR"

    def __init__(self, text: str, message: Optional[str] = None):
        self.text = text
        super().__init__(message or f"{self.default_message}: {text!r}")


class MalformedCidrError(CidrError):
    kind = ErrorKind.MALFORMED_CIDR
    default_message = "Expected exactly one '/' separating address and prefix"


class InvalidAddressError(CidrError):
    kind = ErrorKind.INVALID_ADDRESS
    default_message = "Invalid IP address in CIDR"


class InvalidPrefixError(CidrError):
    kind = ErrorKind.INVALID_PREFIX
    default_message = "Invalid prefix length"


class PrefixOutOfRangeError(CidrError):
    kind = ErrorKind.PREFIX_OUT_OF_RANGE
    default_message = "Prefix length must be between 0 and 32"


class UnsupportedAddressFamilyError(CidrError):
    kind = ErrorKind.UNSUPPORTED_ADDRESS_FAMILY
    default_message = "Only IPv4 networks are supported"


class HostBitsSetError(CidrError):
    kind = ErrorKind.HOST_BITS_SET
    default_message = "Address has host bits set"
