"""IPv4 CIDR network parsing and containment checks."""

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
from ipv4_cidr.ip import address_to_uint32, uint32_to_address
from ipv4_cidr.network import IPv4Network, parse, try_parse

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "IPv4Network",
    "parse",
    "try_parse",
    "address_to_uint32",
    "uint32_to_address",
    "CidrError",
    "ErrorKind",
    "MalformedCidrError",
    "InvalidAddressError",
    "InvalidPrefixError",
    "PrefixOutOfRangeError",
    "UnsupportedAddressFamilyError",
    "HostBitsSetError",
]
