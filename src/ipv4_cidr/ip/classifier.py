"""IP address parsing and address-family classification."""

import ipaddress
import logging
from typing import Union

logger = logging.getLogger(__name__)

AnyAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_address(text: str) -> AnyAddress:
    """
    Parse an IPv4 dotted-quad or IPv6 address string.

    IPv4 addresses must have exactly four decimal octets in [0, 255].
    Short forms ("10.1"), integers, hex/octal octets and leading zeros
    are rejected.

    Args:
        text: Address string without prefix length

    Returns:
        IPv4Address or IPv6Address

    Raises:
        ValueError: If text is not a valid address of either family
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected address string, got {type(text).__name__}")
    # ip_address() would accept integers and packed bytes; only text is allowed here
    return ipaddress.ip_address(text)


def is_ipv4(value) -> bool:
    """
    Check if a value is an IPv4 address.

    Args:
        value: Address object or address string

    Returns:
        True if value is (or parses as) an IPv4 address, False otherwise
    """
    return _family(value) == 4


def is_ipv6(value) -> bool:
    """Check if a value is (or parses as) an IPv6 address."""
    return _family(value) == 6


def _family(value) -> int:
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return value.version
    try:
        return parse_address(value).version
    except ValueError as e:
        logger.debug("Could not parse IP %r: %s", value, e)
        return 0
