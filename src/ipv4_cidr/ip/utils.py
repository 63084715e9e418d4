"""IPv4 integer helpers: byte-order conversion and prefix/mask arithmetic."""

from ipaddress import IPv4Address
from typing import Union

ALL_ONES = 0xFFFFFFFF
MAX_PREFIX = 32


def address_to_uint32(address: Union[IPv4Address, str]) -> int:
    """
    Convert an IPv4 address to an unsigned 32-bit integer.

    The first octet becomes the most significant byte regardless of the
    host's native byte order.

    Args:
        address: IPv4Address instance or dotted-quad string

    Returns:
        Integer in the range [0, 2**32 - 1]
    """
    if not isinstance(address, IPv4Address):
        address = IPv4Address(address)
    return int.from_bytes(address.packed, byteorder="big", signed=False)


def uint32_to_address(value: int) -> IPv4Address:
    """
    Convert an unsigned 32-bit integer back to an IPv4 address.

    Args:
        value: Integer in the range [0, 2**32 - 1]

    Returns:
        IPv4Address whose first octet is the most significant byte of value

    Raises:
        ValueError: If value does not fit in 32 unsigned bits
    """
    if not 0 <= value <= ALL_ONES:
        raise ValueError(f"Value {value} is out of range for an IPv4 address")
    return IPv4Address(value.to_bytes(4, byteorder="big", signed=False))


def prefix_to_mask(prefix: int) -> int:
    """
    Build the netmask for a prefix length.

    Args:
        prefix: Number of leading one bits, 0 to 32

    Returns:
        Mask as an unsigned 32-bit integer

    Raises:
        ValueError: If prefix is outside [0, 32]
    """
    if not 0 <= prefix <= MAX_PREFIX:
        raise ValueError(f"Prefix length {prefix} is out of range [0, {MAX_PREFIX}]")
    if prefix == 0:
        return 0
    return (ALL_ONES << (MAX_PREFIX - prefix)) & ALL_ONES


def mask_to_prefix(mask: int) -> int:
    """
    Count the leading one bits of a contiguous netmask.

    Raises:
        ValueError: If mask is out of range or its one bits are not contiguous
    """
    if not 0 <= mask <= ALL_ONES:
        raise ValueError(f"Mask {mask} is out of range for an IPv4 netmask")
    host_bits = ~mask & ALL_ONES
    # host part must be of the form 0...01...1
    if host_bits & (host_bits + 1):
        raise ValueError(f"Mask {uint32_to_address(mask)} is not contiguous")
    return MAX_PREFIX - host_bits.bit_length()
