"""IPv4 network value type parsed from CIDR notation."""

import logging
import re
from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import Optional, Union

from ipv4_cidr.errors import (
    CidrError,
    HostBitsSetError,
    InvalidAddressError,
    InvalidPrefixError,
    MalformedCidrError,
    PrefixOutOfRangeError,
    UnsupportedAddressFamilyError,
)
from ipv4_cidr.ip.classifier import parse_address
from ipv4_cidr.ip.utils import (
    ALL_ONES,
    MAX_PREFIX,
    address_to_uint32,
    prefix_to_mask,
    uint32_to_address,
)

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class IPv4Network:
    """
    An IPv4 network: a network address and a prefix length.

    Instances are immutable. Build them with :meth:`parse` or
    :meth:`try_parse`; the constructor takes the already normalised integer
    network address and rejects values with host bits set.

    Containment uses the mask-equality test ``(addr & mask) == network``.
    For a contiguous mask this is the same as the inclusive range test
    ``network <= addr <= broadcast``, so only the one code path exists.
    """

    network_int: int
    prefix_length: int

    def __post_init__(self):
        if not 0 <= self.prefix_length <= MAX_PREFIX:
            raise ValueError(f"Prefix length {self.prefix_length} is out of range [0, {MAX_PREFIX}]")
        if not 0 <= self.network_int <= ALL_ONES:
            raise ValueError(f"Network value {self.network_int} is out of range for IPv4")
        if self.network_int & ~self.mask_int & ALL_ONES:
            raise ValueError(f"{uint32_to_address(self.network_int)}/{self.prefix_length} has host bits set")

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> "IPv4Network":
        """
        Parse a network in ``address/prefix`` notation.

        Host bits in the address are cleared unless ``strict`` is set.

        Args:
            text: CIDR string such as "192.0.2.0/24"
            strict: Reject addresses with host bits set

        Returns:
            Parsed network

        Raises:
            MalformedCidrError: text does not split into exactly two parts on '/'
            InvalidAddressError: address part is not a valid IP address
            InvalidPrefixError: prefix part is not an integer
            UnsupportedAddressFamilyError: address part is IPv6
            PrefixOutOfRangeError: prefix is outside [0, 32]
            HostBitsSetError: strict is set and the address has host bits set
            TypeError: text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected CIDR string, got {type(text).__name__}")
        result = cls._from_text(text, strict)
        if isinstance(result, CidrError):
            raise result
        return result

    @classmethod
    def try_parse(cls, text: str, strict: bool = False) -> Optional["IPv4Network"]:
        """
        Parse a network, returning None instead of raising on bad input.

        The reason for rejection is only logged at DEBUG level.
        """
        if not isinstance(text, str):
            logger.debug("Not a CIDR string: %r", text)
            return None
        result = cls._from_text(text, strict)
        if isinstance(result, CidrError):
            logger.debug("Rejected CIDR %r (%s): %s", text, result.kind.value, result)
            return None
        return result

    @classmethod
    def _from_text(cls, text: str, strict: bool) -> Union["IPv4Network", CidrError]:
        """Validate text and return either the network or the error describing it."""
        parts = text.split("/")
        if len(parts) != 2:
            return MalformedCidrError(text)
        address_text, prefix_text = parts

        try:
            address = parse_address(address_text)
        except ValueError:
            return InvalidAddressError(text)

        if not _PREFIX_RE.fullmatch(prefix_text):
            return InvalidPrefixError(text)
        try:
            prefix = int(prefix_text)
        except ValueError:
            # too many digits for int()
            return PrefixOutOfRangeError(text)

        # family before range: "2001:db8::/64" reports the family
        if address.version != 4:
            return UnsupportedAddressFamilyError(text)
        if not 0 <= prefix <= MAX_PREFIX:
            return PrefixOutOfRangeError(text)

        mask = prefix_to_mask(prefix)
        value = address_to_uint32(address)
        if strict and value & ~mask & ALL_ONES:
            return HostBitsSetError(text)
        return cls(network_int=value & mask, prefix_length=prefix)

    @property
    def mask_int(self) -> int:
        return prefix_to_mask(self.prefix_length)

    @property
    def broadcast_int(self) -> int:
        return self.network_int | (~self.mask_int & ALL_ONES)

    @property
    def network_address(self) -> IPv4Address:
        return uint32_to_address(self.network_int)

    @property
    def netmask(self) -> IPv4Address:
        return uint32_to_address(self.mask_int)

    @property
    def hostmask(self) -> IPv4Address:
        return uint32_to_address(~self.mask_int & ALL_ONES)

    @property
    def broadcast_address(self) -> IPv4Address:
        return uint32_to_address(self.broadcast_int)

    @property
    def num_addresses(self) -> int:
        return 1 << (MAX_PREFIX - self.prefix_length)

    def contains(self, address: Union[IPv4Address, str, int]) -> bool:
        """
        Check if an address falls within this network.

        Args:
            address: IPv4Address, address string or unsigned 32-bit integer

        Returns:
            True if the address is inside the network. IPv6 addresses,
            unparseable strings and out-of-range integers give False.
        """
        value = self._address_value(address)
        if value is None:
            return False
        return (value & self.mask_int) == self.network_int

    def __contains__(self, address) -> bool:
        return self.contains(address)

    @staticmethod
    def _address_value(address) -> Optional[int]:
        if isinstance(address, IPv4Address):
            return address_to_uint32(address)
        if isinstance(address, int) and not isinstance(address, bool):
            return address if 0 <= address <= ALL_ONES else None
        if isinstance(address, str):
            try:
                parsed = parse_address(address)
            except ValueError as e:
                logger.debug("Could not parse IP %r: %s", address, e)
                return None
            if parsed.version == 4:
                return address_to_uint32(parsed)
        return None

    def __str__(self) -> str:
        return f"{self.network_address}/{self.prefix_length}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"


def parse(text: str, strict: bool = False) -> IPv4Network:
    """Parse a network in CIDR notation. See :meth:`IPv4Network.parse`."""
    return IPv4Network.parse(text, strict=strict)


def try_parse(text: str, strict: bool = False) -> Optional[IPv4Network]:
    """Parse a network in CIDR notation, or return None if it is invalid."""
    return IPv4Network.try_parse(text, strict=strict)
