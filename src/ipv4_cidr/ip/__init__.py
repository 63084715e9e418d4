"""IP address classification and integer helpers."""

from ipv4_cidr.ip.classifier import is_ipv4, is_ipv6, parse_address
from ipv4_cidr.ip.utils import (
    address_to_uint32,
    mask_to_prefix,
    prefix_to_mask,
    uint32_to_address,
)

__all__ = [
    "is_ipv4",
    "is_ipv6",
    "parse_address",
    "address_to_uint32",
    "uint32_to_address",
    "prefix_to_mask",
    "mask_to_prefix",
]
