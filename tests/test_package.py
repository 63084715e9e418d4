import ipv4_cidr


def test_version():
    assert ipv4_cidr.__version__  # version is set and non-empty


def test_version_is_string():
    assert isinstance(ipv4_cidr.__version__, str)


def test_subpackages_importable():
    from ipv4_cidr import config  # noqa: F401
    from ipv4_cidr import ip  # noqa: F401
    from ipv4_cidr import network  # noqa: F401


def test_public_api():
    net = ipv4_cidr.parse("192.0.2.0/24")
    assert isinstance(net, ipv4_cidr.IPv4Network)
    assert ipv4_cidr.try_parse("192.0.2.0/33") is None
    assert ipv4_cidr.uint32_to_address(ipv4_cidr.address_to_uint32("192.0.2.1")) == net.network_address + 1
