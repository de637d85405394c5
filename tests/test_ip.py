import ipaddress

import pytest

from portscanx.ip import NoTargetsError, expand_ips


def test_expand_single_ip():
    result = expand_ips(["192.168.1.1"])
    assert str(result[0]) == "192.168.1.1"


def test_expand_cidr():
    result = expand_ips(["192.168.1.0/30"])
    assert len(result) == 2


def test_cidr_excludes_network_and_broadcast():
    result = expand_ips(["192.168.1.0/30"])
    assert ipaddress.ip_address("192.168.1.0") not in result
    assert ipaddress.ip_address("192.168.1.3") not in result


def test_cidr_with_host_bits_set():
    assert expand_ips(["192.168.1.1/30"]) == expand_ips(["192.168.1.0/30"])


def test_slash_31_and_32_keep_all_addresses():
    assert len(expand_ips(["10.0.0.0/31"])) == 2
    assert [str(a) for a in expand_ips(["10.0.0.7/32"])] == ["10.0.0.7"]


def test_ipv6_address():
    assert expand_ips(["::1"]) == [ipaddress.ip_address("::1")]


def test_order_is_kept_and_invalid_targets_skipped():
    result = expand_ips(["10.0.0.1", "not-an-ip", "127.0.0.1"])
    assert [str(a) for a in result] == ["10.0.0.1", "127.0.0.1"]


@pytest.mark.parametrize(
    "targets", [[], ["999.999.999.999"], ["example"], ["10.0.0.0/255.255.255.0"]]
)
def test_no_valid_target_raises(targets):
    with pytest.raises(NoTargetsError, match="No valid IP addresses or CIDR ranges"):
        expand_ips(targets)