import struct

import pytest

from netlinkkit.consts.rtnl import RtAddrFamily
from netlinkkit.consts.socket import AddrFamily, NlFamily


@pytest.mark.parametrize("enum", [AddrFamily, NlFamily])
def test_members_round_trip(enum):
    for member in enum:
        data = member.to_bytes()
        assert len(data) == enum.type_size()
        assert enum.from_bytes(data) is member
        assert not member.is_unrecognized()


def test_type_size_is_c_int():
    assert NlFamily.type_size() == struct.calcsize("=i")
    assert AddrFamily.Inet.size() == struct.calcsize("=i")


def test_pinned_values():
    assert NlFamily.Generic == 16
    assert NlFamily.Route.to_bytes() == struct.pack("=i", 0)


def test_address_families_agree_with_rtnl():
    for member in AddrFamily:
        assert int(RtAddrFamily[member.name]) == int(member)
        assert RtAddrFamily(int(member)) is RtAddrFamily[member.name]


def test_negative_unrecognized_value():
    value = NlFamily(-1)
    assert value.is_unrecognized()
    assert int(value) == -1
    assert NlFamily.from_bytes(value.to_bytes()) == value


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        NlFamily(2**31)


def test_short_buffer_rejected():
    with pytest.raises(ValueError):
        AddrFamily.from_bytes(b"\x02\x00")


def test_members_distinct():
    members = list(NlFamily)
    decoded = [NlFamily.from_bytes(member.to_bytes()) for member in members]
    assert decoded == members
    values = [int(member) for member in decoded]
    assert len(values) == len(set(values))