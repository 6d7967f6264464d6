import struct
from enum import Enum

import pytest

from netlinkkit.consts.base import ConstUnion
from netlinkkit.consts.rtnl import (
    RTA_TYPE,
    Af,
    Arphrd,
    Ifa,
    IfaF,
    IfaFFlags,
    Iff,
    IffFlags,
    Ifla,
    IflaInfo,
    Nda,
    Ntf,
    NtfFlags,
    Nud,
    NudFlags,
    Rta,
    RtAddrFamily,
    Rtm,
    RtmF,
    RtmFFlags,
    Rtn,
    Rtprot,
    RtScope,
    RtTable,
    Tca,
)

ENUMS_WITH_FORMAT = [
    (Af, "B"),
    (RtAddrFamily, "B"),
    (IfaF, "B"),
    (Rtn, "B"),
    (Rtprot, "B"),
    (RtScope, "B"),
    (RtTable, "B"),
    (RtmF, "I"),
    (Nud, "H"),
    (Ntf, "B"),
    (Ifla, "H"),
    (IflaInfo, "H"),
    (Ifa, "H"),
    (Rta, "H"),
    (Tca, "H"),
    (Nda, "H"),
    (Arphrd, "H"),
    (Iff, "I"),
    (Rtm, "H"),
]


@pytest.mark.parametrize("enum,fmt", ENUMS_WITH_FORMAT)
def test_every_member_round_trips(enum, fmt):
    union = ConstUnion(fmt, enum)
    for member in enum:
        data = member.to_bytes()
        assert len(data) == enum.type_size()
        parsed = enum.from_bytes(data)
        assert parsed is member
        assert not parsed.is_unrecognized()
        assert union.from_bytes(data) is member


@pytest.mark.parametrize("enum,fmt", ENUMS_WITH_FORMAT)
def test_size_matches_type_size(enum, fmt):
    expected = ConstUnion(fmt, enum).type_size()
    assert expected == struct.calcsize("=" + fmt)
    for member in enum:
        assert member.size() == enum.type_size() == expected


def test_pinned_values():
    assert RtTable.Main == 254
    assert Rtm.Newaddr.to_bytes() == struct.pack("=H", 20)
    assert RtScope.Universe == 0


def test_duplicate_libc_values_are_aliases():
    assert IfaF.Temporary is IfaF.Secondary
    assert Arphrd.Atm is Arphrd.Appletlk
    assert IfaF(int(IfaF.Secondary)) is IfaF.Temporary
    assert Arphrd.from_bytes(Arphrd.Atm.to_bytes()) is Arphrd.Appletlk


def test_unrecognized_value_kept():
    value = Rta(1000)
    assert value.is_unrecognized()
    assert int(value) == 1000
    assert Rta.from_bytes(value.to_bytes()) == value


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        Rtn(256)
    with pytest.raises(ValueError):
        Rtm(-1)


def test_from_bytes_ignores_trailing_data():
    assert Rtm.from_bytes(Rtm.Getroute.to_bytes() + b"extra") is Rtm.Getroute


def test_from_bytes_short_buffer():
    with pytest.raises(ValueError):
        Rtm.from_bytes(b"\x01")
    with pytest.raises(ValueError):
        Iff.from_bytes(b"\x01\x00")


def test_rta_type_union_prefers_first_enum():
    assert RTA_TYPE.from_value(int(Ifa.Local)) is Ifla(int(Ifa.Local))
    assert RTA_TYPE.from_value(Rta.Gateway) is Rta.Gateway


def test_rta_type_union_unknown_is_plain_int():
    value = RTA_TYPE.from_value(60000)
    assert value == 60000
    assert not isinstance(value, Enum)
    assert RTA_TYPE.from_bytes(RTA_TYPE.to_bytes(60000)) == 60000


def test_rta_type_membership():
    assert Nda.Vlan in RTA_TYPE
    assert Rtm.Newlink not in RTA_TYPE
    assert RTA_TYPE.type_size() == Rta.type_size()


def test_iff_flags_operations():
    flags = IffFlags([Iff.Up, Iff.Running])
    assert flags.contains(Iff.Up)
    assert Iff.Running in flags
    assert not flags.contains(Iff.Loopback)
    assert flags.bitmask == int(Iff.Up) | int(Iff.Running)
    flags.unset(Iff.Up)
    assert not flags.contains(Iff.Up)
    flags.set(Iff.Loopback)
    assert set(flags) == {Iff.Running, Iff.Loopback}


def test_flag_sets_round_trip():
    samples = [
        IffFlags([Iff.Up, Iff.Multicast, Iff.LowerUp]),
        IfaFFlags([IfaF.Permanent, IfaF.Nodad]),
        RtmFFlags([RtmF.Cloned, RtmF.FibMatch]),
        NudFlags([Nud.Reachable, Nud.Stale]),
        NtfFlags([Ntf.Self_, Ntf.Router]),
    ]
    for flags in samples:
        data = flags.to_bytes()
        assert len(data) == type(flags).type_size()
        assert type(flags).from_bytes(data) == flags


def test_empty_flags():
    flags = NtfFlags.empty()
    assert flags.bitmask == 0
    assert list(flags) == []
    assert flags == NtfFlags.from_bitmask(0)


def test_flag_bitmask_width_enforced():
    with pytest.raises(ValueError):
        IfaFFlags.from_bitmask(256)
    assert IfaFFlags.from_bitmask(int(IfaF.Permanent)).contains(IfaF.Permanent)