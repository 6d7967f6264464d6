import pytest

from netlinkkit.attr import AttrHandle, Attribute
from netlinkkit.consts.genl import CtrlAttr, Index
from netlinkkit.consts.nl import Nlmsg, NlmF, NlmFFlags
from netlinkkit.errors import (
    DeError,
    NlmsghdrErr,
    Nlmsgerr,
    NoNullError,
    NullError,
    SerError,
)


def test_string_payload_is_null_terminated():
    attr = Attribute()
    attr.set_payload("this is a string")
    assert attr.payload == b"this is a string\0"


def test_string_round_trip():
    attr = Attribute("this is also a string")
    assert attr.get_payload_as_with_len(str) == "this is also a string"


def test_empty_string_round_trip():
    assert Attribute("").get_payload_as_with_len(str) == ""


def test_missing_null_terminator():
    with pytest.raises(NoNullError):
        Attribute(b"abc").get_payload_as_with_len(str)


def test_null_before_end():
    with pytest.raises(NullError):
        Attribute(b"a\0b\0").get_payload_as_with_len(str)


def test_invalid_utf8():
    with pytest.raises(DeError):
        Attribute(b"\xff\xfe\0").get_payload_as_with_len(str)


def test_const_enum_round_trip():
    attr = Attribute(CtrlAttr.FamilyName)
    assert attr.get_payload_as(CtrlAttr) is CtrlAttr.FamilyName


def test_index_round_trip():
    attr = Attribute(Index(5))
    assert attr.get_payload_as(Index) == Index(5)


def test_flag_set_round_trip():
    flags = NlmFFlags([NlmF.Request, NlmF.Ack])
    attr = Attribute(flags)
    assert attr.get_payload_as(NlmFFlags) == flags


def test_bytes_payload_returned_unchanged():
    attr = Attribute(bytearray(b"\x01\x02"))
    assert attr.get_payload_as(bytes) == b"\x01\x02"
    assert attr.get_payload_as_with_len(bytes) == b"\x01\x02"


def test_set_payload_replaces_previous():
    attr = Attribute(b"\x09\x09\x09\x09")
    attr.set_payload(Index(1))
    assert attr.payload == Index(1).to_bytes()


def test_plain_integer_rejected():
    with pytest.raises(SerError):
        Attribute().set_payload(0)


def test_unserializable_payload_rejected():
    with pytest.raises(SerError):
        Attribute().set_payload(object())


def test_short_payload_raises_de_error():
    with pytest.raises(DeError):
        Attribute(b"\x01").get_payload_as(CtrlAttr)


def test_string_needs_length():
    with pytest.raises(TypeError):
        Attribute("abc").get_payload_as(str)


def test_nested_error_packet_round_trip():
    packet = Nlmsgerr(
        error=-2,
        nlmsg=NlmsghdrErr(nl_len=16, nl_type=Nlmsg.Noop, nl_payload=b"\x05"),
    )
    attr = Attribute(packet)
    assert attr.get_payload_as_with_len(Nlmsgerr) == packet


def test_handle_iterates_in_order():
    attrs = [Attribute(Index(1)), Attribute(Index(2))]
    handle = AttrHandle(attrs)
    assert [a.get_payload_as(Index) for a in handle] == [Index(1), Index(2)]
    assert len(handle) == 2
    assert handle[1] is attrs[1]


def test_handle_from_iterable():
    handle = AttrHandle(Attribute(b"\x00") for _ in range(3))
    assert len(handle.get_attrs()) == 3


def test_handle_shares_list_for_mutation():
    attrs = [Attribute(b"")]
    handle = AttrHandle(attrs)
    handle.get_attrs()[0].set_payload("x")
    assert attrs[0].payload == b"x\0"
    assert handle.get_attrs() is attrs