# netlinkkit

Building blocks for netlink on Linux: the protocol constants, flag sets,
attribute payload handling and error packets that netlink messages are
made of. Pure Python, no third-party dependencies.

## Installing

```
pip install netlinkkit
```

## What is in it

- `netlinkkit.consts.base`
  - `ConstEnum`: an `IntEnum` with a fixed wire format (set by
    `__wire_format__`). Members serialize with `to_bytes()` in native
    byte order and parse with `from_bytes()`; `type_size()` and `size()`
    give the width in bytes. A value that fits the format but names no
    member becomes an unrecognized member, for which
    `is_unrecognized()` returns `True`, instead of raising.
  - `ConstUnion`: one wire field that accepts constants from several
    enums sharing a format. `from_value()` and `from_bytes()` return the
    first enum member that recognizes the value, or a plain `int`;
    `to_bytes()` serializes a member or a raw integer; `in` checks
    whether a value is valid for the field.
  - `FlagSet`: a set of flags packed into one bitmask. Build it from a
    list of flags, `empty()` or `from_bitmask()`; change it with `set()`
    and `unset()`; test with `contains()` or `in`; read the `bitmask`
    property; iterate over the flags it holds; serialize with
    `to_bytes()` / `from_bytes()`.
  - `alignto(length)`: rounds a length up to netlink's 4-byte
    alignment. `MAX_NL_LENGTH` is 32768.
- `netlinkkit.consts.nl`: `Nlmsg`, `GenlId`, `NlmF`, the `NlmFFlags` set
  and `NL_TYPE`, the union of everything valid as a message type
  (`Nlmsg`, `GenlId`, `Rtm`, `NetfilterMsg`).
- `netlinkkit.consts.genl`: `CtrlCmd`, `CtrlAttr`, `CtrlAttrMcastGrp`,
  `Index` (a 16-bit list index used as an attribute type), and the
  unions `CMD` and `NLA_TYPE`.
- `netlinkkit.consts.rtnl`: rtnetlink constants (`Rtm`, `Ifla`,
  `IflaInfo`, `Ifa`, `Rta`, `Tca`, `Nda`, `Rtn`, `Rtprot`, `RtScope`,
  `RtTable`, `Arphrd`, `Af`, `RtAddrFamily`, …), the flag sets
  `IffFlags`, `IfaFFlags`, `RtmFFlags`, `NudFlags`, `NtfFlags`, and the
  union `RTA_TYPE`.
- `netlinkkit.consts.socket`: `AddrFamily` and `NlFamily`.
- `netlinkkit.consts.netfilter`: `NfLogAttr`, `NfLogCfg`,
  `NetfilterMsg`, `LogCmd`, `LogCopyMode`, the union `LOG_CFG_CMD`, and
  `nfnl_msg_type(subsys, msg)`.
- `netlinkkit.attr`
  - `Attribute`: holds a payload as bytes. `set_payload()` accepts
    bytes, a string (stored null-terminated) or anything with a
    `to_bytes()` method. `get_payload_as(kind)` parses a fixed-size
    value; `get_payload_as_with_len(kind)` parses the whole payload,
    and with `str` checks for the terminating null.
  - `AttrHandle`: a read-only sequence over a list of attributes;
    `get_attrs()` returns the list itself.
- `netlinkkit.errors`
  - `NlmsghdrErr` and `Nlmsgerr`: the body of a netlink error or ACK
    packet, with `to_bytes()`, `from_bytes()` and `size()`.
    `str(Nlmsgerr)` gives the OS error message for its code.
  - Exceptions, all deriving from `NlError`: `ErrorResponse` (wraps an
    `Nlmsgerr` packet), `NoAckError`, `BadSeqError`, `BadPidError`;
    `SerError` with `SerUnexpectedEOB` and `BufferNotFilled`; `DeError`
    with `DeUnexpectedEOB`, `BufferNotParsed`, `NullError` and
    `NoNullError`.

## Example

```python
from netlinkkit.consts.base import alignto
from netlinkkit.consts.genl import CtrlCmd
from netlinkkit.consts.nl import NL_TYPE, GenlId, NlmF, NlmFFlags

flags = NlmFFlags([NlmF.Request, NlmF.Dump])
assert flags.contains(NlmF.Request)
assert NlmFFlags.from_bytes(flags.to_bytes()).bitmask == flags.bitmask

cmd = CtrlCmd.from_bytes(CtrlCmd.Getfamily.to_bytes())
assert cmd is CtrlCmd.Getfamily
assert CtrlCmd(200).is_unrecognized()

assert NL_TYPE.from_value(16) is GenlId.Ctrl
assert alignto(5) == 8
```

## What it does not do

The package provides the constants, attribute payloads and error
packets only. It does not open netlink sockets, send or receive
messages, or define the full message structures (the netlink message
header, generic netlink header, or routing messages such as interface,
address and route messages). There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```