"""Constants for the top-level netlink message header."""

from __future__ import annotations

from .base import ConstEnum, ConstUnion, FlagSet
from .netfilter import NetfilterMsg
from .rtnl import Rtm

__all__ = ["Nlmsg", "GenlId", "NlmF", "NlmFFlags", "NL_TYPE"]


class Nlmsg(ConstEnum):
    """Standard values for ``nl_type`` in the netlink message header."""

    __wire_format__ = "H"

    Noop = 1
    Error = 2
    Done = 3
    Overrun = 4


class GenlId(ConstEnum):
    """Generic netlink family identifiers for ``nl_type``."""

    __wire_format__ = "H"

    Ctrl = 16
    VfsDquot = 17
    Pmcraid = 18


class NlmF(ConstEnum):
    """Values for ``nl_flags`` in the netlink message header."""

    __wire_format__ = "H"

    Request = 0x1
    Multi = 0x2
    Ack = 0x4
    Echo = 0x8
    DumpIntr = 0x10
    DumpFiltered = 0x20
    Root = 0x100
    Match = 0x200
    Atomic = 0x400
    Dump = 0x300
    Replace = 0x100
    Excl = 0x200
    Create = 0x400
    Append = 0x800


class NlmFFlags(FlagSet):
    """Set of :class:`NlmF` flags."""

    flag_type = NlmF


#: Every constant valid in the ``nl_type`` field of a netlink header.
NL_TYPE = ConstUnion("H", Nlmsg, GenlId, Rtm, NetfilterMsg)