"""Generic netlink controller constants."""

from __future__ import annotations

import struct

from .base import ConstEnum, ConstUnion
from .netfilter import NfLogAttr, NfLogCfg

__all__ = [
    "CtrlCmd",
    "CtrlAttr",
    "CtrlAttrMcastGrp",
    "Index",
    "CMD",
    "NLA_TYPE",
]


class CtrlCmd(ConstEnum):
    """Values for ``cmd`` in the generic netlink header."""

    __wire_format__ = "B"

    Unspec = 0
    Newfamily = 1
    Delfamily = 2
    Getfamily = 3
    Newops = 4
    Delops = 5
    Getops = 6
    NewmcastGrp = 7
    DelmcastGrp = 8
    GetmcastGrp = 9


class CtrlAttr(ConstEnum):
    """Values for ``nla_type`` in controller attributes."""

    __wire_format__ = "H"

    Unspec = 0
    FamilyId = 1
    FamilyName = 2
    Version = 3
    Hdrsize = 4
    Maxattr = 5
    Ops = 6
    McastGroups = 7


class CtrlAttrMcastGrp(ConstEnum):
    """Values for ``nla_type`` in multicast group attributes."""

    __wire_format__ = "H"

    Unspec = 0
    Name = 1
    Id = 2


class Index(int):
    """Attribute type used as a plain list index."""

    _FORMAT = "=H"

    def __new__(cls, value: int) -> "Index":
        index = int.__new__(cls, value)
        if not 0 <= index <= 0xFFFF:
            raise ValueError(f"index {value} does not fit in 16 bits")
        return index

    def __repr__(self) -> str:
        return f"Index({int(self)})"

    def is_unrecognized(self) -> bool:
        """An index is always a recognized value."""
        return False

    def size(self) -> int:
        """Serialized size in bytes."""
        return self.type_size()

    def to_bytes(self) -> bytes:  # type: ignore[override]
        """Serialize in native byte order."""
        return struct.pack(self._FORMAT, self)

    @classmethod
    def from_bytes(cls, data) -> "Index":  # type: ignore[override]
        """Parse an index from the leading bytes of ``data``."""
        size = cls.type_size()
        raw = bytes(data[:size])
        if len(raw) < size:
            raise ValueError(
                f"buffer of {len(raw)} bytes is too short for a {size}-byte value"
            )
        (value,) = struct.unpack(cls._FORMAT, raw)
        return cls(value)

    @classmethod
    def type_size(cls) -> int:
        """Serialized size in bytes."""
        return struct.calcsize(cls._FORMAT)


#: Every constant valid in the ``cmd`` field of a generic netlink header.
CMD = ConstUnion("B", CtrlCmd)

#: Every constant valid in the ``nla_type`` field of a generic attribute.
NLA_TYPE = ConstUnion("H", CtrlAttr, CtrlAttrMcastGrp, NfLogAttr, NfLogCfg, Index)