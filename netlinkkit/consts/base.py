"""Building blocks for netlink constants: wire enums, enum unions and flag sets."""

from __future__ import annotations

import struct
from enum import Enum, IntEnum
from typing import Iterable, Iterator

__all__ = [
    "NLA_ALIGNTO",
    "MAX_NL_LENGTH",
    "ConstEnum",
    "ConstUnion",
    "FlagSet",
    "alignto",
]

NLA_ALIGNTO = 4

#: Largest netlink message length the kernel supports.
MAX_NL_LENGTH = 32768


def alignto(length: int) -> int:
    """Round ``length`` up to the netlink attribute alignment."""
    return (length + NLA_ALIGNTO - 1) & ~(NLA_ALIGNTO - 1)


def _fits(fmt: str, value: int) -> bool:
    try:
        struct.pack("=" + fmt, value)
    except struct.error:
        return False
    return True


def _unpack(fmt: str, data: bytes) -> int:
    size = struct.calcsize("=" + fmt)
    if len(data) < size:
        raise ValueError(
            f"buffer of {len(data)} bytes is too short for a {size}-byte value"
        )
    (raw,) = struct.unpack_from("=" + fmt, data)
    return raw


class ConstEnum(IntEnum):
    """Integer constant with a fixed wire format.

    Subclasses set ``__wire_format__`` to a :mod:`struct` code such as
    ``"B"``, ``"H"``, ``"i"`` or ``"I"``. Values that fit the format but
    name no member become *unrecognized* constants instead of errors.
    """

    @classmethod
    def _wire_format(cls) -> str:
        fmt = getattr(cls, "__wire_format__", None)
        if fmt is None:
            raise TypeError(f"{cls.__name__} does not define __wire_format__")
        return fmt

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        if not _fits(cls._wire_format(), value):
            return None
        pseudo = int.__new__(cls, value)
        pseudo._name_ = f"UnrecognizedConst({value})"
        pseudo._value_ = value
        return cls._value2member_map_.setdefault(value, pseudo)

    def is_unrecognized(self) -> bool:
        """Whether this value names none of the declared constants."""
        return self._name_ not in type(self)._member_map_

    def size(self) -> int:
        """Serialized size of this value in bytes."""
        return type(self).type_size()

    def to_bytes(self) -> bytes:  # type: ignore[override]
        """Serialize in native byte order."""
        return struct.pack("=" + self._wire_format(), self._value_)

    @classmethod
    def from_bytes(cls, data) -> "ConstEnum":  # type: ignore[override]
        """Parse a value from the leading bytes of ``data``."""
        return cls(_unpack(cls._wire_format(), bytes(data[: cls.type_size()])))

    @classmethod
    def type_size(cls) -> int:
        """Serialized size of any value of this type in bytes."""
        return struct.calcsize("=" + cls._wire_format())


class ConstUnion:
    """A field that accepts constants from several enums sharing one format.

    Parsing tries each enum in order and returns the first recognized
    member; values no enum recognizes come back as plain integers.
    """

    def __init__(self, fmt: str, *args: type[ConstEnum]) -> None:
        self.format = fmt
        self.enums: tuple[type[ConstEnum], ...] = tuple(args)
        size = self.type_size()
        for enum in self.enums:
            if enum.type_size() != size:
                raise ValueError(
                    f"{enum.__name__} is {enum.type_size()} bytes wide, "
                    f"expected {size}"
                )

    def __repr__(self) -> str:
        names = ", ".join(enum.__name__ for enum in self.enums)
        return f"ConstUnion({self.format!r}, {names})"

    def from_value(self, value: int):
        """Map a raw value to the first enum member that recognizes it."""
        if isinstance(value, self.enums):
            return value
        if isinstance(value, Enum):
            value = int(value)
        if not _fits(self.format, value):
            raise ValueError(f"{value} does not fit wire format {self.format!r}")
        for enum in self.enums:
            try:
                member = enum(value)
            except ValueError:
                continue
            if not member.is_unrecognized():
                return member
        return int(value)

    def from_bytes(self, data):
        """Parse a value from the leading bytes of ``data``."""
        return self.from_value(_unpack(self.format, bytes(data[: self.type_size()])))

    def to_bytes(self, value) -> bytes:
        """Serialize a member of one of the enums or a raw integer."""
        if value not in self:
            raise ValueError(f"{value!r} is not valid for {self!r}")
        return struct.pack("=" + self.format, int(value))

    def type_size(self) -> int:
        """Serialized size in bytes."""
        return struct.calcsize("=" + self.format)

    def __contains__(self, value) -> bool:
        if isinstance(value, Enum):
            return type(value) in self.enums
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return _fits(self.format, value)


class FlagSet:
    """A set of bit flags condensed into one integer on the wire.

    Subclasses set ``flag_type`` to the :class:`ConstEnum` holding the
    individual flags.
    """

    flag_type: type[ConstEnum] | None = None

    def __init__(self, flags: Iterable = ()) -> None:
        kind = self._kind()
        self._mask = 0
        for flag in flags:
            self._mask |= int(kind(flag))

    @classmethod
    def _kind(cls) -> type[ConstEnum]:
        if cls.flag_type is None:
            raise TypeError(f"{cls.__name__} does not define flag_type")
        return cls.flag_type

    @classmethod
    def empty(cls) -> "FlagSet":
        """A set with no flags."""
        return cls()

    @classmethod
    def from_bitmask(cls, bitmask: int) -> "FlagSet":
        """A set holding exactly the bits of ``bitmask``."""
        fmt = cls._kind()._wire_format()
        if not _fits(fmt, bitmask):
            raise ValueError(f"bitmask {bitmask} does not fit wire format {fmt!r}")
        flags = cls()
        flags._mask = bitmask
        return flags

    def set(self, flag) -> None:
        """Add a flag."""
        self._mask |= int(self._kind()(flag))

    def unset(self, flag) -> None:
        """Remove a flag."""
        self._mask &= ~int(self._kind()(flag))

    def contains(self, flag) -> bool:
        """Whether every bit of ``flag`` is set."""
        bits = int(self._kind()(flag))
        return self._mask & bits == bits

    __contains__ = contains

    @property
    def bitmask(self) -> int:
        """All flags or-ed together."""
        return self._mask

    def __iter__(self) -> Iterator[ConstEnum]:
        return (flag for flag in self._kind() if flag and self.contains(flag))

    def __eq__(self, other) -> bool:
        if not isinstance(other, FlagSet) or type(other) is not type(self):
            return NotImplemented
        return self._mask == other._mask

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = "|".join(flag.name for flag in self)
        return f"{type(self).__name__}({names or self._mask})"

    def to_bytes(self) -> bytes:
        """Serialize the bitmask in native byte order."""
        return struct.pack("=" + self._kind()._wire_format(), self._mask)

    @classmethod
    def from_bytes(cls, data) -> "FlagSet":
        """Parse a bitmask from the leading bytes of ``data``."""
        kind = cls._kind()
        raw = _unpack(kind._wire_format(), bytes(data[: kind.type_size()]))
        return cls.from_bitmask(raw)

    @classmethod
    def type_size(cls) -> int:
        """Serialized size in bytes."""
        return cls._kind().type_size()