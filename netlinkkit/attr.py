"""Operations shared by all kinds of netlink attributes."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .errors import DeError, NlError, NoNullError, NullError, SerError

__all__ = ["Attribute", "AttrHandle"]


def _serialize(payload: Any) -> bytes:
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    if isinstance(payload, str):
        return payload.encode("utf-8") + b"\0"
    if type(payload) in (int, bool):
        raise SerError(
            f"{payload!r} has no fixed wire size; wrap it in a constant type"
        )
    to_bytes = getattr(payload, "to_bytes", None)
    if to_bytes is None:
        raise SerError(f"cannot serialize {type(payload).__name__} as a payload")
    try:
        return bytes(to_bytes())
    except (struct.error, ValueError) as exc:
        raise SerError(f"Error while serializing: {exc}") from exc


def _decode_str(data: bytes) -> str:
    if not data or data[-1] != 0:
        raise NoNullError()
    if 0 in data[:-1]:
        raise NullError()
    try:
        return data[:-1].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DeError(f"Error while deserializing: {exc}") from exc


@dataclass
class Attribute:
    """An attribute whose payload is kept as serialized bytes.

    Keeping bytes lets nested attributes of different payload types live
    side by side in one parent attribute.
    """

    payload: bytes = b""

    def __post_init__(self) -> None:
        self.set_payload(self.payload)

    def set_payload(self, payload: Any) -> None:
        """Serialize ``payload`` and store it, replacing the current payload.

        Accepts bytes-like objects, strings (stored null-terminated) and
        any object with a ``to_bytes()`` method.
        """
        self.payload = _serialize(payload)

    def get_payload_as(self, kind: Any) -> Any:
        """Parse the payload as ``kind``, which reads a fixed-size value."""
        if kind in (bytes, bytearray):
            return kind(self.payload)
        if kind is str:
            raise TypeError("strings need the payload length; use get_payload_as_with_len")
        from_bytes = getattr(kind, "from_bytes", None)
        if from_bytes is None:
            raise TypeError(f"{kind!r} cannot be parsed from bytes")
        try:
            return from_bytes(self.payload)
        except NlError:
            raise
        except (struct.error, ValueError) as exc:
            raise DeError(f"Error while deserializing: {exc}") from exc

    def get_payload_as_with_len(self, kind: Any) -> Any:
        """Parse the whole payload as ``kind``, using its length."""
        if kind is str:
            return _decode_str(self.payload)
        return self.get_payload_as(kind)


class AttrHandle(Sequence):
    """Read and traverse a list of attributes.

    When given a list the handle works on that list itself, so changes
    to its items are visible to the owner.
    """

    def __init__(self, attrs: Iterable) -> None:
        self._attrs = attrs if isinstance(attrs, list) else list(attrs)

    def __iter__(self) -> Iterator:
        return iter(self._attrs)

    def __len__(self) -> int:
        return len(self._attrs)

    def __getitem__(self, index):
        return self._attrs[index]

    def __repr__(self) -> str:
        return f"AttrHandle({self._attrs!r})"

    def get_attrs(self) -> list:
        """The underlying list of attributes."""
        return self._attrs