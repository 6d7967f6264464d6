"""Netlink error packets and the exceptions raised throughout the package."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field

from .consts.nl import NL_TYPE, NlmFFlags

__all__ = [
    "NlmsghdrErr",
    "Nlmsgerr",
    "NlError",
    "ErrorResponse",
    "NoAckError",
    "BadSeqError",
    "BadPidError",
    "SerError",
    "SerUnexpectedEOB",
    "BufferNotFilled",
    "DeError",
    "DeUnexpectedEOB",
    "BufferNotParsed",
    "NullError",
    "NoNullError",
]


class NlError(Exception):
    """General netlink error; every error raised by the package derives from it."""

    default_message = "Netlink error"

    def __init__(self, message: object = None) -> None:
        self.message = self.default_message if message is None else str(message)
        super().__init__(self.message)


class NoAckError(NlError):
    """No ACK arrived although the request asked for one."""

    default_message = "No ack received"


class BadSeqError(NlError):
    """The sequence number of a response does not match the request."""

    default_message = "Sequence number does not match the request"


class BadPidError(NlError):
    """The PID in a received message does not match the socket."""

    default_message = "PID does not match the socket"


class SerError(NlError):
    """Serialization failed."""

    default_message = "Error while serializing"


class SerUnexpectedEOB(SerError):
    """The buffer ended before serialization finished."""

    default_message = (
        "The buffer was too small for the requested serialization operation"
    )


class BufferNotFilled(SerError):
    """Serialization did not fill the space it was given."""

    default_message = (
        "The number of bytes written to the buffer did not fill the given space"
    )


class DeError(NlError):
    """Deserialization failed."""

    default_message = "Error while deserializing"


class DeUnexpectedEOB(DeError):
    """The buffer ended before deserialization finished."""

    default_message = (
        "The buffer was not large enough to complete the deserialize operation"
    )


class BufferNotParsed(DeError):
    """Unparsed data was left in the buffer."""

    default_message = "Unparsed data left in buffer"


class NullError(DeError):
    """A null byte was found before the end of a serialized string."""

    default_message = "A null was found before the end of the buffer"


class NoNullError(DeError):
    """A serialized string lacks its terminating null byte."""

    default_message = "No terminating null byte was found in the buffer"


_HEADER = struct.Struct("=IHHII")
_ERRNO = struct.Struct("=i")


@dataclass
class NlmsghdrErr:
    """Header of the request that an error packet refers to.

    The payload is whatever followed the header in the packet, so its
    length comes from the packet size rather than from ``nl_len``.
    """

    nl_len: int
    nl_type: int
    nl_flags: NlmFFlags = field(default_factory=NlmFFlags.empty)
    nl_seq: int = 0
    nl_pid: int = 0
    nl_payload: bytes = b""

    def __post_init__(self) -> None:
        self.nl_payload = bytes(self.nl_payload)

    @classmethod
    def header_size(cls) -> int:
        """Size of every field but the payload, in bytes."""
        return _HEADER.size

    def size(self) -> int:
        """Serialized size in bytes."""
        return self.header_size() + len(self.nl_payload)

    def to_bytes(self) -> bytes:
        """Serialize in native byte order."""
        try:
            return b"".join(
                (
                    struct.pack("=I", self.nl_len),
                    NL_TYPE.to_bytes(self.nl_type),
                    self.nl_flags.to_bytes(),
                    struct.pack("=II", self.nl_seq, self.nl_pid),
                    self.nl_payload,
                )
            )
        except (struct.error, ValueError) as exc:
            raise SerError(f"Error while serializing: {exc}") from exc

    @classmethod
    def from_bytes(cls, data) -> "NlmsghdrErr":
        """Parse a header from ``data``; all trailing bytes become the payload."""
        raw = bytes(data)
        if len(raw) < cls.header_size():
            raise DeUnexpectedEOB()
        nl_len, nl_type, flags, seq, pid = _HEADER.unpack_from(raw)
        return cls(
            nl_len=nl_len,
            nl_type=NL_TYPE.from_value(nl_type),
            nl_flags=NlmFFlags.from_bitmask(flags),
            nl_seq=seq,
            nl_pid=pid,
            nl_payload=raw[cls.header_size():],
        )


@dataclass
class Nlmsgerr:
    """Body of a netlink error or ACK packet."""

    error: int
    nlmsg: NlmsghdrErr

    def size(self) -> int:
        """Serialized size in bytes."""
        return _ERRNO.size + self.nlmsg.size()

    def to_bytes(self) -> bytes:
        """Serialize in native byte order."""
        try:
            code = _ERRNO.pack(self.error)
        except struct.error as exc:
            raise SerError(f"Error while serializing: {exc}") from exc
        return code + self.nlmsg.to_bytes()

    @classmethod
    def from_bytes(cls, data) -> "Nlmsgerr":
        """Parse an error packet body spanning all of ``data``."""
        raw = bytes(data)
        if len(raw) < _ERRNO.size:
            raise DeUnexpectedEOB()
        (error,) = _ERRNO.unpack_from(raw)
        return cls(error=error, nlmsg=NlmsghdrErr.from_bytes(raw[_ERRNO.size:]))

    def __str__(self) -> str:
        return f"{os.strerror(self.error)} (os error {self.error})"


class ErrorResponse(NlError):
    """Netlink answered a request with an error packet."""

    def __init__(self, packet: Nlmsgerr) -> None:
        self.packet = packet
        super().__init__(f"Error response received from netlink: {packet}")