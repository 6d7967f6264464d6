"""Constants for the netfilter netlink protocols."""

from __future__ import annotations

from .base import ConstEnum, ConstUnion

__all__ = [
    "NfLogAttr",
    "NfLogCfg",
    "NetfilterMsg",
    "LogCmd",
    "LogCopyMode",
    "LOG_CFG_CMD",
    "nfnl_msg_type",
]

_NFNL_SUBSYS_ULOG = 4
_NFULNL_MSG_PACKET = 0
_NFULNL_MSG_CONFIG = 1


def nfnl_msg_type(subsys: int, msg: int) -> int:
    """Combine a netfilter subsystem and message number into a message type."""
    for name, value in (("subsys", subsys), ("msg", msg)):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{name} must fit in one byte, got {value}")
    return (subsys << 8) | msg


class NfLogAttr(ConstEnum):
    """Attributes of a netfilter log packet message sent by the kernel."""

    __wire_format__ = "H"

    PacketHdr = 1
    Mark = 2
    Timestamp = 3
    IfindexIndev = 4
    IfindexOutdev = 5
    IfindexPhyindev = 6
    IfindexPhyoutdev = 7
    Hwaddr = 8
    Payload = 9
    Prefix = 10
    Uid = 11
    Seq = 12
    SeqGlobal = 13
    Gid = 14
    Hwtype = 15
    Hwheader = 16
    Hwlen = 17
    Ct = 18
    CtInfo = 19


class NfLogCfg(ConstEnum):
    """Configuration attributes for netfilter logging."""

    __wire_format__ = "H"

    Cmd = 1
    Mode = 2
    NlBufSize = 3
    Timeout = 4
    QThresh = 5
    Flags = 6


class NetfilterMsg(ConstEnum):
    """Message types seen on netfilter netlink sockets."""

    __wire_format__ = "H"

    LogPacket = nfnl_msg_type(_NFNL_SUBSYS_ULOG, _NFULNL_MSG_PACKET)
    LogConfig = nfnl_msg_type(_NFNL_SUBSYS_ULOG, _NFULNL_MSG_CONFIG)


class LogCmd(ConstEnum):
    """Command values for :attr:`NfLogCfg.Cmd`."""

    __wire_format__ = "B"

    Bind = 1
    Unbind = 2
    PfBind = 3
    PfUnbind = 4


class LogCopyMode(ConstEnum):
    """Copy mode of logged packets."""

    __wire_format__ = "B"

    None_ = 0
    Meta = 1
    Packet = 2


#: Every constant valid as the parameter of :attr:`NfLogCfg.Cmd`.
LOG_CFG_CMD = ConstUnion("B", LogCmd)