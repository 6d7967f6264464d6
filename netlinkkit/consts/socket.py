"""Constants for netlink socket operations."""

from __future__ import annotations

from .base import ConstEnum

__all__ = ["AddrFamily", "NlFamily"]


class AddrFamily(ConstEnum):
    """General address families for sockets."""

    __wire_format__ = "i"

    UnixOrLocal = 1
    Inet = 2
    Inet6 = 10
    Ipx = 4
    Netlink = 16
    X25 = 9
    Ax25 = 3
    Atmpvc = 8
    Appletalk = 5
    Packet = 17
    Alg = 38


class NlFamily(ConstEnum):
    """Netlink protocol families a socket can be opened for."""

    __wire_format__ = "i"

    Route = 0
    Unused = 1
    Usersock = 2
    Firewall = 3
    SockOrInetDiag = 4
    Nflog = 5
    Xfrm = 6
    Selinux = 7
    Iscsi = 8
    Audit = 9
    FibLookup = 10
    Connector = 11
    Netfilter = 12
    Ip6Fw = 13
    Dnrtmsg = 14
    KobjectUevent = 15
    Generic = 16
    Scsitransport = 18
    Ecryptfs = 19
    Rdma = 20
    Crypto = 21