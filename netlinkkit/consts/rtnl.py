"""Routing netlink (rtnetlink) constants, attribute types and flag sets."""

from __future__ import annotations

from .base import ConstEnum, ConstUnion, FlagSet

__all__ = [
    "Af",
    "RtAddrFamily",
    "IfaF",
    "Rtn",
    "Rtprot",
    "RtScope",
    "RtTable",
    "RtmF",
    "Nud",
    "Ntf",
    "Ifla",
    "IflaInfo",
    "Ifa",
    "Rta",
    "Tca",
    "Nda",
    "Arphrd",
    "Iff",
    "IffFlags",
    "IfaFFlags",
    "RtmFFlags",
    "NudFlags",
    "NtfFlags",
    "Rtm",
    "RTA_TYPE",
]


class Af(ConstEnum):
    """Internet address families."""

    __wire_format__ = "B"

    Inet = 2
    Inet6 = 10


class RtAddrFamily(ConstEnum):
    """General address families for sockets."""

    __wire_format__ = "B"

    Unspecified = 0
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


class IfaF(ConstEnum):
    """Interface address flags."""

    __wire_format__ = "B"

    Secondary = 0x01
    Temporary = 0x01
    Nodad = 0x02
    Optimistic = 0x04
    Dadfailed = 0x08
    Homeaddress = 0x10
    Deprecated = 0x20
    Tentative = 0x40
    Permanent = 0x80


class Rtn(ConstEnum):
    """``rtm_type``: the results of a lookup from a route table."""

    __wire_format__ = "B"

    Unspec = 0
    Unicast = 1
    Local = 2
    Broadcast = 3
    Anycast = 4
    Multicast = 5
    Blackhole = 6
    Unreachable = 7
    Prohibit = 8
    Throw = 9
    Nat = 10
    Xresolve = 11


class Rtprot(ConstEnum):
    """``rtm_protocol``: the origins of routes defined in the kernel."""

    __wire_format__ = "B"

    Unspec = 0
    Redirect = 1
    Kernel = 2
    Boot = 3
    Static = 4


class RtScope(ConstEnum):
    """``rtm_scope``: the distance between destinations."""

    __wire_format__ = "B"

    Universe = 0
    Site = 200
    Link = 253
    Host = 254
    Nowhere = 255


class RtTable(ConstEnum):
    """``rt_class_t``: reserved route table identifiers."""

    __wire_format__ = "B"

    Unspec = 0
    Compat = 252
    Default = 253
    Main = 254
    Local = 255


class RtmF(ConstEnum):
    """``rtm_flags``: flags for rtnetlink messages."""

    __wire_format__ = "I"

    Notify = 0x100
    Cloned = 0x200
    Equalize = 0x400
    Prefix = 0x800
    LookupTable = 0x1000
    FibMatch = 0x2000


class Nud(ConstEnum):
    """ARP neighbour cache entry states."""

    __wire_format__ = "H"

    None_ = 0x00
    Incomplete = 0x01
    Reachable = 0x02
    Stale = 0x04
    Delay = 0x08
    Probe = 0x10
    Failed = 0x20
    Noarp = 0x40
    Permanent = 0x80


class Ntf(ConstEnum):
    """ARP neighbour cache entry flags."""

    __wire_format__ = "B"

    Use = 0x01
    Self_ = 0x02
    Master = 0x04
    Proxy = 0x08
    ExtLearned = 0x10
    Offloaded = 0x20
    Router = 0x80


class Ifla(ConstEnum):
    """Interface information message attributes, used with ``Ifinfomsg``."""

    __wire_format__ = "H"

    Unspec = 0
    Address = 1
    Broadcast = 2
    Ifname = 3
    Mtu = 4
    Link = 5
    Qdisc = 6
    Stats = 7
    Cost = 8
    Priority = 9
    Master = 10
    Wireless = 11
    Protinfo = 12
    Txqlen = 13
    Map = 14
    Weight = 15
    Operstate = 16
    Linkmode = 17
    Linkinfo = 18
    NetNsPid = 19
    Ifalias = 20
    NumVf = 21
    VfinfoList = 22
    Stats64 = 23
    VfPorts = 24
    PortSelf = 25
    AfSpec = 26
    Group = 27
    NetNsFd = 28
    ExtMask = 29
    Promiscuity = 30
    NumTxQueues = 31
    NumRxQueues = 32
    Carrier = 33
    PhysPortId = 34
    CarrierChanges = 35
    PhysSwitchId = 36
    LinkNetnsid = 37
    PhysPortName = 38
    ProtoDown = 39
    GsoMaxSegs = 40
    GsoMaxSize = 41
    Pad = 42
    Xdp = 43
    Event = 44
    NewNetnsid = 45
    IfNetnsid = 46
    CarrierUpCount = 47
    CarrierDownCount = 48
    NewIfindex = 49
    MinMtu = 50
    MaxMtu = 51
    PropList = 52
    AltIfname = 53
    PermAddress = 54
    ProtoDownReason = 55


class IflaInfo(ConstEnum):
    """Attributes nested inside ``Ifla.Linkinfo``."""

    __wire_format__ = "H"

    Unspec = 0
    Kind = 1
    Data = 2
    Xstats = 3
    SlaveKind = 4
    SlaveData = 5


class Ifa(ConstEnum):
    """Interface address message attributes, used with ``Ifaddrmsg``."""

    __wire_format__ = "H"

    Unspec = 0
    Address = 1
    Local = 2
    Label = 3
    Broadcast = 4
    Anycast = 5
    Cacheinfo = 6
    Multicast = 7
    Flags = 8


class Rta(ConstEnum):
    """Routing message attributes, used with ``Rtmsg``."""

    __wire_format__ = "H"

    Unspec = 0
    Dst = 1
    Src = 2
    Iif = 3
    Oif = 4
    Gateway = 5
    Priority = 6
    Prefsrc = 7
    Metrics = 8
    Multipath = 9
    Protoinfo = 10  # no longer used by the kernel
    Flow = 11
    Cacheinfo = 12
    Session = 13  # no longer used by the kernel
    MpAlgo = 14  # no longer used by the kernel
    Table = 15
    Mark = 16
    MfcStats = 17
    Via = 18
    Newdst = 19
    Pref = 20
    EncapType = 21
    Encap = 22
    Expires = 23
    Pad = 24
    Uid = 25
    TtlPropagate = 26


class Tca(ConstEnum):
    """Queuing discipline attributes, used with ``Tcmsg``."""

    __wire_format__ = "H"

    Unspec = 0
    Kind = 1
    Options = 2
    Stats = 3
    Xstats = 4
    Rate = 5
    Fcnt = 6
    Stats2 = 7
    Stab = 8


class Nda(ConstEnum):
    """Neighbour table attributes."""

    __wire_format__ = "H"

    Unspec = 0
    Dst = 1
    Lladdr = 2
    Cacheinfo = 3
    Probes = 4
    Vlan = 5
    Port = 6
    Vni = 7
    Ifindex = 8
    Master = 9
    LinkNetnsid = 10
    SrcVni = 11


class Arphrd(ConstEnum):
    """Interface hardware types."""

    __wire_format__ = "H"

    Netrom = 0
    Ether = 1
    Eether = 2
    AX25 = 3
    Pronet = 4
    Chaos = 5
    Ieee802 = 6
    Arcnet = 7
    Appletlk = 8
    Dlci = 15
    Atm = 8
    Metricom = 23
    Ieee1394 = 24
    Eui64 = 27
    Infiniband = 32
    Loopback = 772
    Void = 0xFFFF
    None_ = 0xFFFE


class Iff(ConstEnum):
    """Values for ``ifi_flags`` in ``Ifinfomsg``."""

    __wire_format__ = "I"

    Up = 0x1
    Broadcast = 0x2
    Debug = 0x4
    Loopback = 0x8
    Pointopoint = 0x10
    Running = 0x40
    Noarp = 0x80
    Promisc = 0x100
    Notrailers = 0x20
    Allmulti = 0x200
    Master = 0x400
    Slave = 0x800
    Multicast = 0x1000
    Portsel = 0x2000
    Automedia = 0x4000
    Dynamic = 0x8000
    LowerUp = 0x10000
    Dormant = 0x20000
    Echo = 0x40000


class IffFlags(FlagSet):
    """Set of :class:`Iff` flags."""

    flag_type = Iff


class IfaFFlags(FlagSet):
    """Set of :class:`IfaF` flags."""

    flag_type = IfaF


class RtmFFlags(FlagSet):
    """Set of :class:`RtmF` flags."""

    flag_type = RtmF


class NudFlags(FlagSet):
    """Set of :class:`Nud` states."""

    flag_type = Nud


class NtfFlags(FlagSet):
    """Set of :class:`Ntf` flags."""

    flag_type = Ntf


class Rtm(ConstEnum):
    """rtnetlink values for ``nl_type`` in the netlink message header."""

    __wire_format__ = "H"

    Newlink = 16
    Dellink = 17
    Getlink = 18
    Setlink = 19
    Newaddr = 20
    Deladdr = 21
    Getaddr = 22
    Newroute = 24
    Delroute = 25
    Getroute = 26
    Newneigh = 28
    Delneigh = 29
    Getneigh = 30
    Newrule = 32
    Delrule = 33
    Getrule = 34
    Newqdisc = 36
    Delqdisc = 37
    Getqdisc = 38
    Newtclass = 40
    Deltclass = 41
    Gettclass = 42
    Newtfilter = 44
    Deltfilter = 45
    Gettfilter = 46
    Newaction = 48
    Delaction = 49
    Getaction = 50
    Newprefix = 52
    Getmulticast = 58
    Getanycast = 62
    Newneightbl = 64
    Getneightbl = 66
    Setneightbl = 67
    Newnduseropt = 68
    Newaddrlabel = 72
    Deladdrlabel = 73
    Getaddrlabel = 74
    Getdcb = 78
    Setdcb = 79
    Newnetconf = 80
    Getnetconf = 82
    Newmdb = 84
    Delmdb = 85
    Getmdb = 86
    Newnsid = 88
    Delnsid = 89
    Getnsid = 90


#: Every constant valid in the ``rta_type`` field of a routing attribute.
RTA_TYPE = ConstUnion("H", Ifla, Ifa, Rta, Tca, Nda, IflaInfo)