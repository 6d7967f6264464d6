"""Constants for netlink, generic netlink, rtnetlink, netfilter and socket families."""