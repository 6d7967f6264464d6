"""Netlink protocol constants, flag sets, attribute payloads and error packets."""

__version__ = "0.1.0"