"""Value types, text and variant-list codecs, packet layouts, addresses and sockets for a UDP game protocol."""

__version__ = "0.1.0"

__all__ = ["address", "hashing", "netsocket", "packet", "rtparam", "variant", "vector", "world"]