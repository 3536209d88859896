"""Send ICMP echo requests over a raw socket and report round-trip statistics."""

__version__ = "0.1.0"
__all__ = ["__version__"]