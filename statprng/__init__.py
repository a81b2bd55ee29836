"""Deterministic 32-bit pseudo-random number generators and a 32-bit popcount."""

__version__ = "0.1.0"
__all__ = ["engines", "popcount"]