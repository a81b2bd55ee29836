"""Population count for 32-bit words."""

_MASK32 = 0xFFFFFFFF


def popcount(x):
    """Return the number of set bits in the low 32 bits of ``x``."""
    return bin(x & _MASK32).count("1")