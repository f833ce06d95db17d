"""
Integer pairing codec.

Maps a pair of signed integers to one integer and back, exactly and for
any magnitude.
"""

from slalom.codec.pairing import (
    decode,
    elegant_pair,
    elegant_unpair,
    encode,
    isqrt,
    unzigzag,
    zigzag,
)

__all__ = [
    "decode",
    "elegant_pair",
    "elegant_unpair",
    "encode",
    "isqrt",
    "unzigzag",
    "zigzag",
]
