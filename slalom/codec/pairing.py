"""Reversible pairing of two signed integers into one.

``encode`` maps any pair of Python ints to a single int and ``decode``
inverts it exactly. Magnitudes are unbounded: all arithmetic stays in
``int`` and never touches floating point.

The mapping works in three steps:

1. zig-zag each input onto the naturals (0, -1, 1, -2, ... -> 0, 1, 2, 3, ...),
   so the low bit is the sign and the rest is the folded magnitude;
2. interleave the two folded magnitudes with Szudzik's elegant pairing
   and append the sign bit of ``a``;
3. return that value unchanged when ``a`` and ``b`` share a sign class,
   otherwise fold it onto the negative integers.

Pairs with agreeing signs therefore encode to non-negative codes, and
small pairs stay small in either half.

http://szudzik.com/ElegantPairing.pdf
"""

from __future__ import annotations

import operator


def isqrt(n: int) -> int:
    """Floor square root of a non-negative integer (Newton's method).

    Args:
        n: Non-negative integer of any magnitude

    Returns:
        Largest ``s`` with ``s * s <= n``

    Raises:
        ValueError: If ``n`` is negative
    """
    n = operator.index(n)
    if n < 0:
        raise ValueError("isqrt() argument must be nonnegative")
    if n < 2:
        return n

    x = n // 2 + 1
    y = (x + n // x) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def zigzag(v: int) -> int:
    """Map a signed integer onto the naturals: 0, -1, 1, -2 -> 0, 1, 2, 3."""
    v = operator.index(v)
    return 2 * v if v >= 0 else -2 * v - 1


def unzigzag(v: int) -> int:
    """Inverse of :func:`zigzag`."""
    v = operator.index(v)
    return v // 2 if v % 2 == 0 else -(v + 1) // 2


def elegant_pair(x: int, y: int) -> int:
    """Szudzik's pairing of two naturals."""
    return x * x + x + y if x >= y else y * y + x


def elegant_unpair(z: int) -> tuple[int, int]:
    """Inverse of :func:`elegant_pair`."""
    s = isqrt(z)
    rest = z - s * s
    return (rest, s) if rest < s else (s, rest - s)


def encode(a: int, b: int) -> int:
    """Pair two signed integers into a single signed integer.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Code such that ``decode(code) == (a, b)``
    """
    big_a = zigzag(a)
    big_b = zigzag(b)

    sign_a = big_a & 1
    combined = 2 * elegant_pair(big_a >> 1, big_b >> 1) + sign_a

    if sign_a == big_b & 1:
        return combined
    return -combined - 1


def decode(code: int) -> tuple[int, int]:
    """Recover the pair that :func:`encode` turned into ``code``.

    Args:
        code: Any integer

    Returns:
        Tuple ``(a, b)``
    """
    code = operator.index(code)
    same_sign = code >= 0
    combined = code if same_sign else -code - 1

    sign_a = combined & 1
    x, y = elegant_unpair(combined >> 1)
    sign_b = sign_a if same_sign else 1 - sign_a

    return unzigzag(2 * x + sign_a), unzigzag(2 * y + sign_b)
