"""Toy elliptic-curve signatures over a small prime field.

The curve is y^2 = x^3 + A*x + B over GF(P), with a generator of order N.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

P = 233
A = 1
B = 44
N = 17
GX = 67
GY = 184

_UINT32 = 0xFFFFFFFF


@dataclass(frozen=True)
class Point:
    """A curve point; ``infinity`` marks the neutral element."""

    x: int = 0
    y: int = 0
    infinity: bool = False


INFINITY = Point(0, 0, True)


@dataclass(frozen=True)
class KeyPair:
    """A private scalar and the matching public point."""

    private_key: int
    public_key: Point


@dataclass(frozen=True)
class Signature:
    """An (r, s) signature pair."""

    r: int
    s: int


def _random_source(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m``.

    Raises ValueError when ``a`` has no inverse modulo ``m``.
    """
    t, new_t = 0, 1
    r, new_r = m, a % m
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r > 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return t % m


def generator() -> Point:
    """Return the curve's base point."""
    return Point(GX, GY)


def ec_add(p: Point, q: Point) -> Point:
    """Add two curve points."""
    if p.infinity:
        return q
    if q.infinity:
        return p
    if p.x == q.x and p.y == (P - q.y) % P:
        return INFINITY

    if p.x == q.x and p.y == q.y:
        slope = (3 * p.x * p.x + A) * mod_inv(2 * p.y, P) % P
    else:
        slope = (q.y - p.y) * mod_inv((q.x - p.x) % P, P) % P

    x = (slope * slope - p.x - q.x) % P
    y = (slope * (p.x - x) - p.y) % P
    return Point(x, y)


def scalar_mul(p: Point, k: int) -> Point:
    """Return ``k * p`` by double-and-add."""
    if k < 0:
        raise ValueError("scalar must not be negative")
    result = INFINITY
    addend = p
    while k:
        if k & 1:
            result = ec_add(result, addend)
        addend = ec_add(addend, addend)
        k >>= 1
    return result


def hash_message(message: bytes) -> int:
    """Hash a message to an integer in ``range(N)``."""
    h = 0
    for byte in bytes(message):
        h = (h * 33 + byte) & _UINT32
    if h > 0x7FFFFFFF:
        h -= 1 << 32
    return h % N


def keygen(rng: random.Random | None = None) -> KeyPair:
    """Generate a key pair with a private scalar in ``1..N-1``."""
    private_key = _random_source(rng).randrange(1, N)
    return KeyPair(private_key, scalar_mul(generator(), private_key))


def sign(keypair: KeyPair, message: bytes, rng: random.Random | None = None) -> Signature:
    """Sign ``message`` with the key pair's private scalar."""
    source = _random_source(rng)
    e = hash_message(message)
    while True:
        while True:
            k = source.randrange(1, N)
            r = scalar_mul(generator(), k).x % N
            if r:
                break
        s = mod_inv(k, N) * (e + r * keypair.private_key) % N
        if s:
            return Signature(r, s)


def verify(public_key: Point, message: bytes, signature: Signature) -> bool:
    """Check ``signature`` over ``message`` against ``public_key``."""
    r, s = signature.r, signature.s
    if not (0 < r < N and 0 < s < N):
        return False

    e = hash_message(message)
    w = mod_inv(s, N)
    u1 = e * w % N
    u2 = r * w % N
    point = ec_add(scalar_mul(generator(), u1), scalar_mul(public_key, u2))
    if point.infinity:
        return False
    return point.x % N == r