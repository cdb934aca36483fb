"""A simplified McEliece-style key pair and encryption."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .matrix_ops import (
    SIZE,
    Matrix,
    Vector,
    permutation_matrix,
    random_matrix,
    vector_matrix_mul,
)

N = SIZE
K = 16
T = 3


@dataclass
class McElieceKeyPair:
    """Public matrix ``g`` with its scrambler, permutation and base code."""

    g: Matrix
    s: Matrix
    p: Matrix
    g_original: Matrix


def _random_source(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _multiply(left: Matrix, right: Matrix) -> Matrix:
    return [vector_matrix_mul(row, right) for row in left]


def _base_code(rng: random.Random) -> Matrix:
    rows = [
        [int(i == j) if j < K else rng.getrandbits(1) for j in range(N)]
        for i in range(K)
    ]
    rows.extend([0] * N for _ in range(N - K))
    return rows


def generate_keypair(rng: random.Random | None = None) -> McElieceKeyPair:
    """Build a key pair whose public matrix is ``s * g_original * p``."""
    source = _random_source(rng)
    g_original = _base_code(source)
    s = random_matrix(source)
    p = permutation_matrix(source)
    g = _multiply(s, _multiply(g_original, p))
    return McElieceKeyPair(g=g, s=s, p=p, g_original=g_original)


def encrypt(public_matrix: Matrix, message: Vector, rng: random.Random | None = None) -> Vector:
    """Encode ``message`` with the public matrix and flip T random bits."""
    if len(message) != N:
        raise ValueError(f"message must hold {N} bits, got {len(message)}")
    source = _random_source(rng)
    ciphertext = vector_matrix_mul(message, public_matrix)
    for _ in range(T):
        ciphertext[source.randrange(N)] ^= 1
    return ciphertext