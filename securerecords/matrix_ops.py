"""Binary matrices and vectors over GF(2)."""

from __future__ import annotations

import operator
import random
from functools import reduce

SIZE = 32

Vector = list[int]
Matrix = list[list[int]]


def _random_source(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_matrix(rng: random.Random | None = None) -> Matrix:
    """Return a SIZE x SIZE matrix of random bits."""
    source = _random_source(rng)
    return [[source.getrandbits(1) for _ in range(SIZE)] for _ in range(SIZE)]


def identity_matrix() -> Matrix:
    """Return the SIZE x SIZE identity matrix."""
    return [[int(i == j) for j in range(SIZE)] for i in range(SIZE)]


def permutation_matrix(rng: random.Random | None = None) -> Matrix:
    """Return a random SIZE x SIZE permutation matrix (row shuffle of identity)."""
    source = _random_source(rng)
    rows = identity_matrix()
    for i in range(SIZE - 1, 0, -1):
        j = source.randrange(i + 1)
        rows[i], rows[j] = rows[j], rows[i]
    return rows


def vector_matrix_mul(vector: Vector, matrix: Matrix) -> Vector:
    """Return the row vector ``vector * matrix`` over GF(2)."""
    if len(vector) != len(matrix):
        raise ValueError(
            f"vector length {len(vector)} does not match {len(matrix)} matrix rows"
        )
    return [
        reduce(operator.xor, (v & m for v, m in zip(vector, column)), 0)
        for column in zip(*matrix)
    ]