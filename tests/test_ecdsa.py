import random

import pytest

from securerecords import ecdsa
from securerecords.ecdsa import (
    INFINITY,
    KeyPair,
    Point,
    Signature,
    ec_add,
    generator,
    hash_message,
    keygen,
    mod_inv,
    scalar_mul,
    sign,
    verify,
)


def _curve_sides(point):
    lhs = (point.y * point.y) % ecdsa.P
    rhs = (point.x ** 3 + ecdsa.A * point.x + ecdsa.B) % ecdsa.P
    return lhs, rhs


def test_generator_matches_constants():
    g = generator()
    assert g == Point(ecdsa.GX, ecdsa.GY)
    assert (g.x, g.y) == (67, 184)
    assert g.infinity is False


def test_generator_is_on_curve():
    g = generator()
    lhs, rhs = _curve_sides(g)
    assert lhs == rhs
    assert (g.y * g.y) % ecdsa.P == (g.x ** 3 + ecdsa.A * g.x + ecdsa.B) % ecdsa.P


def test_multiples_stay_on_curve():
    for k in range(1, ecdsa.N):
        point = scalar_mul(generator(), k)
        assert point.infinity is False
        assert (point.y * point.y) % ecdsa.P == (
            point.x ** 3 + ecdsa.A * point.x + ecdsa.B
        ) % ecdsa.P


def test_generator_has_subgroup_order():
    assert scalar_mul(generator(), ecdsa.N) == INFINITY
    assert all(not scalar_mul(generator(), k).infinity for k in range(1, ecdsa.N))


def test_doubling():
    assert ec_add(generator(), generator()) == Point(8, 129)
    assert scalar_mul(generator(), 2) == Point(8, 129)


def test_negation_gives_infinity():
    g = generator()
    negated = Point(g.x, (ecdsa.P - g.y) % ecdsa.P)
    assert scalar_mul(g, ecdsa.N - 1) == negated
    assert ec_add(g, negated) == INFINITY


def test_infinity_is_neutral():
    g = generator()
    assert ec_add(INFINITY, g) == g
    assert ec_add(g, INFINITY) == g
    assert ec_add(INFINITY, INFINITY) == INFINITY


def test_scalar_zero_is_infinity():
    assert scalar_mul(generator(), 0) == INFINITY


def test_negative_scalar_rejected():
    with pytest.raises(ValueError):
        scalar_mul(generator(), -1)


@pytest.mark.parametrize("a", [1, 3, 7, 12])
@pytest.mark.parametrize("b", [2, 5, 9])
def test_scalar_mul_is_additive(a, b):
    g = generator()
    assert scalar_mul(g, a + b) == ec_add(scalar_mul(g, a), scalar_mul(g, b))


def test_addition_commutes():
    g = generator()
    p, q = scalar_mul(g, 4), scalar_mul(g, 11)
    assert ec_add(p, q) == ec_add(q, p)


@pytest.mark.parametrize("a", range(1, 17))
def test_mod_inv_inverts(a):
    assert a * mod_inv(a, ecdsa.N) % ecdsa.N == 1


def test_mod_inv_in_field():
    assert all(a * mod_inv(a, ecdsa.P) % ecdsa.P == 1 for a in range(1, ecdsa.P))


@pytest.mark.parametrize("a, m", [(0, 17), (4, 8), (233, 233)])
def test_mod_inv_without_inverse(a, m):
    with pytest.raises(ValueError):
        mod_inv(a, m)


def test_hash_of_empty_message():
    assert hash_message(b"") == 0


def test_hash_range_and_determinism():
    rng = random.Random(5)
    for length in range(0, 200, 7):
        message = bytes(rng.randrange(256) for _ in range(length))
        value = hash_message(message)
        assert 0 <= value < ecdsa.N
        assert hash_message(bytearray(message)) == value


def test_keygen_produces_consistent_pair():
    for seed in range(20):
        kp = keygen(random.Random(seed))
        assert 1 <= kp.private_key < ecdsa.N
        assert kp.public_key == scalar_mul(generator(), kp.private_key)


def test_keygen_is_reproducible():
    first = keygen(random.Random(42))
    second = keygen(random.Random(42))
    assert second.private_key == first.private_key
    assert second.public_key == first.public_key
    assert 1 <= first.private_key < ecdsa.N
    assert first.public_key == scalar_mul(generator(), first.private_key)


@pytest.mark.parametrize("private_key", range(1, 17))
def test_sign_then_verify(private_key):
    kp = KeyPair(private_key, scalar_mul(generator(), private_key))
    rng = random.Random(private_key)
    for message in (b"", b"This is confidential record #1", b"hello", bytes(range(50))):
        signature = sign(kp, message, rng)
        assert 0 < signature.r < ecdsa.N
        assert 0 < signature.s < ecdsa.N
        assert verify(kp.public_key, message, signature) is True


@pytest.mark.parametrize("r, s", [(0, 5), (ecdsa.N, 5), (5, 0), (5, ecdsa.N), (-1, 3)])
def test_out_of_range_signature_rejected(r, s):
    kp = keygen(random.Random(1))
    assert verify(kp.public_key, b"message", Signature(r, s)) is False


def test_infinite_result_rejected():
    assert verify(INFINITY, b"", Signature(1, 1)) is False