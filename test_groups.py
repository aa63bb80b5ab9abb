"""
Tests for prime fields and the P-256 group.
"""

import pytest

from drng import DeterministicRNG
from groups import GF, GroupP256


G = GroupP256.generator()
n = GroupP256.ScalarField.order


def test_field_arithmetic():
    F = GF(13)
    a, b = F(7), F(9)
    assert a + b == 3
    assert a - b == 11
    assert 1 - a == 7
    assert a * b == 11
    assert (a / b) * b == a
    assert a ** 12 == 1
    assert -a == 6


def test_field_inverse_of_zero():
    with pytest.raises(ZeroDivisionError):
        GF(13).zero().inverse()


def test_field_rejects_mixed_fields():
    with pytest.raises(ValueError):
        GF(13)(1) + GF(17)(1)


def test_field_from_bytes_is_canonical():
    F = GF(13)
    assert F.from_bytes(b"\x0c") == 12
    with pytest.raises(ValueError):
        F.from_bytes(b"\x0d")
    with pytest.raises(ValueError):
        F.from_bytes(b"\x00\x01")


def test_generator_compressed_encoding():
    assert GroupP256.serialize([G]).hex() == (
        "036b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
    )


def test_group_order():
    assert G * n == GroupP256.identity()
    assert G * (n + 1) == G
    assert G * (n - 1) == -G


def test_scalar_multiplication_is_linear():
    rng = DeterministicRNG(b"linear")
    a = GroupP256.ScalarField.random(rng)
    b = GroupP256.ScalarField.random(rng)
    assert G * a + G * b == G * (a + b)
    assert G * a - G * b == G * (a - b)


def test_point_encoding_round_trip():
    rng = DeterministicRNG(b"points")
    points = [GroupP256.random(rng) for _ in range(3)] + [GroupP256.identity()]
    data = GroupP256.serialize(points)
    assert len(data) == 4 * GroupP256.element_byte_length()
    assert GroupP256.deserialize(data) == points


@pytest.mark.parametrize("data", [
    b"",
    b"\x02" * 32,
    b"\x04" + b"\x01" * 32,
    b"\x02" + b"\xff" * 32,
])
def test_point_decoding_rejects_malformed(data):
    with pytest.raises(ValueError):
        GroupP256.deserialize(data)


def test_curve_rejects_points_off_curve():
    with pytest.raises(ValueError):
        GroupP256.curve(GroupP256.Gx, GroupP256.Gy + 1)


def test_is_element():
    assert GroupP256.is_element(G)
    assert not GroupP256.is_element(G.x)
    assert not GroupP256.is_element(None)


def test_scalar_deserialize_rejects_non_canonical():
    Scalar = GroupP256.ScalarField
    assert Scalar.deserialize(Scalar.serialize([n - 1])) == [Scalar.field(n - 1)]
    with pytest.raises(ValueError):
        Scalar.deserialize(n.to_bytes(32, 'big'))
    with pytest.raises(ValueError):
        Scalar.deserialize(b"\x01" * 31)
