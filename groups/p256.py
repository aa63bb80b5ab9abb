"""
NIST P-256 (secp256r1) group.
"""

from .field import GF
from .elliptic_curve import EllipticCurve
from .base import Group, ScalarField


class P256ScalarField(ScalarField, order=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551):
    pass


class GroupP256(Group):
    """P-256 with SEC1 compressed point encoding."""

    name = "P-256"

    p = 0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff
    a = p - 3
    b = 0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b

    Gx = 0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296
    Gy = 0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5

    field = GF(p)
    curve = EllipticCurve(field, a, b)
    ScalarField = P256ScalarField

    _generator = None

    @classmethod
    def generator(cls):
        if cls._generator is None:
            cls._generator = cls.curve(cls.Gx, cls.Gy)
        return cls._generator

    @classmethod
    def identity(cls):
        return cls.curve.infinity()

    @classmethod
    def element_byte_length(cls):
        return cls.curve.compressed_length

    @classmethod
    def is_element(cls, element):
        # cofactor 1: every curve point is in the prime-order group
        return getattr(element, "curve", None) is cls.curve and cls.curve.contains(element)

    @classmethod
    def serialize(cls, elements):
        return b"".join(cls.curve.encode_compressed(e) for e in elements)

    @classmethod
    def deserialize(cls, data):
        """Decode concatenated compressed points; raises ValueError."""
        size = cls.element_byte_length()
        if len(data) == 0 or len(data) % size != 0:
            raise ValueError(f"Element data length {len(data)} is not a multiple of {size}")
        return [
            cls.curve.decode_compressed(data[i:i + size])
            for i in range(0, len(data), size)
        ]
