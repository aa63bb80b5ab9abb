"""
Short Weierstrass curves y^2 = x^3 + ax + b over prime fields, affine coordinates.
"""

from .field import PrimeFieldElement


class EllipticCurvePoint:
    """Affine point; x and y are None for the point at infinity."""

    __slots__ = ("curve", "x", "y")

    def __init__(self, curve, x, y):
        self.curve = curve
        self.x = x
        self.y = y

    @property
    def is_infinity(self):
        return self.x is None

    def __add__(self, other):
        if not isinstance(other, EllipticCurvePoint):
            return NotImplemented
        if self.is_infinity:
            return other
        if other.is_infinity:
            return self

        if self.x == other.x:
            if self.y != other.y or self.y.is_zero():
                return self.curve.infinity()
            # tangent
            s = (3 * self.x * self.x + self.curve.a) / (2 * self.y)
        else:
            s = (other.y - self.y) / (other.x - self.x)

        x3 = s * s - self.x - other.x
        y3 = s * (self.x - x3) - self.y
        return EllipticCurvePoint(self.curve, x3, y3)

    def __neg__(self):
        if self.is_infinity:
            return self
        return EllipticCurvePoint(self.curve, self.x, -self.y)

    def __sub__(self, other):
        if not isinstance(other, EllipticCurvePoint):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar):
        if isinstance(scalar, PrimeFieldElement):
            scalar = scalar.value
        if not isinstance(scalar, int):
            return NotImplemented

        if scalar < 0:
            return (-self) * (-scalar)

        result = self.curve.infinity()
        addend = self
        while scalar:
            if scalar & 1:
                result = result + addend
            addend = addend + addend
            scalar >>= 1
        return result

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, EllipticCurvePoint):
            return NotImplemented
        if self.is_infinity or other.is_infinity:
            return self.is_infinity and other.is_infinity
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        if self.is_infinity:
            return hash(None)
        return hash((self.x.value, self.y.value))

    def __repr__(self):
        if self.is_infinity:
            return "Point at infinity"
        return f"({self.x.value:#x}, {self.y.value:#x})"


class EllipticCurve:
    """Curve y^2 = x^3 + ax + b over a prime field."""

    def __init__(self, field, a, b):
        self.field = field
        self.a = field(a)
        self.b = field(b)

        if (4 * self.a * self.a * self.a + 27 * self.b * self.b).is_zero():
            raise ValueError("Singular curve")

    def __call__(self, x, y):
        """Create an affine point, checking that it lies on the curve."""
        point = EllipticCurvePoint(self, self.field(x), self.field(y))
        if not self.contains(point):
            raise ValueError(f"Point ({point.x.value:#x}, {point.y.value:#x}) not on curve")
        return point

    def contains(self, point):
        if point.is_infinity:
            return True
        return point.y * point.y == self.rhs(point.x)

    def rhs(self, x):
        return x * x * x + self.a * x + self.b

    def infinity(self):
        return EllipticCurvePoint(self, None, None)

    @property
    def compressed_length(self):
        return 1 + self.field.byte_length

    def encode_compressed(self, point):
        """SEC1 compressed encoding; the identity is all zero bytes."""
        if point.is_infinity:
            return bytes(self.compressed_length)
        prefix = b'\x03' if point.y.value & 1 else b'\x02'
        return prefix + point.x.to_bytes()

    def decode_compressed(self, data):
        if len(data) != self.compressed_length:
            raise ValueError(f"Expected {self.compressed_length} bytes, got {len(data)}")
        if data == bytes(self.compressed_length):
            return self.infinity()

        flag = data[0]
        if flag not in (0x02, 0x03):
            raise ValueError(f"Invalid point prefix {flag:#04x}")

        x = self.field.from_bytes(data[1:])
        y = self.rhs(x).sqrt()
        if y is None:
            raise ValueError("x-coordinate is not on the curve")
        if (y.value & 1) != (flag & 1):
            y = -y
        return EllipticCurvePoint(self, x, y)

    def __repr__(self):
        return f"EllipticCurve(GF({self.field.p:#x}), a={self.a.value:#x}, b={self.b.value:#x})"
