"""
Prime field arithmetic for curve coordinates and scalars.
"""


class PrimeFieldElement:
    """Element of GF(p), reduced on construction."""

    __slots__ = ("field", "value")

    def __init__(self, value, field):
        self.field = field
        self.value = value % field.p

    def _coerce(self, other):
        if isinstance(other, PrimeFieldElement):
            if other.field.p != self.field.p:
                raise ValueError("Mixing elements of different fields")
            return other.value
        if isinstance(other, int):
            return other
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return PrimeFieldElement(self.value + other, self.field)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return PrimeFieldElement(self.value - other, self.field)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return PrimeFieldElement(other - self.value, self.field)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return PrimeFieldElement(self.value * other, self.field)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self * self.field(other).inverse()

    def __pow__(self, exp):
        return PrimeFieldElement(pow(self.value, exp, self.field.p), self.field)

    def __neg__(self):
        return PrimeFieldElement(-self.value, self.field)

    def __eq__(self, other):
        if isinstance(other, PrimeFieldElement):
            return self.field.p == other.field.p and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.field.p
        return NotImplemented

    def __hash__(self):
        return hash((self.field.p, self.value))

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"PrimeFieldElement({self.value}, GF({self.field.p}))"

    def is_zero(self):
        return self.value == 0

    def inverse(self):
        if self.value == 0:
            raise ZeroDivisionError("Zero has no inverse")
        return PrimeFieldElement(pow(self.value, -1, self.field.p), self.field)

    def is_square(self):
        """Euler's criterion; zero counts as a square."""
        if self.value == 0:
            return True
        return pow(self.value, (self.field.p - 1) // 2, self.field.p) == 1

    def sqrt(self):
        """Square root for p = 3 mod 4, or None for a non-residue."""
        if self.field.p % 4 != 3:
            raise NotImplementedError("sqrt only implemented for p = 3 mod 4")
        if not self.is_square():
            return None
        return PrimeFieldElement(pow(self.value, (self.field.p + 1) // 4, self.field.p), self.field)

    def to_bytes(self):
        return self.value.to_bytes(self.field.byte_length, 'big')


class PrimeField:
    """The field GF(p) for a prime p."""

    def __init__(self, p):
        self.p = p
        self.order = p
        self.byte_length = (p.bit_length() + 7) // 8

    def __call__(self, value):
        if isinstance(value, PrimeFieldElement):
            value = value.value
        return PrimeFieldElement(value, self)

    def __eq__(self, other):
        return isinstance(other, PrimeField) and other.p == self.p

    def __hash__(self):
        return hash(self.p)

    def zero(self):
        return PrimeFieldElement(0, self)

    def one(self):
        return PrimeFieldElement(1, self)

    def from_bytes(self, data):
        """Decode a canonical big-endian encoding; values >= p are rejected."""
        if len(data) != self.byte_length:
            raise ValueError(f"Expected {self.byte_length} bytes, got {len(data)}")
        value = int.from_bytes(data, 'big')
        if value >= self.p:
            raise ValueError("Non-canonical field element encoding")
        return PrimeFieldElement(value, self)

    def __repr__(self):
        return f"GF({self.p})"


def GF(p):
    """Factory for prime fields."""
    return PrimeField(p)
