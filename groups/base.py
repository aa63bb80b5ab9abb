"""
Base classes for prime-order groups and their scalar fields.
"""

from abc import ABC, abstractmethod
from .field import GF


class ScalarField:
    """Integers modulo a group order; subclass with ``order=...``."""

    order = None
    field = None
    field_bytes_length = None

    def __init_subclass__(cls, order=None, **kwargs):
        super().__init_subclass__(**kwargs)
        if order is not None:
            cls.order = order
            cls.field = GF(order)
            cls.field_bytes_length = cls.field.byte_length

    @classmethod
    def scalar_byte_length(cls):
        return cls.field_bytes_length

    @classmethod
    def random(cls, rng):
        """Uniform non-zero scalar; ``rng`` needs a ``randint(a, b)`` method."""
        return cls.field(rng.randint(1, cls.order - 1))

    @classmethod
    def serialize(cls, scalars):
        return b"".join(cls.field(s).to_bytes() for s in scalars)

    @classmethod
    def deserialize(cls, data):
        """Decode concatenated canonical scalars; raises ValueError."""
        scalar_len = cls.field_bytes_length
        if len(data) == 0 or len(data) % scalar_len != 0:
            raise ValueError(f"Scalar data length {len(data)} is not a multiple of {scalar_len}")
        return [
            cls.field.from_bytes(data[i:i + scalar_len])
            for i in range(0, len(data), scalar_len)
        ]


class Group(ABC):
    """Abstract prime-order group written additively."""

    ScalarField = None
    name = None

    @classmethod
    @abstractmethod
    def generator(cls):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def identity(cls):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def element_byte_length(cls):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def is_element(cls, element):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def serialize(cls, elements):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def deserialize(cls, data):
        raise NotImplementedError

    @classmethod
    def random(cls, rng):
        return cls.generator() * cls.ScalarField.random(rng)
