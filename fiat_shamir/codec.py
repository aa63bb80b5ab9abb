"""
Byte-level codec helpers: integer/octet-string conversion and length-prefixed framing.
"""

from .errors import SerializationError


def I2OSP(n, length):
    """Convert integer to octet string."""
    if n < 0 or n >= 256**length:
        raise ValueError("Integer too large for length")
    return n.to_bytes(length, 'big')


def OS2IP(octets):
    """Convert octet string to integer."""
    return int.from_bytes(octets, 'big')


def length_prefixed(data, prefix_length=4):
    return I2OSP(len(data), prefix_length) + data


def labeled(label, value):
    """Frame a labeled transcript entry: len(label) || label || len(value) || value."""
    return length_prefixed(label, 1) + length_prefixed(value, 4)


class ByteReader:
    """
    Sequential reader over a serialized message.

    Every short read raises ``SerializationError``, so truncated input can
    never be mistaken for a valid but shorter message.
    """

    def __init__(self, data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise SerializationError(f"Expected bytes, got {type(data).__name__}")
        self.data = bytes(data)
        self.offset = 0

    def remaining(self):
        return len(self.data) - self.offset

    def read(self, length):
        if length > self.remaining():
            raise SerializationError(
                f"Truncated input: need {length} bytes at offset {self.offset}, "
                f"have {self.remaining()}"
            )
        chunk = self.data[self.offset:self.offset + length]
        self.offset += length
        return chunk

    def read_int(self, length):
        return OS2IP(self.read(length))

    def read_length_prefixed(self, prefix_length=4):
        return self.read(self.read_int(prefix_length))

    def finish(self):
        if self.remaining():
            raise SerializationError(f"{self.remaining()} trailing bytes after message")
