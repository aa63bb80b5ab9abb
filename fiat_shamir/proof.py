"""
Non-interactive proof containers and their wire formats.
"""

from collections import namedtuple

from .codec import ByteReader, length_prefixed
from .errors import SerializationError
from .transcript import CHALLENGE_LENGTH


def _check_protocol_id(protocol_id):
    if not 0 < len(protocol_id) < 256:
        raise SerializationError(f"Protocol id must be 1..255 bytes, got {len(protocol_id)}")


def _check_fields(proof):
    for field, value in zip(proof._fields, proof):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise SerializationError(
                f"{type(proof).__name__}.{field} must be bytes, got {type(value).__name__}"
            )
    _check_protocol_id(proof.protocol_id)


def peek_protocol_id(data):
    """Return the protocol tag of a serialized proof without parsing the rest."""
    protocol_id = ByteReader(data).read_length_prefixed(1)
    _check_protocol_id(protocol_id)
    return protocol_id


class Proof(namedtuple("Proof", ["protocol_id", "commitment", "response"])):
    """
    Batchable proof: serialized commitment and response. The challenge is
    never stored; verifiers recompute it.

    Wire format: ``len(id) || id || len(C) || C || len(R) || R`` with a
    1-byte id length and 4-byte commitment/response lengths.
    """

    __slots__ = ()

    def validate(self):
        """Check field types and lengths; raises SerializationError."""
        _check_fields(self)

    def to_bytes(self):
        self.validate()
        return (
            length_prefixed(self.protocol_id, 1)
            + length_prefixed(self.commitment, 4)
            + length_prefixed(self.response, 4)
        )

    @classmethod
    def from_bytes(cls, data):
        reader = ByteReader(data)
        protocol_id = reader.read_length_prefixed(1)
        _check_protocol_id(protocol_id)
        commitment = reader.read_length_prefixed(4)
        response = reader.read_length_prefixed(4)
        reader.finish()
        return cls(protocol_id, commitment, response)


class ShortProof(namedtuple("ShortProof", ["protocol_id", "challenge", "response"])):
    """
    Short proof: the challenge and the response. The commitment is
    recomputed from them by the protocol's simulator.

    Wire format: ``len(id) || id || challenge(32) || len(R) || R``.
    """

    __slots__ = ()

    def validate(self):
        _check_fields(self)
        if len(self.challenge) != CHALLENGE_LENGTH:
            raise SerializationError(
                f"Challenge must be {CHALLENGE_LENGTH} bytes, got {len(self.challenge)}"
            )

    def to_bytes(self):
        self.validate()
        return (
            length_prefixed(self.protocol_id, 1)
            + self.challenge
            + length_prefixed(self.response, 4)
        )

    @classmethod
    def from_bytes(cls, data):
        reader = ByteReader(data)
        protocol_id = reader.read_length_prefixed(1)
        _check_protocol_id(protocol_id)
        challenge = reader.read(CHALLENGE_LENGTH)
        response = reader.read_length_prefixed(4)
        reader.finish()
        return cls(protocol_id, challenge, response)
