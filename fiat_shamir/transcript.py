"""
Fiat-Shamir challenge derivation from a labeled, domain-separated transcript.
"""

import logging

from .codec import labeled, length_prefixed
from .errors import HashFunctionNotAllowed
from .hash_registry import DEFAULT_HASH_REGISTRY, HashFunction

logger = logging.getLogger(__name__)

CHALLENGE_LENGTH = 32
DOMAIN_SEPARATOR = b"zkpstd/sigma/0.1"


class TranscriptHasher:
    """
    Derives 32-byte challenges from (protocol id, statement, commitment, context).

    The transcript is

        len(DOMAIN_SEPARATOR) || DOMAIN_SEPARATOR
        || entry("protocol-id") || entry("statement")
        || entry("commitment") || entry("context") [|| entry("message")]

    where each entry is ``len(label) || label || len(value) || value``
    (1-byte and 4-byte big-endian lengths). The framing is injective, so
    two different inputs never produce the same transcript. The output
    is the first 32 bytes of the digest; turning them into a protocol
    challenge is left to the protocol's ``challenge_domain_decode``.
    """

    def __init__(self, hash_id=HashFunction.SHA3_256, registry=DEFAULT_HASH_REGISTRY):
        self.registry = registry
        self.hash_id = hash_id
        self._check_allowed()
        function = HashFunction.lookup(hash_id)
        if function is None:
            raise HashFunctionNotAllowed(f"Unknown hash function {hash_id!r}")
        if function.digest_len < CHALLENGE_LENGTH:
            raise HashFunctionNotAllowed(
                f"{function.name} digests are {function.digest_len} bytes, "
                f"challenges need {CHALLENGE_LENGTH}"
            )

    def _check_allowed(self):
        if not self.registry.is_allowed(self.hash_id):
            logger.warning("Hash function %r refused by %r", self.hash_id, self.registry)
            raise HashFunctionNotAllowed(f"Hash function {self.hash_id!r} is not allowed")

    def transcript(self, protocol_id, statement, commitment, context, message=None):
        entries = [
            (b"protocol-id", protocol_id),
            (b"statement", statement),
            (b"commitment", commitment),
            (b"context", context),
        ]
        if message is not None:
            entries.append((b"message", message))

        for label, value in entries:
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise TypeError(f"{label.decode()} must be bytes, got {type(value).__name__}")

        return length_prefixed(DOMAIN_SEPARATOR, 1) + b"".join(
            labeled(label, bytes(value)) for label, value in entries
        )

    def derive_challenge(self, protocol_id, statement, commitment, context, message=None):
        """Return the 32-byte challenge for an encoded statement and commitment."""
        data = self.transcript(protocol_id, statement, commitment, context, message)
        self._check_allowed()
        digest = self.registry.hash(self.hash_id, data)
        challenge = digest[:CHALLENGE_LENGTH]
        logger.debug("Derived challenge over %d transcript bytes", len(data))
        return challenge

    def __repr__(self):
        return f"TranscriptHasher(hash_id={self.hash_id!r}, registry={self.registry!r})"
