"""
Hash functions available to the transcript hasher and the policy object deciding which may be used.
"""

import hashlib
import logging
from enum import Enum

from .errors import HashFunctionNotAllowed

logger = logging.getLogger(__name__)


class HashFunction(Enum):
    """Supported hash functions, with block and digest sizes in bytes."""

    BLAKE2B = ("blake2b", 128, 64)
    BLAKE2S = ("blake2s", 64, 32)
    SHA256 = ("sha256", 64, 32)
    SHA3_256 = ("sha3_256", 136, 32)

    def __init__(self, hashlib_name, block_len, digest_len):
        self.hashlib_name = hashlib_name
        self.block_len = block_len
        self.digest_len = digest_len

    def new(self, data=b''):
        return hashlib.new(self.hashlib_name, data)

    @classmethod
    def lookup(cls, hash_id):
        """Resolve a member or its name ("SHA3_256", "sha3_256"); None if unknown."""
        if isinstance(hash_id, cls):
            return hash_id
        if isinstance(hash_id, str):
            for member in cls:
                if hash_id.upper() == member.name or hash_id.lower() == member.hashlib_name:
                    return member
        return None


class HashRegistry:
    """
    Allow-list of hash functions.

    Inject an instance into ``TranscriptHasher``; the hasher asks it before
    every hash, so swapping the registry swaps the policy.
    """

    def __init__(self, allowed=(HashFunction.SHA3_256, HashFunction.BLAKE2B, HashFunction.BLAKE2S)):
        self.allowed = frozenset(allowed)

    def is_allowed(self, hash_id):
        return HashFunction.lookup(hash_id) in self.allowed

    def resolve(self, hash_id):
        """Return the HashFunction for ``hash_id`` or raise HashFunctionNotAllowed."""
        function = HashFunction.lookup(hash_id)
        if function is None or function not in self.allowed:
            logger.warning("Rejected hash function %r", hash_id)
            raise HashFunctionNotAllowed(f"Hash function {hash_id!r} is not allowed")
        return function

    def hash(self, hash_id, data):
        return self.resolve(hash_id).new(data).digest()

    def __repr__(self):
        names = sorted(f.name for f in self.allowed)
        return f"HashRegistry(allowed={names})"


DEFAULT_HASH_REGISTRY = HashRegistry()
