"""
Deterministic random number generator for reproducible tests.
"""

import hashlib


class DeterministicRNG:
    """
    Seeded drop-in for ``secrets.SystemRandom`` where tests need repeatable nonces.

    Output block i is SHAKE128(seed || i); two generators with the same
    seed produce the same sequence.
    """

    def __init__(self, seed):
        if isinstance(seed, str):
            seed = seed.encode('utf-8')
        self.seed = bytes(seed)
        self.counter = 0

    def randbytes(self, n):
        block = hashlib.shake_128(self.seed + self.counter.to_bytes(8, 'big')).digest(n)
        self.counter += 1
        return block

    def randint(self, a, b):
        """Random integer in [a, b]; 128 extra bits keep the reduction bias negligible."""
        if a > b:
            raise ValueError("a must be <= b")
        range_size = b - a + 1
        nbytes = (range_size.bit_length() + 7) // 8 + 16
        return a + int.from_bytes(self.randbytes(nbytes), 'big') % range_size
