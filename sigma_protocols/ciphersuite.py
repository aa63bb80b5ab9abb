"""
Named ciphersuites: a Sigma protocol paired with a transcript hash.
"""

from fiat_shamir import FiatShamirNIZK, HashFunction, SerializationError, peek_protocol_id
from .schnorr import SchnorrDLOG


CIPHERSUITE = {
    "P256_SHA3_256": FiatShamirNIZK(SchnorrDLOG, HashFunction.SHA3_256),
    "P256_BLAKE2B": FiatShamirNIZK(SchnorrDLOG, HashFunction.BLAKE2B),
}

PROTOCOLS = {
    SchnorrDLOG.protocol_id(): SchnorrDLOG,
}


def select_protocol(data):
    """Pick the protocol class matching the tag of a serialized proof."""
    protocol_id = peek_protocol_id(data)
    try:
        return PROTOCOLS[protocol_id]
    except KeyError:
        raise SerializationError(f"Unknown protocol id {protocol_id.hex()}") from None
