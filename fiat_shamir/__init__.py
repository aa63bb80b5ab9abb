"""
Fiat-Shamir transformation subpackage.
"""

from .errors import (
    ErrorKind,
    SigmaError,
    InvalidWitness,
    InvalidStatement,
    InvalidChallengeEncoding,
    HashFunctionNotAllowed,
    SerializationError,
    VerificationFailed,
    ProverError,
)
from .codec import I2OSP, OS2IP, ByteReader
from .hash_registry import HashFunction, HashRegistry, DEFAULT_HASH_REGISTRY
from .transcript import TranscriptHasher, CHALLENGE_LENGTH, DOMAIN_SEPARATOR
from .proof import Proof, ShortProof, peek_protocol_id
from .session import ProofSession, SessionState
from .transform import NonInteractiveProof, FiatShamirNIZK

__all__ = [
    'ErrorKind',
    'SigmaError',
    'InvalidWitness',
    'InvalidStatement',
    'InvalidChallengeEncoding',
    'HashFunctionNotAllowed',
    'SerializationError',
    'VerificationFailed',
    'ProverError',
    'I2OSP',
    'OS2IP',
    'ByteReader',
    'HashFunction',
    'HashRegistry',
    'DEFAULT_HASH_REGISTRY',
    'TranscriptHasher',
    'CHALLENGE_LENGTH',
    'DOMAIN_SEPARATOR',
    'Proof',
    'ShortProof',
    'peek_protocol_id',
    'ProofSession',
    'SessionState',
    'NonInteractiveProof',
    'FiatShamirNIZK',
]
