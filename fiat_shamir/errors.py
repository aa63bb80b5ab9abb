"""
Error taxonomy shared by Sigma protocols, the transcript hasher and the NIZK compiler.

Every failure on the prove/verify path is one of these exceptions. A
cryptographically invalid proof is not an exception: ``verify`` returns
``False`` for it, and ``VerificationFailed`` is only raised by the
``verify_or_raise`` helpers. Malformed input is always a
``SerializationError`` and is never reported as ``False``.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_WITNESS = "invalid_witness"
    INVALID_STATEMENT = "invalid_statement"
    INVALID_CHALLENGE_ENCODING = "invalid_challenge_encoding"
    HASH_FUNCTION_NOT_ALLOWED = "hash_function_not_allowed"
    SERIALIZATION_ERROR = "serialization_error"
    VERIFICATION_FAILED = "verification_failed"


class SigmaError(Exception):
    """Base exception for all Sigma protocol and NIZK errors."""

    kind = None


class InvalidWitness(SigmaError):
    """The witness does not satisfy the relation for the statement."""

    kind = ErrorKind.INVALID_WITNESS


class InvalidStatement(SigmaError):
    """The statement is malformed or degenerate."""

    kind = ErrorKind.INVALID_STATEMENT


class InvalidChallengeEncoding(SigmaError):
    """The 32 challenge bytes do not map into the protocol's challenge domain."""

    kind = ErrorKind.INVALID_CHALLENGE_ENCODING


class HashFunctionNotAllowed(SigmaError):
    """The hash registry policy rejected the requested hash function."""

    kind = ErrorKind.HASH_FUNCTION_NOT_ALLOWED


class SerializationError(SigmaError):
    """Bytes could not be parsed into a proof, commitment or response."""

    kind = ErrorKind.SERIALIZATION_ERROR


class VerificationFailed(SigmaError):
    """A well-formed proof did not verify."""

    kind = ErrorKind.VERIFICATION_FAILED


class ProverError(SigmaError):
    """Proof generation failed; ``cause`` holds the originating error."""

    def __init__(self, cause):
        super().__init__(f"Proof generation failed: {cause}")
        self.cause = cause

    @property
    def kind(self):
        return getattr(self.cause, "kind", None)
