"""
Fiat-Shamir transformation.
Compiles any Sigma protocol into a non-interactive zero-knowledge proof.
"""

import hmac
import logging
import secrets

from .errors import (
    InvalidChallengeEncoding,
    InvalidStatement,
    ProverError,
    SerializationError,
    SigmaError,
    VerificationFailed,
)
from .hash_registry import DEFAULT_HASH_REGISTRY, HashFunction
from .proof import Proof, ShortProof
from .session import ProofSession
from .transcript import TranscriptHasher

logger = logging.getLogger(__name__)


class NonInteractiveProof:
    """
    Prover and verifier for one (statement, context) pair.

    Holds no per-proof state: every ``prove`` runs its own session with its
    own randomness, and every challenge is hashed from scratch, so one
    instance may be shared between threads.
    """

    def __init__(self, protocol, hasher, context):
        self.protocol = protocol
        self.hasher = hasher
        if not isinstance(context, (bytes, bytearray, memoryview)):
            raise TypeError(f"context must be bytes, got {type(context).__name__}")
        self.context = bytes(context)
        self.protocol_id = protocol.protocol_id()
        self.statement_bytes = protocol.serialize_statement()

    def challenge(self, commitment_bytes, message=None):
        return self.hasher.derive_challenge(
            self.protocol_id,
            self.statement_bytes,
            commitment_bytes,
            self.context,
            message,
        )

    def _run(self, witness, rng, message):
        """Commit, derive the challenge and respond; returns the finished session."""
        if rng is None:
            rng = secrets.SystemRandom()

        with ProofSession() as session:
            prover_state, commitment = self.protocol.generate_commitment(witness, rng)
            commitment_bytes = self.protocol.serialize_commitment(commitment)
            session.commit(prover_state, commitment_bytes)
            logger.debug("Committed for protocol %s", self.protocol_id.hex())

            challenge = self.challenge(commitment_bytes, message)
            session.challenge_derived(challenge)

            response = self.protocol.generate_response(prover_state, challenge)
            session.respond(response)
            return session

    def prove(self, witness, rng=None, message=None):
        """Generate a batchable proof; raises ProverError, never retries."""
        try:
            session = self._run(witness, rng, message)
        except SigmaError as e:
            logger.debug("Proof generation failed: %s", e.kind)
            raise ProverError(e) from e

        proof = Proof(
            self.protocol_id,
            session.commitment,
            self.protocol.serialize_response(session.response),
        )
        session.compile()
        return proof

    def prove_short(self, witness, rng=None, message=None):
        """Generate a short proof (challenge and response)."""
        try:
            session = self._run(witness, rng, message)
        except SigmaError as e:
            logger.debug("Short proof generation failed: %s", e.kind)
            raise ProverError(e) from e

        proof = ShortProof(
            self.protocol_id,
            session.challenge,
            self.protocol.serialize_response(session.response),
        )
        session.compile()
        return proof

    def _parse(self, proof, proof_type):
        if isinstance(proof, (bytes, bytearray, memoryview)):
            proof = proof_type.from_bytes(proof)
        elif isinstance(proof, proof_type):
            proof.validate()
            proof = proof_type(*map(bytes, proof))
        else:
            raise SerializationError(f"Expected {proof_type.__name__}, got {type(proof).__name__}")
        if proof.protocol_id != self.protocol_id:
            raise SerializationError(
                f"Proof is tagged for protocol {proof.protocol_id.hex()}, "
                f"expected {self.protocol_id.hex()}"
            )
        return proof

    def verify(self, proof, message=None):
        """
        Verify a batchable proof given as a ``Proof`` or its serialization.

        Returns False for a well-formed but invalid proof. Raises
        SerializationError when the proof cannot be parsed.
        """
        proof = self._parse(proof, Proof)
        commitment = self.protocol.deserialize_commitment(proof.commitment)
        response = self.protocol.deserialize_response(proof.response)

        challenge = self.challenge(proof.commitment, message)
        valid = self.protocol.verify(commitment, challenge, response)
        logger.info("Proof for protocol %s %s", self.protocol_id.hex(), "verified" if valid else "rejected")
        return valid

    def verify_short(self, proof, message=None):
        """Verify a short proof by recomputing the commitment from the simulator."""
        proof = self._parse(proof, ShortProof)
        response = self.protocol.deserialize_response(proof.response)

        try:
            commitment = self.protocol.simulate_commitment(response, proof.challenge)
        except InvalidChallengeEncoding:
            logger.info("Short proof for protocol %s rejected: undecodable challenge", self.protocol_id.hex())
            return False

        challenge = self.challenge(self.protocol.serialize_commitment(commitment), message)
        valid = hmac.compare_digest(challenge, proof.challenge)
        logger.info("Short proof for protocol %s %s", self.protocol_id.hex(), "verified" if valid else "rejected")
        return valid

    def verify_or_raise(self, proof, message=None):
        if not self.verify(proof, message):
            raise VerificationFailed("Proof did not verify")

    def verify_short_or_raise(self, proof, message=None):
        if not self.verify_short(proof, message):
            raise VerificationFailed("Short proof did not verify")


class FiatShamirNIZK:
    """
    Non-interactive zero-knowledge proof via Fiat-Shamir.

    Generic over any ``SigmaProtocol`` subclass: the protocol class is
    instantiated per statement, and challenges come from a
    ``TranscriptHasher`` built on the injected hash registry.
    """

    def __init__(self, protocol, hash_id=HashFunction.SHA3_256, registry=DEFAULT_HASH_REGISTRY):
        self.Protocol = protocol
        self.hasher = TranscriptHasher(hash_id, registry)

    def __call__(self, context, statement):
        """Create a proof interface for the given context and statement."""
        return NonInteractiveProof(self.Protocol(statement), self.hasher, context)

    def prove(self, witness, statement, context, rng=None, message=None):
        try:
            session = self(context, statement)
        except InvalidStatement as e:
            raise ProverError(e) from e
        return session.prove(witness, rng, message)

    def prove_short(self, witness, statement, context, rng=None, message=None):
        try:
            session = self(context, statement)
        except InvalidStatement as e:
            raise ProverError(e) from e
        return session.prove_short(witness, rng, message)

    def verify(self, statement, proof, context, message=None):
        return self(context, statement).verify(proof, message)

    def verify_short(self, statement, proof, context, message=None):
        return self(context, statement).verify_short(proof, message)

    def verify_or_raise(self, statement, proof, context, message=None):
        self(context, statement).verify_or_raise(proof, message)

    def verify_short_or_raise(self, statement, proof, context, message=None):
        self(context, statement).verify_short_or_raise(proof, message)

    def __repr__(self):
        return f"FiatShamirNIZK({self.Protocol.__name__}, {self.hasher!r})"
