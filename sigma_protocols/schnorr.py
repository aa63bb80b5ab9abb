"""
Schnorr proof of knowledge of a discrete logarithm.
"""

from collections import namedtuple
from collections.abc import Mapping

from fiat_shamir import (
    CHALLENGE_LENGTH,
    OS2IP,
    InvalidChallengeEncoding,
    InvalidStatement,
    InvalidWitness,
    SerializationError,
)
from groups import GroupP256, PrimeFieldElement

from .sigma_protocols import ProverState, SigmaProtocol


DlogStatement = namedtuple("DlogStatement", ["base", "claim"])
DlogStatement.__doc__ = "Public claim ``claim = base * x`` for a secret scalar x."


class SchnorrDLOG(SigmaProtocol):
    """
    Proves knowledge of x with ``claim = base * x``.

    commitment  R = base * r
    response    s = r + c * x
    verifier    base * s == R + claim * c

    Challenge decoding: the 32 challenge bytes are read as a big-endian
    integer and rejected with InvalidChallengeEncoding when not below the
    group order. Accepted challenges are uniform over the scalar field with
    no modular bias; for P-256 a rejection happens with probability about
    2^-32, after which the caller proves again with fresh randomness.
    """

    Group = GroupP256

    def __init__(self, statement):
        try:
            if isinstance(statement, Mapping):
                base, claim = statement["base"], statement["claim"]
            else:
                base, claim = statement
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidStatement("Statement must provide a base and a claim") from e

        for name, element in (("base", base), ("claim", claim)):
            if not self.Group.is_element(element):
                raise InvalidStatement(f"{name} is not an element of {self.Group.name}")
            if element == self.Group.identity():
                raise InvalidStatement(f"{name} must not be the identity")

        self.statement = DlogStatement(base, claim)

    @classmethod
    def protocol_id(cls):
        return f"sigma schnorr dlog {cls.Group.name}".encode().ljust(32, b'\0')

    def _scalar(self, value):
        Scalar = self.Group.ScalarField
        if isinstance(value, PrimeFieldElement) and value.field == Scalar.field:
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Scalar.field(value)
        raise InvalidWitness(f"Witness must be a scalar, got {type(value).__name__}")

    def generate_commitment(self, witness, rng):
        x = self._scalar(witness)
        if self.statement.base * x != self.statement.claim:
            raise InvalidWitness("Witness does not open the statement")

        r = self.Group.ScalarField.random(rng)
        commitment = self.statement.base * r
        return ProverState([x], [r]), commitment

    def generate_response(self, prover_state, challenge):
        c = self.challenge_domain_decode(challenge)
        [x] = prover_state.witness
        [r] = prover_state.nonces
        return r + c * x

    def verify(self, commitment, challenge, response):
        try:
            c = self.challenge_domain_decode(challenge)
        except InvalidChallengeEncoding:
            return False

        expected = self.statement.base * response
        got = commitment + self.statement.claim * c
        return expected == got

    def challenge_domain_decode(self, challenge):
        if len(challenge) != CHALLENGE_LENGTH:
            raise InvalidChallengeEncoding(
                f"Challenge must be {CHALLENGE_LENGTH} bytes, got {len(challenge)}"
            )
        value = OS2IP(challenge)
        if value >= self.Group.ScalarField.order:
            raise InvalidChallengeEncoding("Challenge is not below the group order")
        return self.Group.ScalarField.field(value)

    def serialize_statement(self):
        return self.Group.serialize(self.statement)

    def serialize_commitment(self, commitment):
        return self.Group.serialize([commitment])

    def serialize_response(self, response):
        return self.Group.ScalarField.serialize([response])

    def deserialize_commitment(self, data):
        if len(data) != self.Group.element_byte_length():
            raise SerializationError(f"Commitment must be {self.Group.element_byte_length()} bytes")
        try:
            [commitment] = self.Group.deserialize(data)
        except ValueError as e:
            raise SerializationError(f"Invalid commitment: {e}") from e
        if commitment == self.Group.identity():
            raise SerializationError("Commitment must not be the identity")
        return commitment

    def deserialize_response(self, data):
        if len(data) != self.Group.ScalarField.scalar_byte_length():
            raise SerializationError(f"Response must be {self.Group.ScalarField.scalar_byte_length()} bytes")
        try:
            [response] = self.Group.ScalarField.deserialize(data)
        except ValueError as e:
            raise SerializationError(f"Invalid response: {e}") from e
        return response

    def simulate_response(self, rng):
        return self.Group.ScalarField.random(rng)

    def simulate_commitment(self, response, challenge):
        c = self.challenge_domain_decode(challenge)
        return self.statement.base * response - self.statement.claim * c
