"""
Interface every Sigma protocol implements to be compiled by FiatShamirNIZK.
"""

from abc import ABC, abstractmethod


class ProverState:
    """
    Secret prover data between commitment and response.

    ``clear`` overwrites and drops the witness and nonces; the compiler
    calls it on every exit path of a prove call.
    """

    __slots__ = ("witness", "nonces")

    def __init__(self, witness, nonces):
        self.witness = list(witness)
        self.nonces = list(nonces)

    @property
    def cleared(self):
        return not self.witness and not self.nonces

    def clear(self):
        for values in (self.witness, self.nonces):
            for i in range(len(values)):
                values[i] = None
            values.clear()

    def __repr__(self):
        # never print secrets
        return f"ProverState(cleared={self.cleared})"


class SigmaProtocol(ABC):
    """
    Abstract base class for Sigma protocols.

    A Sigma protocol is a 3-message protocol that is special sound and
    honest-verifier zero-knowledge. An instance is bound to one statement.
    Challenges arrive as the raw 32 bytes from the transcript hasher; each
    protocol maps them into its own challenge domain with
    ``challenge_domain_decode`` and documents how.
    """

    @abstractmethod
    def __init__(self, statement):
        raise NotImplementedError

    @staticmethod
    @abstractmethod
    def protocol_id():
        """Returns a 32-byte unique identifier for this protocol."""
        raise NotImplementedError

    @abstractmethod
    def generate_commitment(self, witness, rng):
        """Return ``(prover_state, commitment)`` using fresh nonces from ``rng``."""
        raise NotImplementedError

    @abstractmethod
    def generate_response(self, prover_state, challenge):
        raise NotImplementedError

    @abstractmethod
    def verify(self, commitment, challenge, response):
        """Return True or False; must not raise on an invalid transcript."""
        raise NotImplementedError

    @abstractmethod
    def challenge_domain_decode(self, challenge):
        raise NotImplementedError

    @abstractmethod
    def serialize_statement(self):
        raise NotImplementedError

    @abstractmethod
    def serialize_commitment(self, commitment):
        raise NotImplementedError

    @abstractmethod
    def serialize_response(self, response):
        raise NotImplementedError

    @abstractmethod
    def deserialize_commitment(self, data):
        raise NotImplementedError

    @abstractmethod
    def deserialize_response(self, data):
        raise NotImplementedError

    def simulate_response(self, rng):
        raise NotImplementedError

    def simulate_commitment(self, response, challenge):
        raise NotImplementedError
