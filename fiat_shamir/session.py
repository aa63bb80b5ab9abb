"""
State machine for a single prove call.
"""

from enum import Enum


class SessionState(Enum):
    INIT = "init"
    COMMITTED = "committed"
    CHALLENGED = "challenged"
    RESPONDED = "responded"
    COMPILED = "compiled"
    FAILED = "failed"


_TRANSITIONS = {
    SessionState.INIT: SessionState.COMMITTED,
    SessionState.COMMITTED: SessionState.CHALLENGED,
    SessionState.CHALLENGED: SessionState.RESPONDED,
    SessionState.RESPONDED: SessionState.COMPILED,
}

TERMINAL_STATES = frozenset([SessionState.COMPILED, SessionState.FAILED])


class ProofSession:
    """
    Tracks one run of the prove pipeline:
    INIT -> COMMITTED -> CHALLENGED -> RESPONDED -> COMPILED,
    with FAILED reachable from any non-terminal state.

    The session owns the prover state (witness and nonces) and clears it
    once the response is computed or the session fails.
    """

    def __init__(self):
        self.state = SessionState.INIT
        self.failure = None
        self.prover_state = None
        self.commitment = None
        self.challenge = None
        self.response = None

    @property
    def terminal(self):
        return self.state in TERMINAL_STATES

    def _advance(self, expected):
        if self.state is not expected:
            raise RuntimeError(f"Session is {self.state.name}, expected {expected.name}")
        self.state = _TRANSITIONS[expected]

    def commit(self, prover_state, commitment):
        self._advance(SessionState.INIT)
        self.prover_state = prover_state
        self.commitment = commitment

    def challenge_derived(self, challenge):
        self._advance(SessionState.COMMITTED)
        self.challenge = challenge

    def respond(self, response):
        self._advance(SessionState.CHALLENGED)
        self.response = response
        self._release()

    def compile(self):
        self._advance(SessionState.RESPONDED)
        self._release()

    def fail(self, kind):
        if self.terminal:
            raise RuntimeError(f"Session already terminated in {self.state.name}")
        self.state = SessionState.FAILED
        self.failure = kind
        self._release()

    def _release(self):
        if self.prover_state is not None:
            self.prover_state.clear()
            self.prover_state = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc is not None and not self.terminal:
            self.fail(getattr(exc, "kind", None))
        self._release()
        return False

    def __repr__(self):
        if self.state is SessionState.FAILED:
            return f"ProofSession(FAILED({self.failure}))"
        return f"ProofSession({self.state.name})"
