"""
Tests for Fiat-Shamir challenge derivation.
"""

import hashlib

import pytest
from hypothesis import given, settings, strategies as st

from fiat_shamir import (
    CHALLENGE_LENGTH,
    DOMAIN_SEPARATOR,
    HashFunction,
    HashFunctionNotAllowed,
    HashRegistry,
    TranscriptHasher,
)


PROTOCOL_A = b"protocol a".ljust(32, b"\0")
PROTOCOL_B = b"protocol b".ljust(32, b"\0")

hasher = TranscriptHasher()
short_bytes = st.binary(max_size=64)


@given(statement=short_bytes, commitment=short_bytes, context=short_bytes)
def test_challenge_is_deterministic(statement, commitment, context):
    first = hasher.derive_challenge(PROTOCOL_A, statement, commitment, context)
    second = TranscriptHasher().derive_challenge(PROTOCOL_A, statement, commitment, context)
    assert first == second
    assert len(first) == CHALLENGE_LENGTH


@settings(max_examples=50)
@given(
    inputs=st.tuples(short_bytes, short_bytes, short_bytes),
    position=st.integers(min_value=0, max_value=2),
    replacement=short_bytes,
)
def test_changing_any_input_changes_challenge(inputs, position, replacement):
    changed = list(inputs)
    changed[position] = replacement
    if tuple(changed) == inputs:
        return
    assert (
        hasher.derive_challenge(PROTOCOL_A, *inputs)
        != hasher.derive_challenge(PROTOCOL_A, *changed)
    )


@given(statement=short_bytes, commitment=short_bytes, context=short_bytes)
def test_protocol_id_separates_domains(statement, commitment, context):
    assert (
        hasher.derive_challenge(PROTOCOL_A, statement, commitment, context)
        != hasher.derive_challenge(PROTOCOL_B, statement, commitment, context)
    )


def test_field_boundaries_are_unambiguous():
    # same concatenation, different split between statement and commitment
    assert (
        hasher.derive_challenge(PROTOCOL_A, b"ab", b"c", b"")
        != hasher.derive_challenge(PROTOCOL_A, b"a", b"bc", b"")
    )


def test_message_is_bound():
    without = hasher.derive_challenge(PROTOCOL_A, b"s", b"c", b"ctx")
    empty = hasher.derive_challenge(PROTOCOL_A, b"s", b"c", b"ctx", message=b"")
    signed = hasher.derive_challenge(PROTOCOL_A, b"s", b"c", b"ctx", message=b"hello")
    assert len({without, empty, signed}) == 3


def test_transcript_layout():
    data = hasher.transcript(PROTOCOL_A, b"S", b"C", b"X")
    assert data == (
        bytes([len(DOMAIN_SEPARATOR)]) + DOMAIN_SEPARATOR
        + b"\x0bprotocol-id" + b"\x00\x00\x00\x20" + PROTOCOL_A
        + b"\x09statement" + b"\x00\x00\x00\x01S"
        + b"\x0acommitment" + b"\x00\x00\x00\x01C"
        + b"\x07context" + b"\x00\x00\x00\x01X"
    )
    assert hasher.derive_challenge(PROTOCOL_A, b"S", b"C", b"X") == hashlib.sha3_256(data).digest()


def test_blake2b_output_is_truncated():
    blake = TranscriptHasher(HashFunction.BLAKE2B)
    data = blake.transcript(PROTOCOL_A, b"S", b"C", b"X")
    challenge = blake.derive_challenge(PROTOCOL_A, b"S", b"C", b"X")
    assert challenge == hashlib.blake2b(data).digest()[:CHALLENGE_LENGTH]


def test_hash_functions_give_different_challenges():
    sha3 = TranscriptHasher(HashFunction.SHA3_256)
    blake = TranscriptHasher(HashFunction.BLAKE2B)
    assert sha3.derive_challenge(PROTOCOL_A, b"S", b"C", b"X") != blake.derive_challenge(PROTOCOL_A, b"S", b"C", b"X")


def test_disallowed_hash_rejected_at_construction():
    with pytest.raises(HashFunctionNotAllowed):
        TranscriptHasher(HashFunction.SHA256)
    TranscriptHasher(HashFunction.SHA256, HashRegistry([HashFunction.SHA256]))


class RevokingRegistry(HashRegistry):
    """Allows construction, then denies the hash function."""

    def __init__(self, allowed):
        super().__init__(allowed)
        self.revoked = False

    def is_allowed(self, hash_id):
        return not self.revoked and super().is_allowed(hash_id)


def test_registry_consulted_on_every_hash():
    registry = RevokingRegistry([HashFunction.SHA3_256])
    revoking = TranscriptHasher(HashFunction.SHA3_256, registry)
    revoking.derive_challenge(PROTOCOL_A, b"S", b"C", b"X")
    registry.revoked = True
    with pytest.raises(HashFunctionNotAllowed):
        revoking.derive_challenge(PROTOCOL_A, b"S", b"C", b"X")


class MinimalRegistry:
    """A policy object with only ``is_allowed`` and ``hash``."""

    def __init__(self):
        self.hashed = []

    def is_allowed(self, hash_id):
        return hash_id is HashFunction.SHA3_256

    def hash(self, hash_id, data):
        self.hashed.append(hash_id)
        return hashlib.sha3_256(data).digest()


def test_minimal_registry_interface():
    registry = MinimalRegistry()
    minimal = TranscriptHasher(HashFunction.SHA3_256, registry)
    challenge = minimal.derive_challenge(PROTOCOL_A, b"S", b"C", b"X")
    assert challenge == hasher.derive_challenge(PROTOCOL_A, b"S", b"C", b"X")
    assert registry.hashed == [HashFunction.SHA3_256]
    with pytest.raises(HashFunctionNotAllowed):
        TranscriptHasher(HashFunction.BLAKE2B, registry)


@pytest.mark.parametrize("position", range(5))
@pytest.mark.parametrize("value", [32, "ctx", [1, 2]])
def test_non_bytes_inputs_rejected(position, value):
    inputs = [PROTOCOL_A, b"S", b"C", b"X", b"M"]
    inputs[position] = value
    with pytest.raises(TypeError):
        hasher.derive_challenge(*inputs)


def test_integer_context_is_not_zero_bytes():
    with pytest.raises(TypeError):
        hasher.derive_challenge(PROTOCOL_A, b"S", b"C", 32)
    assert hasher.derive_challenge(PROTOCOL_A, b"S", b"C", bytearray(32)) == \
        hasher.derive_challenge(PROTOCOL_A, b"S", b"C", bytes(32))
