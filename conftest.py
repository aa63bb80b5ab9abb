import pytest
from hypothesis import HealthCheck, settings

from drng import DeterministicRNG
from groups import GroupP256
from sigma_protocols import CIPHERSUITE, DlogStatement

# pure-Python curve arithmetic: keep example counts low and drop deadlines
settings.register_profile(
    "sigma",
    max_examples=20,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("sigma")


def make_dlog(seed):
    rng = DeterministicRNG(seed)
    G = GroupP256.generator()
    x = GroupP256.ScalarField.random(rng)
    return DlogStatement(G, G * x), x


@pytest.fixture(scope="session")
def dlog():
    """A discrete-log statement and its witness."""
    return make_dlog(b"instance_witness_generation_seed")


@pytest.fixture(params=sorted(CIPHERSUITE))
def nizk(request):
    return CIPHERSUITE[request.param]
