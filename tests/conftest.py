import pytest
import mcQuadrature as mq

SEED = 2024


@pytest.fixture
def quarter_circle():
    """4 sqrt(1 - x^2) on [0, 1], answer pi"""
    return mq.example_problems.QuarterCircle()


@pytest.fixture
def crude_integrator():
    """seeded crude Monte Carlo integrator"""
    return mq.CrudeMcIntegrator(seed=SEED)


@pytest.fixture
def matched_proposal():
    """g(x) = (4 - 2x) / 3, close to the quarter circle, on its own stream"""
    return mq.Proposal.linear(slope=0.5, seed=SEED + 1)


@pytest.fixture
def matched_integrator(matched_proposal):
    """importance sampling with the matched proposal"""
    return mq.ISIntegrator.from_proposal(matched_proposal)


@pytest.fixture(params=['crude', 'matched'])
def integrator(request, crude_integrator, matched_integrator):
    """
    "Meta" integrator to parametrize tests over both strategies.
    """
    switch = {
        'crude': crude_integrator,
        'matched': matched_integrator,
    }
    return switch[request.param]
