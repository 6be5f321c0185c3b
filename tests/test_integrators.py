import math
import warnings

import numpy as np
import pytest
import mcQuadrature as mq

# Var(h(U)) for h(x) = 4 sqrt(1 - x^2), U ~ U(0, 1)
CRUDE_VAR = 32 / 3 - np.pi ** 2
# Var(h(X) / g(X)) for g(x) = (4 - 2x) / 3
MATCHED_VAR = 60 - 72 * np.log(2) - np.pi ** 2
# Var(h(X) / g(X)) for g(x) = 2 (1 - x)
ORIGINAL_VAR = 12 - np.pi ** 2


######################
# Initial IO checks
######################

def test_io(integrator, quarter_circle):
    """Checks each integrator has the desired IO for an integrator"""
    estimate = integrator.estimate(quarter_circle.integrand, 100)
    assert isinstance(estimate, float)

    res = integrator(quarter_circle, 100)
    assert isinstance(res['estimate'], float)
    assert 'n_evals' not in res
    res = integrator(quarter_circle, 100, return_N=True)
    assert res['n_evals'] == 100
    res = integrator(quarter_circle, 100, return_std=True)
    assert isinstance(res['std'], float)
    assert res['std'] > 0


def test_std_single_sample(integrator, quarter_circle):
    res = integrator(quarter_circle, 1, return_std=True)
    assert res['std'] == 0.0


def test_name(crude_integrator, matched_integrator):
    assert crude_integrator.name == 'CrudeMcIntegrator'
    assert matched_integrator.name == 'ISIntegrator'
    crude_integrator.name = 'Crude'
    assert crude_integrator.name == 'Crude'
    assert str(crude_integrator) == 'Crude'


def test_is_integrator_abstraction(integrator):
    assert isinstance(integrator, mq.Integrator)
    with pytest.raises(TypeError):
        mq.Integrator()


######################
# Sample count
######################

@pytest.mark.parametrize("n", [0, -1, -100])
def test_reject_non_positive_n(integrator, quarter_circle, n):
    with pytest.raises(ValueError):
        integrator.estimate(quarter_circle.integrand, n)
    with pytest.raises(ValueError):
        integrator(quarter_circle, n)


@pytest.mark.parametrize("n", [2.5, '10', None, True])
def test_reject_non_integer_n(integrator, quarter_circle, n):
    with pytest.raises(TypeError):
        integrator.estimate(quarter_circle.integrand, n)


def test_numpy_integer_n(integrator, quarter_circle):
    assert isinstance(integrator.estimate(quarter_circle.integrand, np.int64(10)),
                      float)


######################
# Exactness
######################

@pytest.mark.parametrize("c", [0.0, 1.0, -2.5, 3.7])
@pytest.mark.parametrize("n", [1, 7, 1000])
def test_crude_constant(c, n):
    integ = mq.CrudeMcIntegrator()
    problem = mq.example_problems.Constant(c)
    assert integ.estimate(problem.integrand, n) == pytest.approx(c, rel=1e-12, abs=1e-12)


def test_zero_variance_proposal():
    """g proportional to h gives the answer for every sample"""
    problem = mq.example_problems.Exponential(rate=1.0)
    proposal = mq.Proposal.exponential(rate=-1.0, seed=3)
    integ = mq.ISIntegrator.from_proposal(proposal)
    for n in [1, 10, 1000]:
        assert integ.estimate(problem.integrand, n) == pytest.approx(
            problem.answer, rel=1e-10)


def test_uniform_proposal_matches_crude(quarter_circle):
    """with g = 1 the weight h(x) / g(x) is h(x)"""
    crude = mq.CrudeMcIntegrator(seed=11)
    uniform_is = mq.ISIntegrator.from_proposal(mq.Proposal.uniform(seed=11))
    for n in [1, 50, 1000]:
        assert crude.estimate(quarter_circle.integrand, n) == \
            uniform_is.estimate(quarter_circle.integrand, n)


######################
# Randomness
######################

def test_fixed_seed_is_deterministic(quarter_circle):
    a = mq.CrudeMcIntegrator(seed=7)
    b = mq.CrudeMcIntegrator(seed=7)
    assert a.estimate(quarter_circle.integrand, 500) == \
        b.estimate(quarter_circle.integrand, 500)

    a = mq.ISIntegrator.from_proposal(mq.Proposal.linear(seed=7))
    b = mq.ISIntegrator.from_proposal(mq.Proposal.linear(seed=7))
    assert a.estimate(quarter_circle.integrand, 500) == \
        b.estimate(quarter_circle.integrand, 500)


@pytest.mark.parametrize("n", [1, 7, 1000])
def test_estimate_and_call_agree(quarter_circle, n):
    for make in [lambda: mq.CrudeMcIntegrator(seed=13),
                 lambda: mq.ISIntegrator.from_proposal(mq.Proposal.linear(seed=13))]:
        via_estimate = make().estimate(quarter_circle.integrand, n)
        via_call = make()(quarter_circle, n)['estimate']
        assert via_estimate == via_call


def test_repeated_calls_differ(integrator, quarter_circle):
    first = integrator.estimate(quarter_circle.integrand, 100)
    second = integrator.estimate(quarter_circle.integrand, 100)
    assert first != second


def test_unseeded_instances_do_not_share_state(quarter_circle):
    a = mq.CrudeMcIntegrator()
    b = mq.CrudeMcIntegrator()
    assert a.sampler.rng is not b.sampler.rng
    assert a.estimate(quarter_circle.integrand, 100) != \
        b.estimate(quarter_circle.integrand, 100)


def test_sampler_or_seed():
    with pytest.raises(ValueError):
        mq.CrudeMcIntegrator(sampler=mq.samplers.UniformSampler(), seed=1)


def test_crude_uses_given_sampler(quarter_circle):
    sampler = mq.samplers.UniformSampler(seed=5)
    integ = mq.CrudeMcIntegrator(sampler=sampler)
    assert integ.sampler is sampler
    expected = np.mean([quarter_circle.integrand(u)
                        for u in np.random.default_rng(5).random(20)])
    assert integ.estimate(quarter_circle.integrand, 20) == pytest.approx(expected)


######################
# Statistical checks
######################

@pytest.mark.parametrize("integrator_instance, variance", [
    (mq.CrudeMcIntegrator(seed=1), CRUDE_VAR),
    (mq.ISIntegrator.from_proposal(mq.Proposal.linear(slope=0.5, seed=1)),
     MATCHED_VAR),
    (mq.ISIntegrator.from_proposal(mq.Proposal.linear(slope=1.0, seed=1)),
     ORIGINAL_VAR),
])
def test_converges_to_pi(integrator_instance, variance, quarter_circle):
    n = 100_000
    estimate = integrator_instance.estimate(quarter_circle.integrand, n)
    assert abs(estimate - np.pi) < 5 * np.sqrt(variance / n)


def test_standard_error(matched_integrator, quarter_circle):
    n = 20_000
    res = matched_integrator(quarter_circle, n, return_std=True)
    assert res['std'] == pytest.approx(np.sqrt(MATCHED_VAR / n), rel=0.1)


def test_crude_unbiased():
    problem = mq.example_problems.Monomial(2)
    integ = mq.CrudeMcIntegrator(seed=42)
    n, n_repeat = 10, 1000
    estimates = [integ.estimate(problem.integrand, n) for _ in range(n_repeat)]
    # Var(U^2) = 1/5 - 1/9
    sd = np.sqrt((1 / 5 - 1 / 9) / (n * n_repeat))
    assert abs(np.mean(estimates) - problem.answer) < 5 * sd


def test_importance_unbiased(quarter_circle):
    integ = mq.ISIntegrator.from_proposal(mq.Proposal.linear(slope=1.0, seed=42))
    n, n_repeat = 10, 1000
    estimates = [integ.estimate(quarter_circle.integrand, n) for _ in range(n_repeat)]
    sd = np.sqrt(ORIGINAL_VAR / (n * n_repeat))
    assert abs(np.mean(estimates) - np.pi) < 5 * sd


def test_compared_strategies_use_independent_streams(crude_integrator,
                                                     matched_proposal):
    crude_draws = [crude_integrator.sampler() for _ in range(5)]
    proposal_draws = [matched_proposal.params['sampler']() for _ in range(5)]
    assert crude_draws != proposal_draws
    assert crude_draws[0] != proposal_draws[0]


def _empirical_variance(integ, problem, n, n_repeat):
    return np.var([integ.estimate(problem.integrand, n) for _ in range(n_repeat)],
                  ddof=1)


def test_variance_reduction(crude_integrator, matched_integrator, quarter_circle):
    n, n_repeat = 200, 300
    crude_var = _empirical_variance(crude_integrator, quarter_circle, n, n_repeat)
    matched_var = _empirical_variance(matched_integrator, quarter_circle, n, n_repeat)
    assert matched_var < crude_var
    assert crude_var == pytest.approx(CRUDE_VAR / n, rel=0.3)
    assert matched_var == pytest.approx(MATCHED_VAR / n, rel=0.3)


def test_steep_linear_proposal_does_not_reduce_variance(crude_integrator,
                                                        quarter_circle):
    """g(x) = 2 (1 - x) vanishes at 1 where h does not, so h / g is large there"""
    integ = mq.ISIntegrator.from_proposal(mq.Proposal.linear(slope=1.0, seed=9))
    n, n_repeat = 200, 300
    crude_var = _empirical_variance(crude_integrator, quarter_circle, n, n_repeat)
    steep_var = _empirical_variance(integ, quarter_circle, n, n_repeat)
    assert steep_var > crude_var


######################
# Failures
######################

def test_integrand_errors_propagate(quarter_circle):
    integ = mq.ISIntegrator(pdf=lambda x: 1.0, generator=lambda: 2.0)
    with pytest.raises(ValueError):
        integ.estimate(quarter_circle.integrand, 10)

    def failing(x):
        raise ZeroDivisionError('integrand failure')

    with pytest.raises(ZeroDivisionError):
        mq.CrudeMcIntegrator().estimate(failing, 10)


def test_vanishing_density_poisons_estimate():
    integ = mq.ISIntegrator(pdf=lambda x: 0.0, generator=lambda: 0.5)
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        estimate = integ.estimate(lambda x: 1.0, 10)
    assert math.isinf(estimate)

    estimate = integ.estimate(lambda x: 0.0, 10)
    assert math.isnan(estimate)


def test_check_finite_warns():
    integ = mq.ISIntegrator(pdf=lambda x: 0.0 if x > 0.5 else 1.0,
                            generator=mq.samplers.UniformSampler(seed=0),
                            check_finite=True)
    with pytest.warns(RuntimeWarning, match='not finite'):
        integ.estimate(lambda x: 1.0, 100)


def test_check_finite_silent_when_finite(quarter_circle):
    integ = mq.ISIntegrator.from_proposal(mq.Proposal.linear(slope=0.5, seed=0),
                                          check_finite=True)
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        integ.estimate(quarter_circle.integrand, 100)


def test_is_requires_callables():
    with pytest.raises(TypeError):
        mq.ISIntegrator(pdf=1.0, generator=lambda: 0.5)
    with pytest.raises(TypeError):
        mq.ISIntegrator(pdf=lambda x: 1.0, generator=0.5)
