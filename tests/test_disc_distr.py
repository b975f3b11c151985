import math

import pytest

from probviz.disc_distr import DiscDistr
from probviz.distr import BARELY_POSITIVE, UNSIGNED_MAX, DistributionError, ParamKind


def test_menu_order_and_names():
    param_counts = {str(d): len(DiscDistr.defaults(d)) for d in DiscDistr}
    assert list(param_counts) == [
        "Poisson",
        "Binomial",
        "Bernoulli",
        "Geometric",
        "Hypergeometric",
    ]
    assert param_counts == {
        "Poisson": 1,
        "Binomial": 2,
        "Bernoulli": 1,
        "Geometric": 1,
        "Hypergeometric": 3,
    }


@pytest.mark.parametrize(
    "kind, names",
    [
        (DiscDistr.POISSON, ["Lambda"]),
        (DiscDistr.BINOMIAL, ["p", "n"]),
        (DiscDistr.BERNOULLI, ["p"]),
        (DiscDistr.GEOMETRIC, ["p"]),
        (DiscDistr.HYPERGEOMETRIC, ["Population", "Successes", "Draws"]),
    ],
)
def test_default_parameter_names(kind, names):
    assert [p.name for p in kind.defaults()] == names


def test_hypergeometric_defaults():
    params = DiscDistr.HYPERGEOMETRIC.defaults()
    assert [p.default for p in params] == [500, 50, 100]
    assert all(p.kind is ParamKind.UNSIGNED for p in params)
    assert params[0].low == 1
    assert params[0].high == UNSIGNED_MAX


def test_binomial_defaults_mix_kinds():
    p, n = DiscDistr.BINOMIAL.defaults()
    assert p.kind is ParamKind.FLOAT
    assert (p.default, p.low, p.high) == (0.5, 0.0, 1.0)
    assert n.kind is ParamKind.UNSIGNED
    assert n.default == 5


def test_geometric_lower_bound_is_barely_positive():
    (p,) = DiscDistr.GEOMETRIC.defaults()
    assert p.low == BARELY_POSITIVE


def test_defaults_returns_fresh_list():
    first = DiscDistr.POISSON.defaults()
    first.clear()
    assert len(DiscDistr.POISSON.defaults()) == 1


@pytest.mark.parametrize("kind", list(DiscDistr))
def test_defaults_build_valid_distribution(kind):
    values = [p.default for p in DiscDistr.defaults(kind)]
    dist = DiscDistr.build(kind, *values)
    assert 0.0 <= dist.cdf(3) <= 1.0


def test_binomial_pmf_sums_to_one():
    dist = DiscDistr.BINOMIAL.build(0.3, 5)
    assert sum(dist.pmf(k) for k in range(6)) == pytest.approx(1.0)


def test_binomial_count_is_truncated():
    truncated = DiscDistr.BINOMIAL.build(0.5, 5.9)
    exact = DiscDistr.BINOMIAL.build(0.5, 5)
    assert truncated.pmf(5) == exact.pmf(5)


def test_binomial_negative_count_saturates_to_zero():
    dist = DiscDistr.BINOMIAL.build(0.5, -3)
    assert dist.pmf(0) == pytest.approx(1.0)


def test_geometric_support_starts_at_one():
    dist = DiscDistr.GEOMETRIC.build(0.5)
    assert dist.pmf(0) == 0.0
    assert dist.cdf(1) == pytest.approx(0.5)


def test_hypergeometric_pmf_sums_to_one():
    dist = DiscDistr.HYPERGEOMETRIC.build(20, 5, 8)
    assert sum(dist.pmf(k) for k in range(9)) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "kind, args",
    [
        (DiscDistr.POISSON, (0.0,)),
        (DiscDistr.POISSON, (math.nan,)),
        (DiscDistr.BINOMIAL, (1.5, 5)),
        (DiscDistr.BINOMIAL, (-0.1, 5)),
        (DiscDistr.BERNOULLI, (2.0,)),
        (DiscDistr.GEOMETRIC, (0.0,)),
        (DiscDistr.HYPERGEOMETRIC, (10, 11, 5)),
        (DiscDistr.HYPERGEOMETRIC, (10, 5, 11)),
    ],
)
def test_invalid_parameters_raise(kind, args):
    with pytest.raises(DistributionError):
        kind.build(*args)