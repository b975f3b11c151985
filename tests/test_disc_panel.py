import pytest

from probviz.disc_distr import DiscDistr
from probviz.disc_panel import DiscPanel, discrete_range
from probviz.distr import DistributionError


def test_default_is_poisson_with_default_lambda():
    panel = DiscPanel()
    assert panel.kind is DiscDistr.POISSON
    assert panel.params == (1.0, 1.0, 1.0)


def test_select_resets_parameters_to_defaults():
    panel = DiscPanel()
    panel.select(DiscDistr.BINOMIAL)
    assert panel.kind is DiscDistr.BINOMIAL
    assert panel.params[:2] == (0.5, 5.0)
    panel.select(DiscDistr.HYPERGEOMETRIC)
    assert panel.params == (500.0, 50.0, 100.0)


def test_set_param_clamps_probability():
    panel = DiscPanel()
    panel.select(DiscDistr.BERNOULLI)
    assert panel.set_param(0, 2.0) == 1.0
    assert panel.set_param(0, -1.0) == 0.0
    assert panel.params[0] == 0.0


def test_set_param_clamps_count_to_non_negative():
    panel = DiscPanel()
    panel.select(DiscDistr.BINOMIAL)
    assert panel.set_param(1, -3.0) == 0.0


def test_set_param_out_of_range_index():
    panel = DiscPanel()
    with pytest.raises(IndexError):
        panel.set_param(1, 1.0)


def test_poisson_range():
    dist = DiscDistr.POISSON.build(1.0)
    assert discrete_range(dist) == (0, 5)


def test_range_invariants_for_hypergeometric():
    dist = DiscDistr.HYPERGEOMETRIC.build(500, 50, 100)
    low, high = discrete_range(dist)
    assert low < high
    assert float(dist.cdf(high)) >= 0.999
    assert float(dist.cdf(high - 1)) < 0.999 or high == low + 1
    assert float(dist.cdf(low)) < 0.001 or low == 0


def test_degenerate_bernoulli_range():
    dist = DiscDistr.BERNOULLI.build(1.0)
    assert discrete_range(dist) == (0, 1)


def test_invalid_hypergeometric_is_reported():
    panel = DiscPanel()
    panel.select(DiscDistr.HYPERGEOMETRIC)
    panel.set_param(1, 600.0)
    with pytest.raises(DistributionError):
        panel.distribution()
    assert panel.summary() is None
    assert panel.bars() is None


def test_bars_shape_and_bounds():
    panel = DiscPanel()
    panel.select(DiscDistr.BINOMIAL)
    bars = panel.bars()
    low, high = discrete_range(panel.distribution())
    assert bars.x == tuple(range(low, high + 1))
    assert len(bars.pmf) == len(bars.cdf) == len(bars.x)
    assert bars.x_bounds == (low - 1.0, high + 1.0)
    assert bars.y_bounds == (0.0, 1.2)
    assert all(a <= b for a, b in zip(bars.cdf, bars.cdf[1:]))
    assert sum(bars.pmf) <= 1.0 + 1e-9


def test_summary_for_poisson():
    summary = DiscPanel().summary()
    assert summary.display_mean() == "1.000"
    assert summary.display_variance() == "1.000"