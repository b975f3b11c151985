import pytest

from probviz.cont_distr import ContDistr
from probviz.cont_panel import ContPanel, linspace
from probviz.distr import BARELY_POSITIVE, DistributionError


def test_linspace_endpoints_and_length():
    values = linspace(-2.0, 3.0, 11)
    assert len(values) == 11
    assert values[0] == -2.0
    assert values[-1] == pytest.approx(3.0)
    assert all(a < b for a, b in zip(values, values[1:]))


def test_linspace_single_and_empty():
    assert linspace(4.0, 9.0, 1) == [4.0]
    assert linspace(4.0, 9.0, 0) == []


def test_default_panel_is_standard_normal():
    panel = ContPanel()
    assert panel.kind is ContDistr.NORMAL
    assert panel.params == (0.0, 1.0, 0.0)


def test_select_resets_to_defaults():
    panel = ContPanel()
    panel.select(ContDistr.TRIANGULAR)
    assert panel.params == (0.0, 5.0, 2.5)
    assert [p.name for p in panel.defaults] == ["Min", "Max", "Mode"]


def test_select_keeps_unused_slots():
    panel = ContPanel()
    panel.select(ContDistr.TRIANGULAR)
    panel.select(ContDistr.EXP)
    assert panel.params[0] == 1.0
    assert panel.params[1:] == (5.0, 2.5)


def test_set_param_clamps_to_range():
    panel = ContPanel()
    assert panel.set_param(1, -5.0) == BARELY_POSITIVE
    assert panel.params[1] == BARELY_POSITIVE


def test_set_param_out_of_range_index():
    panel = ContPanel()
    with pytest.raises(IndexError):
        panel.set_param(2, 1.0)


def test_invalid_parameters():
    panel = ContPanel()
    panel.select(ContDistr.UNIFORM)
    panel.set_param(0, 2.0)
    with pytest.raises(DistributionError):
        panel.distribution()
    assert panel.summary() is None
    assert panel.plot_range() is None
    assert panel.curves() is None


def test_summary_of_standard_normal():
    summary = ContPanel().summary()
    assert summary.display_mean() == "0.000"
    assert summary.display_variance() == "1.000"


def test_cauchy_plot_range_uses_scale():
    panel = ContPanel()
    panel.select(ContDistr.CAUCHY)
    assert panel.plot_range() == (-10.0, 10.0)


def test_normal_plot_range_is_quantile_interval():
    panel = ContPanel()
    low, high = panel.plot_range()
    assert low == pytest.approx(-high)
    dist = panel.distribution()
    assert dist.cdf(low) == pytest.approx(0.001)
    assert dist.cdf(high) == pytest.approx(0.999)


def test_curves_shape_and_bounds():
    panel = ContPanel()
    curves = panel.curves()
    low, high = panel.plot_range()
    assert len(curves.x) == len(curves.pdf) == len(curves.cdf) == 1000
    assert curves.x_bounds == (low - 1.0, high + 1.0)
    assert curves.y_bounds[0] == 0.0
    assert curves.y_bounds[1] >= 1.2
    assert all(a <= b for a, b in zip(curves.cdf, curves.cdf[1:]))


def test_curves_y_bound_follows_tall_density():
    panel = ContPanel()
    panel.set_param(1, 0.1)
    curves = panel.curves()
    assert curves.y_bounds[1] == pytest.approx(max(curves.pdf) + 0.2)
    assert max(curves.pdf) > 1.0