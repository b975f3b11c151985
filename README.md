# probviz

A small desktop tool for exploring probability distributions. Pick a
distribution, adjust its parameters, and see its density (or mass) function
and cumulative distribution function plotted together, alongside a table of
summary statistics: mean, variance, standard deviation, entropy and skewness.

## Installation

```
pip install .
```

The window is built with Tk, so the Python installation must include
`tkinter`.

## Running

```
probviz
probviz --panel discrete
```

`--panel` chooses which panel is shown first: `continuous` (the default) or
`discrete`. The window has a File menu with Quit, a side bar with the panel
selector, the distribution list, the parameter inputs and the statistics
table, and the plot on the right.

- **Continuous**: Normal, Gamma, Beta, Cauchy, ChiSquared, Exp,
  FisherSnedecor, Gumbel, InverseGamma, Laplace, LogNormal, Pareto, StudentsT,
  Triangular, Uniform and Weibull. The PDF and CDF are drawn as lines over
  1000 points between the 0.1% and 99.9% quantiles (for Cauchy, ten scales
  either side of the location).
- **Discrete**: Poisson, Binomial, Bernoulli, Geometric and Hypergeometric.
  The PMF and CDF are drawn as bars over the integers that hold all but the
  outer 0.1% tails of the distribution.

Choosing a distribution resets its parameters to their defaults. Entered
values are clamped to each parameter's allowed range. When the parameters do
not describe a valid distribution, nothing is plotted and no statistics are
shown.

## Using the library

The distribution catalogues and panel models work without a window:

```python
from probviz.cont_distr import ContDistr
from probviz.cont_panel import ContPanel

panel = ContPanel()
panel.select(ContDistr.GAMMA)
panel.set_param(0, 2.0)
for name, value in panel.summary().rows():
    print(name, value)
```

- `probviz.cont_distr.ContDistr` and `probviz.disc_distr.DiscDistr` list the
  distributions. `defaults()` returns their `Param` descriptions (name,
  default, range, hint) and `build(par1, par2, par3)` returns a frozen
  `scipy.stats` distribution, raising `probviz.distr.DistributionError` for
  invalid parameters.
- `probviz.distr.SummaryStats.from_distribution(dist)` collects the
  statistics; undefined values are shown as `N/A`.
- `ContPanel.curves()` returns the sampled x values with their PDF and CDF and
  the plot bounds; `DiscPanel.bars()` from `probviz.disc_panel` does the same
  for the PMF and CDF of each point of the discrete support, using
  `discrete_range(dist)` to choose the points.
- `probviz.app.ProbabilityApp(None)` keeps a matplotlib `Figure` and the
  summary rows up to date without opening a window.

## Tests

```
pip install .[test]
pytest
```