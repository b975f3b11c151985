"""Interactive explorer for continuous and discrete probability distributions."""

__version__ = "0.1.0"