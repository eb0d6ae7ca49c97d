"""Building blocks for reference-point based many-objective evolutionary optimisation."""

__version__ = "0.1.0"