"""Tadpoles - flocking tadpoles with swaying tails."""

__version__ = "0.1.0"
