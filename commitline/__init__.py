"""Commitline: cumulative commit timelines and velocity metrics for GitHub repositories."""

__version__ = "0.1.0"
