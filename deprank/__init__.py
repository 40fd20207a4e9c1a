"""Rank the nodes of a dependency DAG into layers that can be processed together."""

__version__ = "0.1.0"