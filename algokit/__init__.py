"""Disjoint sets, segment and Fenwick trees, graphs, contest problems and CPU schedulers."""

__version__ = "0.1.0"