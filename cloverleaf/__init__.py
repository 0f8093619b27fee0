"""Sparse CSR graphs, distance metrics, feature stores and sampling helpers."""

__version__ = "0.1.0"