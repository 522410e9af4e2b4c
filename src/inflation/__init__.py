# src/inflation/__init__.py
"""Inflation schedule parameters for a proof-of-stake chain."""

__version__ = "0.1.0"
