"""Toolkit for scaffolding, running and benchmarking daily puzzle solutions."""

__version__ = "0.12.0"