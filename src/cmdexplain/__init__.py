"""Explain shell commands node by node."""

__version__ = "0.1.0"
