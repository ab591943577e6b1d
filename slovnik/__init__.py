"""Bidirectional search engine for the Interslavic dictionary."""

__version__ = "0.1.0"
