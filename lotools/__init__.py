"""Helpers for collections, mappings, conditionals, errors, retries, channels and threads."""

__version__ = "0.1.0"