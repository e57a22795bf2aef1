"""Code Logics Labs: a coding assistant backed by a provider fallback chain."""

__version__ = "0.1.0"
