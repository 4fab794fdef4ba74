"""Stamp Studio - print-on-demand design review service."""

__version__ = "0.1.0"
