"""Resolve dropped internet-shortcut files into link preview metadata."""

__version__ = "1.0.0"
