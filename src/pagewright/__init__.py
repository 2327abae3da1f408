"""Pagewright: page generation for static documentation and blog sites."""

__version__ = "0.1.0"
