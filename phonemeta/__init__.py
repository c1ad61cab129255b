# file: phonemeta/__init__.py
"""
phonemeta - build-time generator for phone number metadata artifacts.

This package turns a phone number metadata XML description into one binary
metadata file per region (or non-geographical calling code) and a generated
source file holding the country calling code lookup table.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
