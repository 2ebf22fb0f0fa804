"""Test helper modules for the layouts test suite.

- html: HTML normalisation for output comparisons
- layout_files: writing layout documents into a temporary root
"""
from __future__ import annotations
