"""Shared pure helpers."""

from helpers import formulas

__all__ = [
    "formulas",
]
