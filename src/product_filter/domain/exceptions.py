"""
Domain Exceptions.

Construction errors surface immediately to the caller. Evaluating a
criterion or filtering a collection never raises for well-formed input.
"""

from __future__ import annotations


class ProductFilterError(Exception):
    """Base class for all product filter errors."""
    pass


class InvalidArgumentError(ProductFilterError, ValueError):
    """Raised when a criterion is constructed with a missing or invalid argument."""

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"{argument}: {message}")
