"""
Service-level exceptions.

This module contains exceptions that can be raised by the recipe store,
recipe creation and recipe selection. None of them leave the in-memory
recipe snapshot or a chat session in a changed state.
"""
from typing import Iterable, Optional


class StoreUnavailable(Exception):
    """Raised when the recipe store cannot be reached or queried."""
    pass


class ValidationError(Exception):
    """
    Raised when add-recipe fields are missing or malformed.

    Attributes:
        missing_fields: Names of required fields that were left blank
    """

    def __init__(self, message: str, missing_fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.missing_fields = list(missing_fields or [])


class EmptySelection(Exception):
    """Raised when there is no recipe to choose from."""

    def __init__(self, message: str = "No recipes match current constraints"):
        super().__init__(message)
