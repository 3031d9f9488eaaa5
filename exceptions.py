# exceptions.py
"""
Custom exceptions for the Club Match Generator.

This module defines domain-specific exceptions for better error handling
and debugging throughout the application. Insufficient-player outcomes are
reported as data (an invalid plan or an empty build), not as exceptions.
"""


class ClubAppError(Exception):
    """Base exception for all application errors."""

    pass


class DatabaseError(ClubAppError):
    """Raised when a database operation fails."""

    pass


class GenerationError(ClubAppError):
    """Raised when a generation run is configured inconsistently."""

    pass


class ValidationError(ClubAppError):
    """Raised when input validation fails."""

    pass
