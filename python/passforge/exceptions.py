"""
Custom exceptions for Passforge.
"""


class PassforgeException(Exception):
    """Base exception for Passforge."""

    pass


class ConfigurationError(PassforgeException):
    """Generator configuration leaves no characters to choose from."""

    pass


class ExportError(PassforgeException):
    """Export file could not be written."""

    pass
