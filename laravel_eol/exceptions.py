"""Custom exceptions for laravel-eol."""


class LaravelEolError(Exception):
    """Base exception for all laravel-eol operations."""


class ConfigurationError(LaravelEolError):
    """Raised when configuration from the environment is invalid."""


class SetupError(LaravelEolError):
    """Raised when a precondition for the report fails.

    Setup errors abort the run before anything is printed to stdout.
    """


class FileProcessingError(SetupError):
    """Raised when composer.lock is missing or cannot be read."""


class VersionParseError(SetupError):
    """Raised when the installed Laravel version has no numeric major component."""


class APIError(SetupError):
    """Raised when the endoflife.date feed cannot be fetched or decoded."""
