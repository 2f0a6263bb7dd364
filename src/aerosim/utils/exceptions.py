"""Custom exceptions for aerodynamic load computations."""


class AeroSimError(Exception):
    """Base exception for aerodynamic model errors."""


class ConfigurationError(AeroSimError):
    """Raised when a parameter set or sweep configuration is invalid."""


class ExportError(AeroSimError):
    """Raised when result data cannot be serialized."""
