class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data handed to a loader is invalid."""


class ConfigurationError(DomainError):
    """Raised when settings or a holiday calendar file cannot be used."""
