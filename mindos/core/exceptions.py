"""Custom exceptions for the MindOS application."""


class MindOSException(Exception):
    """Base exception for MindOS application."""

    pass


class ValidationError(MindOSException):
    """Raised when validation fails."""

    pass


class NotFoundError(MindOSException):
    """Raised when a resource is not found."""

    pass


class DatabaseError(MindOSException):
    """Raised when a database operation fails."""

    pass


class ServiceError(MindOSException):
    """Raised when a service operation fails."""

    pass


class ConfigurationError(MindOSException):
    """Raised when configuration is invalid."""

    pass


class ServiceUnavailableError(ServiceError):
    """Raised when AI capability is not configured."""

    pass


class EmbeddingGenerationError(ServiceError):
    """Raised when a mandatory embedding could not be produced."""

    pass


class ProviderError(ServiceError):
    """Raised when an external AI provider call fails."""

    pass
