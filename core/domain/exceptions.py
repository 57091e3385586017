"""
Handler error types.

Service implementations raise these (or their own types) from their hooks.
Handlers never translate errors; whatever an implementation raises reaches
the caller unchanged, so transport layers can map these classes to
responses.
"""
from typing import Any, Dict, Optional


class HandlerError(Exception):
    """Base class for errors raised through resource handlers."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for serialization.

        Returns:
            Dictionary with error type, message and details
        """
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ResourceNotFoundError(HandlerError):
    """Requested resource does not exist."""

    def __init__(self, resource: str, resource_id: Optional[Any] = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} {resource_id} not found"
        super().__init__(message, {"resource": resource, "resource_id": resource_id})
        self.resource = resource
        self.resource_id = resource_id


class AuthorizationError(HandlerError):
    """Caller is not allowed to perform the operation."""


class ProcessingError(HandlerError):
    """Input data or filters were rejected while being processed."""
