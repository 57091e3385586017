"""Domain layer - operation kinds and error types."""

from .enums import Operation
from .exceptions import AuthorizationError, HandlerError, ProcessingError, ResourceNotFoundError

__all__ = [
    "AuthorizationError",
    "HandlerError",
    "Operation",
    "ProcessingError",
    "ResourceNotFoundError",
]
