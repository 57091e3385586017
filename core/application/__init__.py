"""Application layer - the service implementation contract."""

from .interfaces import MaybeAwaitable, ServiceImplementation

__all__ = ["MaybeAwaitable", "ServiceImplementation"]
