"""Application layer interfaces."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Awaitable, Dict, Generic, Sequence, TypeVar, Union

from core.domain.enums.operation import Operation
from core.domain.exceptions import ResourceNotFoundError

if TYPE_CHECKING:
    from orchestration.models import (
        CreateContext,
        CrudContext,
        DeleteContext,
        DetailContext,
        ListContext,
        UpdateContext,
    )

T = TypeVar("T")
C = TypeVar("C")
R = TypeVar("R")

# Every hook may be a plain method or a coroutine method
MaybeAwaitable = Union[R, Awaitable[R]]


class ServiceImplementation(ABC, Generic[T, C]):
    """
    Interface for the domain behavior behind a set of resource handlers.

    This interface defines the contract the handler pipelines call into,
    allowing one pipeline implementation to serve any resource type
    without knowing how it is fetched, stored or authorized.

    Type parameters:
        T: Entity type returned by the service
        C: Caller context type supplied with every handler call

    Each method may be synchronous or ``async``; handlers await whatever
    comes back.
    """

    resource_name: str = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not getattr(cls, "resource_name", ""):
            cls.resource_name = cls.__name__

    @abstractmethod
    def detail(self, context: DetailContext[T, C]) -> MaybeAwaitable[T | None]:
        """
        Look up a single entity.

        Args:
            context: Detail context; ``context.safe`` and ``context.write``
                tell the lookup why it is being called

        Returns:
            The entity, or None when it does not exist
        """
        pass

    @abstractmethod
    def create(self, context: CreateContext[T, C]) -> MaybeAwaitable[T]:
        """
        Create an entity from ``context.data``.

        Args:
            context: Create context with processed data

        Returns:
            Created entity
        """
        pass

    @abstractmethod
    def update(self, context: UpdateContext[T, C]) -> MaybeAwaitable[T]:
        """
        Apply ``context.data`` to ``context.entity``.

        Args:
            context: Update context with the fetched entity and processed data

        Returns:
            Updated entity
        """
        pass

    @abstractmethod
    def delete(self, context: DeleteContext[T, C]) -> MaybeAwaitable[Any]:
        """
        Delete ``context.entity``.

        Args:
            context: Delete context with the fetched entity

        Returns:
            Whatever the service reports for a deletion
        """
        pass

    @abstractmethod
    def list(self, context: ListContext[T, C]) -> MaybeAwaitable[Sequence[T]]:
        """
        List entities matching ``context.filters``.

        Args:
            context: List context with processed filters

        Returns:
            Sequence of entities
        """
        pass

    def get_options(self, operation: Operation) -> MaybeAwaitable[Dict[str, Any]]:
        """
        Compute dynamic default options for an operation.

        Args:
            operation: Operation kind being handled

        Returns:
            Options mapping (lowest precedence)
        """
        return {}

    def create_not_found_error(self) -> Exception:
        """Build the error raised when a lookup finds nothing."""
        return ResourceNotFoundError(self.resource_name)

    def authorize(self, context: CrudContext[C]) -> MaybeAwaitable[None]:
        """
        Authorize the operation described by ``context``.

        Raise to reject. May replace ``context.entity`` (e.g. to redact
        fields); detail handlers return the entity left on the context.
        """
        return None

    def process_data(self, data: Any, context: CrudContext[C]) -> MaybeAwaitable[Any]:
        """
        Validate or normalize create/update data or list filters.

        Args:
            data: Data (create, update) or filters (list)
            context: Context of the running operation

        Returns:
            Value that replaces ``context.data`` or ``context.filters``
        """
        return data

    def postprocess_data(self, result: Any, context: CrudContext[C]) -> Any:
        """
        Shape the operation result before it is returned to the caller.

        ``result`` is the awaited return value of the operation method.

        Args:
            result: Entity or sequence of entities
            context: Context of the running operation

        Returns:
            Value returned by the handler (awaited if it is awaitable)
        """
        return result


__all__ = ["MaybeAwaitable", "ServiceImplementation"]
