"""Orchestration models - execution contexts for each resource operation."""

import copy
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from core.domain.enums.operation import Operation

T = TypeVar("T")
C = TypeVar("C")


@dataclass(kw_only=True)
class CrudContext(Generic[C]):
    """
    Per-call state threaded through a handler pipeline.

    One instance is built for each handler invocation and is never shared
    between calls. The operation kind is fixed by the context class.
    """

    operation: ClassVar[Operation]

    context: C
    options: dict[str, Any] = field(default_factory=dict)
    write: bool = False
    safe: bool = False

    @property
    def type(self) -> Operation:
        """Operation kind this context was built for."""
        return self.__class__.operation


@dataclass(kw_only=True)
class DetailContext(CrudContext[C], Generic[T, C]):
    """Context for fetching a single entity."""

    operation: ClassVar[Operation] = Operation.DETAIL

    id: int
    # None only while the safe fetch is looking the entity up
    entity: T | None = None


@dataclass(kw_only=True)
class CreateContext(CrudContext[C], Generic[T, C]):
    """Context for creating an entity."""

    operation: ClassVar[Operation] = Operation.CREATE

    data: Any
    bare_data: Any = None
    write: bool = True


@dataclass(kw_only=True)
class UpdateContext(CrudContext[C], Generic[T, C]):
    """Context for updating an existing entity."""

    operation: ClassVar[Operation] = Operation.UPDATE

    id: int
    entity: T
    data: Any
    bare_data: Any = None
    write: bool = True


@dataclass(kw_only=True)
class DeleteContext(CrudContext[C], Generic[T, C]):
    """Context for deleting an existing entity."""

    operation: ClassVar[Operation] = Operation.DELETE

    id: int
    entity: T
    write: bool = True


@dataclass(kw_only=True)
class ListContext(CrudContext[C], Generic[T, C]):
    """Context for listing entities."""

    operation: ClassVar[Operation] = Operation.LIST

    filters: Any = None


def preserve_bare_data(data: Any) -> Any:
    """Copy caller data so later processing cannot alter the original."""
    return copy.deepcopy(data)
