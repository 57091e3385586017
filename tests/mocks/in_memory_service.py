"""
In-memory service implementation.

Stores items in a dictionary and records every hook call, so tests can
check which steps ran, in which order, and with which arguments.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from core.application.interfaces import ServiceImplementation
from core.domain.enums.operation import Operation


logger = logging.getLogger(__name__)

Item = Dict[str, Any]


class InMemoryService(ServiceImplementation[Item, Any]):
    """
    Synchronous in-memory implementation.

    Every hook appends ``(name, args)`` to ``calls``.
    """

    resource_name = "Item"

    def __init__(self, items: Optional[List[Item]] = None, options: Optional[Dict[str, Any]] = None):
        self._storage: Dict[int, Item] = {item["id"]: dict(item) for item in items or []}
        self._next_id = max(self._storage, default=0) + 1
        self.dynamic_options: Dict[str, Any] = dict(options or {})
        self.calls: List[Tuple[str, tuple]] = []
        self.fetched: List[Item] = []

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def args_of(self, name: str) -> List[tuple]:
        return [args for call_name, args in self.calls if call_name == name]

    def get_options(self, operation: Operation) -> Dict[str, Any]:
        self.calls.append(("get_options", (operation,)))
        return dict(self.dynamic_options)

    def detail(self, context) -> Optional[Item]:
        self.calls.append(("detail", (context,)))
        item = self._storage.get(context.id)
        if item is None:
            logger.info(f"Item {context.id} not found in memory")
            return None
        entity = dict(item)
        self.fetched.append(entity)
        return entity

    def create(self, context) -> Item:
        self.calls.append(("create", (context,)))
        item = {**context.data, "id": self._next_id}
        self._next_id += 1
        self._storage[item["id"]] = item
        return dict(item)

    def update(self, context) -> Item:
        self.calls.append(("update", (context,)))
        item = {**context.entity, **context.data, "id": context.entity["id"]}
        self._storage[item["id"]] = item
        return dict(item)

    def delete(self, context) -> Item:
        self.calls.append(("delete", (context,)))
        return self._storage.pop(context.entity["id"])

    def list(self, context) -> List[Item]:
        self.calls.append(("list", (context,)))
        filters = context.filters or {}
        return [
            dict(item)
            for _, item in sorted(self._storage.items())
            if all(item.get(key) == value for key, value in filters.items())
        ]

    def authorize(self, context) -> None:
        self.calls.append(("authorize", (context,)))

    def process_data(self, data, context):
        self.calls.append(("process_data", (data, context)))
        return data

    def postprocess_data(self, result, context):
        self.calls.append(("postprocess_data", (result, context)))
        return result


class AsyncInMemoryService(InMemoryService):
    """Same behavior as InMemoryService with every hook as a coroutine."""

    async def get_options(self, operation: Operation) -> Dict[str, Any]:
        return super().get_options(operation)

    async def detail(self, context) -> Optional[Item]:
        return super().detail(context)

    async def create(self, context) -> Item:
        return super().create(context)

    async def update(self, context) -> Item:
        return super().update(context)

    async def delete(self, context) -> Item:
        return super().delete(context)

    async def list(self, context) -> List[Item]:
        return super().list(context)

    async def authorize(self, context) -> None:
        return super().authorize(context)

    async def process_data(self, data, context):
        return super().process_data(data, context)

    async def postprocess_data(self, result, context):
        return super().postprocess_data(result, context)
