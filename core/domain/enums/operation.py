"""
Operation Enum.

Tags for the five canonical resource operations.
"""
from enum import Enum


class Operation(str, Enum):
    """Resource operation kinds."""

    DETAIL = "detail"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"

    @property
    def is_write(self) -> bool:
        """True for operations that mutate the resource."""
        return self in (Operation.CREATE, Operation.UPDATE, Operation.DELETE)
