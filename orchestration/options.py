"""Option resolution - merges dynamic, handler-level and caller-context options."""

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from core.application.interfaces import ServiceImplementation
from core.domain.enums.operation import Operation

from .utils import call_step


def context_fields(context: object) -> dict[str, Any]:
    """Return the fields of a caller context as a plain dict.

    Mappings contribute their items, pydantic models and dataclasses their
    fields, other objects their public instance attributes. ``None``
    contributes nothing.

    Args:
        context: Caller context supplied with a handler call

    Returns:
        Field name to value mapping
    """
    if context is None:
        return {}
    if isinstance(context, Mapping):
        return dict(context)
    if isinstance(context, BaseModel):
        return {name: getattr(context, name) for name in type(context).model_fields}
    if dataclasses.is_dataclass(context) and not isinstance(context, type):
        return {f.name: getattr(context, f.name) for f in dataclasses.fields(context)}
    if hasattr(context, "__dict__"):
        return {k: v for k, v in vars(context).items() if not k.startswith("_")}
    return {}


async def bootstrap_options(
    implementation: ServiceImplementation[Any, Any],
    operation: Operation,
    options: Mapping[str, Any] | None = None,
    context: object = None,
) -> dict[str, Any]:
    """Resolve the options seen by one handler call.

    Precedence, lowest to highest: the implementation's dynamic options for
    ``operation``, the handler-level ``options``, the caller ``context``
    fields. Resolved again on every call.

    Args:
        implementation: Service implementation providing dynamic options
        operation: Operation kind being handled
        options: Options fixed when the handler was created
        context: Caller context

    Returns:
        New merged options dict
    """
    dynamic_options = await call_step(implementation.get_options, operation)
    return {
        **(dynamic_options or {}),
        **(options or {}),
        **context_fields(context),
    }
