"""Orchestration layer - handler pipelines for resource operations."""

from .handlers import (
    CreateHandler,
    DeleteHandler,
    DetailHandler,
    HandlerCreators,
    ListHandler,
    ResourcePipelines,
    UpdateHandler,
    create_handlers,
)
from .models import (
    CreateContext,
    CrudContext,
    DeleteContext,
    DetailContext,
    ListContext,
    UpdateContext,
)
from .options import bootstrap_options, context_fields
from .utils import call_step, resolve_value

__all__ = [
    "CreateContext",
    "CreateHandler",
    "CrudContext",
    "DeleteContext",
    "DeleteHandler",
    "DetailContext",
    "DetailHandler",
    "HandlerCreators",
    "ListContext",
    "ListHandler",
    "ResourcePipelines",
    "UpdateContext",
    "UpdateHandler",
    "bootstrap_options",
    "call_step",
    "context_fields",
    "create_handlers",
    "resolve_value",
]
