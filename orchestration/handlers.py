"""Resource handlers - operation pipelines and the handler factory."""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from core.application.interfaces import ServiceImplementation
from core.domain.enums.operation import Operation
from core.infrastructure.logging import get_logger
from core.settings import PipelineSettings, get_app_settings

from .models import (
    CreateContext,
    DeleteContext,
    DetailContext,
    ListContext,
    UpdateContext,
    preserve_bare_data,
)
from .options import bootstrap_options
from .utils import call_step

T = TypeVar("T")
C = TypeVar("C")

Options = Mapping[str, Any] | None

# Handler signatures returned by the factories
DetailHandler = Callable[[int, C], Awaitable[T]]
CreateHandler = Callable[[Any, C], Awaitable[T]]
UpdateHandler = Callable[[int, Any, C], Awaitable[T]]
DeleteHandler = Callable[[int, C], Awaitable[T]]
ListHandler = Callable[[Any, C], Awaitable[Sequence[T]]]


class ResourcePipelines(Generic[T, C]):
    """Fixed step sequences for the five resource operations.

    Every step is awaited before the next one starts. Nothing is shared
    between calls except the implementation itself; each call builds its
    own options and context.
    """

    def __init__(
        self,
        implementation: ServiceImplementation[T, C],
        settings: PipelineSettings | None = None,
    ) -> None:
        """Initialize pipelines.

        Args:
            implementation: Service implementation supplying domain behavior
            settings: Pipeline settings (defaults to application settings)
        """
        self._implementation = implementation
        self._settings = settings or get_app_settings().pipeline
        self._logger = get_logger("orchestration.handlers")

    @property
    def implementation(self) -> ServiceImplementation[T, C]:
        return self._implementation

    async def safe_detail(self, id: int, context: C, options: dict[str, Any]) -> T:
        """Fetch an entity, raising the implementation's not-found error if absent.

        Args:
            id: Entity identifier
            context: Caller context
            options: Resolved options

        Returns:
            Fetched entity
        """
        impl = self._implementation
        lookup: DetailContext[T, C] = DetailContext(
            id=id, context=context, options=options, write=False, safe=True
        )
        entity = await call_step(impl.detail, lookup)
        if entity is None:
            self._logger.info(f"{impl.resource_name} {id} not found")
            raise await call_step(impl.create_not_found_error)
        return entity

    async def detail(self, id: int, context: C, options: Options = None) -> T:
        impl = self._implementation
        self._trace(Operation.DETAIL, "options")
        options = await bootstrap_options(impl, Operation.DETAIL, options, context)
        self._trace(Operation.DETAIL, "fetch")
        entity = await self.safe_detail(id, context, options)
        ctx: DetailContext[T, C] = DetailContext(
            id=id, context=context, entity=entity, options=options
        )
        self._trace(Operation.DETAIL, "authorize")
        await call_step(impl.authorize, ctx)
        # authorize may have replaced the entity
        result = ctx.entity
        self._trace(Operation.DETAIL, "postprocess")
        return await call_step(impl.postprocess_data, result, ctx)

    async def create(self, data: Any, context: C, options: Options = None) -> T:
        impl = self._implementation
        self._trace(Operation.CREATE, "options")
        options = await bootstrap_options(impl, Operation.CREATE, options, context)
        ctx: CreateContext[T, C] = CreateContext(
            data=data,
            bare_data=preserve_bare_data(data),
            context=context,
            options=options,
        )
        self._trace(Operation.CREATE, "process")
        ctx.data = await call_step(impl.process_data, ctx.data, ctx)
        self._trace(Operation.CREATE, "authorize")
        await call_step(impl.authorize, ctx)
        self._trace(Operation.CREATE, "execute")
        result = await call_step(impl.create, ctx)
        self._trace(Operation.CREATE, "postprocess")
        return await call_step(impl.postprocess_data, result, ctx)

    async def update(self, id: int, data: Any, context: C, options: Options = None) -> T:
        impl = self._implementation
        self._trace(Operation.UPDATE, "options")
        options = await bootstrap_options(impl, Operation.UPDATE, options, context)
        self._trace(Operation.UPDATE, "fetch")
        entity = await self.safe_detail(id, context, options)
        ctx: UpdateContext[T, C] = UpdateContext(
            id=id,
            entity=entity,
            data=data,
            bare_data=preserve_bare_data(data),
            context=context,
            options=options,
        )
        self._trace(Operation.UPDATE, "process")
        ctx.data = await call_step(impl.process_data, ctx.data, ctx)
        self._trace(Operation.UPDATE, "authorize")
        await call_step(impl.authorize, ctx)
        self._trace(Operation.UPDATE, "execute")
        result = await call_step(impl.update, ctx)
        self._trace(Operation.UPDATE, "postprocess")
        return await call_step(impl.postprocess_data, result, ctx)

    async def delete(self, id: int, context: C, options: Options = None) -> Any:
        impl = self._implementation
        self._trace(Operation.DELETE, "options")
        options = await bootstrap_options(impl, Operation.DELETE, options, context)
        self._trace(Operation.DELETE, "fetch")
        entity = await self.safe_detail(id, context, options)
        ctx: DeleteContext[T, C] = DeleteContext(
            id=id, entity=entity, context=context, options=options
        )
        self._trace(Operation.DELETE, "authorize")
        await call_step(impl.authorize, ctx)
        self._trace(Operation.DELETE, "execute")
        result = await call_step(impl.delete, ctx)
        self._trace(Operation.DELETE, "postprocess")
        return await call_step(impl.postprocess_data, result, ctx)

    async def list(self, filters: Any, context: C, options: Options = None) -> Sequence[T]:
        impl = self._implementation
        self._trace(Operation.LIST, "options")
        options = await bootstrap_options(impl, Operation.LIST, options, context)
        ctx: ListContext[T, C] = ListContext(filters=filters, context=context, options=options)
        self._trace(Operation.LIST, "process")
        ctx.filters = await call_step(impl.process_data, ctx.filters, ctx)
        self._trace(Operation.LIST, "authorize")
        await call_step(impl.authorize, ctx)
        self._trace(Operation.LIST, "execute")
        result = await call_step(impl.list, ctx)
        self._trace(Operation.LIST, "postprocess")
        return await call_step(impl.postprocess_data, result, ctx)

    def _trace(self, operation: Operation, step: str) -> None:
        if self._settings.trace_steps:
            self._logger.debug(
                f"{self._implementation.resource_name}.{operation.value}: {step}"
            )


@dataclass(frozen=True)
class HandlerCreators(Generic[T, C]):
    """Handler factories for one resource type."""

    detail_handler: Callable[[Options], DetailHandler]
    create_handler: Callable[[Options], CreateHandler]
    update_handler: Callable[[Options], UpdateHandler]
    delete_handler: Callable[[Options], DeleteHandler]
    list_handler: Callable[[Options], ListHandler]


def create_handlers(
    implementation: ServiceImplementation[T, C],
    settings: PipelineSettings | None = None,
) -> HandlerCreators[T, C]:
    """Create handler factories backed by a service implementation.

    Each factory takes optional handler-level options, fixed when the
    handler is created and merged into every call.

    Args:
        implementation: Service implementation supplying domain behavior
        settings: Optional pipeline settings

    Returns:
        HandlerCreators with the five factories
    """
    pipelines: ResourcePipelines[T, C] = ResourcePipelines(implementation, settings)

    def detail_handler(options: Options = None) -> DetailHandler:
        handler_options = dict(options or {})

        async def handle(id: int, context: C) -> T:
            return await pipelines.detail(id, context, handler_options)

        return handle

    def create_handler(options: Options = None) -> CreateHandler:
        handler_options = dict(options or {})

        async def handle(data: Any, context: C) -> T:
            return await pipelines.create(data, context, handler_options)

        return handle

    def update_handler(options: Options = None) -> UpdateHandler:
        handler_options = dict(options or {})

        async def handle(id: int, data: Any, context: C) -> T:
            return await pipelines.update(id, data, context, handler_options)

        return handle

    def delete_handler(options: Options = None) -> DeleteHandler:
        handler_options = dict(options or {})

        async def handle(id: int, context: C) -> Any:
            return await pipelines.delete(id, context, handler_options)

        return handle

    def list_handler(options: Options = None) -> ListHandler:
        handler_options = dict(options or {})

        async def handle(filters: Any, context: C) -> Sequence[T]:
            return await pipelines.list(filters, context, handler_options)

        return handle

    return HandlerCreators(
        detail_handler=detail_handler,
        create_handler=create_handler,
        update_handler=update_handler,
        delete_handler=delete_handler,
        list_handler=list_handler,
    )
