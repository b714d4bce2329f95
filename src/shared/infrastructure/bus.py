"""In-memory dispatcher implementation."""

from __future__ import annotations

from typing import Any, Dict, Type

import structlog

from shared.domain.bus import HandlerFactory, IDispatcher
from shared.domain.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


class InMemoryDispatcher(IDispatcher):
    """Static ``request type -> handler factory`` routing table.

    A factory is called once per dispatch so every request gets its own
    handler (and therefore its own repository).
    """

    def __init__(self) -> None:
        self._factories: Dict[Type[Any], HandlerFactory] = {}

    def register(self, request_type: Type[Any], factory: HandlerFactory) -> None:
        if request_type in self._factories:
            raise ConfigurationError(
                f"A handler is already registered for {request_type.__name__}."
            )
        self._factories[request_type] = factory
        logger.debug("dispatcher.handler_registered", request=request_type.__name__)

    def is_registered(self, request_type: Type[Any]) -> bool:
        return request_type in self._factories

    async def send(self, request: Any) -> Any:
        factory = self._factories.get(type(request))
        if factory is None:
            raise ConfigurationError(
                f"No handler registered for {type(request).__name__}."
            )
        handler = factory()
        return await handler.handle(request)


# Global dispatcher instance (singleton), populated in AppConfig.ready()

dispatcher = InMemoryDispatcher()
