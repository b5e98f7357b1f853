"""Request dispatcher.

Routes a command or query object to the single handler registered for its
type in the CQRS registry. Commands have their declarative field rules
checked first; a violation short-circuits with ``RequestValidationError``
and the handler is never built.

Architecture:
    - Application layer (no HTTP concepts)
    - Handlers are constructed per dispatch with ``create_handler``, so
      repositories are bound to the request session
    - Dispatch is one-shot: no retries, no ordering guarantees between calls

Usage:
    dispatcher = Dispatcher(session)
    result = await dispatcher.dispatch(GetClubById(club_id=club_id))

Reference:
    - src/application/cqrs/registry.py
    - src/core/container/handler_factory.py
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.cqrs.computed_views import (
    get_command_metadata,
    get_query_metadata,
)
from src.core.container.handler_factory import create_handler
from src.core.result import Failure, Result
from src.core.validation import validate_fields
from src.domain.protocols.logger_protocol import LoggerProtocol


class HandlerNotFoundError(LookupError):
    """Raised when no handler is registered for a request type.

    This is a programming error (a route built a request the registry does
    not know), so it is raised rather than returned as a Failure.
    """

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type


class Dispatcher:
    """Dispatch commands and queries to their registered handlers.

    Args:
        session: Request-scoped database session for handler repositories.
        logger: Structured logger; defaults to the container logger.
    """

    def __init__(
        self,
        session: AsyncSession,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._session = session
        if logger is None:
            from src.core.container.infrastructure import get_logger

            logger = get_logger()
        self._logger = logger

    async def dispatch(self, request: Any) -> Result[Any, Any]:
        """Validate ``request``, build its handler and run it.

        Args:
            request: A registered command or query dataclass instance.

        Returns:
            The handler's Result, or Failure(RequestValidationError) when a
            field rule is violated.

        Raises:
            HandlerNotFoundError: If the request type is not registered.
        """
        request_name = type(request).__name__
        command_meta = get_command_metadata(type(request))

        if command_meta is not None:
            handler_class: type = command_meta.handler_class
            validation = validate_fields(request, command_meta.validation_rules)
            if isinstance(validation, Failure):
                self._logger.info(
                    "request_rejected",
                    request=request_name,
                    fields=sorted(validation.error.field_errors),
                )
                return validation
        else:
            query_meta = get_query_metadata(type(request))
            if query_meta is None:
                raise HandlerNotFoundError(type(request))
            handler_class = query_meta.handler_class

        handler = await create_handler(handler_class, self._session)

        self._logger.debug(
            "command_dispatched",
            request=request_name,
            handler=handler_class.__name__,
        )
        result = await handler.handle(request)

        if isinstance(result, Failure):
            self._logger.info(
                "handler_failed",
                request=request_name,
                error_code=result.error.code.value,
                error_message=result.error.message,
            )
        return result
