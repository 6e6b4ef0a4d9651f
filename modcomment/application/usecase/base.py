"""Base use case."""

import asyncio
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, ClassVar, Iterator

import logfire

from modcomment.domain.error import NotFoundError, StorageError, ValidationError


class BaseUseCase(ABC):
    """Base use case for one RPC operation.

    Subclasses wrap their pipeline in ``observe`` so that every invocation
    produces exactly one outcome record.
    """

    operation: ClassVar[str]

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass

    @contextmanager
    def observe(self, **fields: Any) -> Iterator[dict[str, Any]]:
        """Trace an invocation and log its outcome.

        Yields a dict the caller can fill with identifiers only known after
        the store call (e.g. a generated id). Errors are logged and re-raised.

        Args:
            **fields: Request identifiers to attach to the span and record
        """
        result_fields: dict[str, Any] = {}

        with logfire.span(self.operation, operation=self.operation, **fields):
            try:
                yield result_fields
            except ValidationError as e:
                logfire.warn(
                    "{operation} rejected",
                    operation=self.operation,
                    outcome="invalid_argument",
                    field=e.field,
                    rule=e.rule,
                    **fields,
                )
                raise
            except NotFoundError as e:
                logfire.warn(
                    "{operation} target missing",
                    operation=self.operation,
                    outcome="not_found",
                    error=str(e),
                    **fields,
                )
                raise
            except StorageError as e:
                logfire.error(
                    "{operation} failed",
                    operation=self.operation,
                    outcome="internal",
                    error=str(e),
                    **fields,
                )
                raise
            except asyncio.CancelledError:
                logfire.warn(
                    "{operation} cancelled",
                    operation=self.operation,
                    outcome="cancelled",
                    **fields,
                )
                raise
            except Exception as e:
                logfire.error(
                    "{operation} failed unexpectedly",
                    operation=self.operation,
                    outcome="internal",
                    error=str(e),
                    error_type=type(e).__name__,
                    **fields,
                )
                raise

            logfire.info(
                "{operation} succeeded",
                operation=self.operation,
                outcome="ok",
                **{**fields, **result_fields},
            )
