"""
Storage boundary helpers shared by the catalog and the project store.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shotify.errors import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreService:
    """Base for services bound to one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db


def storage_operation(action: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Wrap a service coroutine so storage failures surface as StorageError.

    The session is rolled back before the error propagates, so a failed
    mutation never leaves part of its changes pending. No retries.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(self: StoreService, *args: Any, **kwargs: Any) -> T:
            try:
                return await func(self, *args, **kwargs)
            except SQLAlchemyError as exc:
                logger.error(f"Storage failure during '{action}': {exc}")
                await self.db.rollback()
                raise StorageError(f"Failed to {action}") from exc

        return wrapper

    return decorator
