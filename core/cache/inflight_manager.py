from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, ClassVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.trans.interface import Result
    from models.translation_models import TranslationCacheKey


__all__: list[str] = ["InFlightManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class InFlightManager:
    """Coordinates concurrent requests for the same translation key.

    The first caller for a key becomes the producer and gets None from ``mark_inflight_start``;
    later callers wait on a shared future until the producer stores a result or an exception.

    Args:
        timeout_sec (float | None): How long a waiter waits for the producer.
            None uses INFLIGHT_TIMEOUT_SEC.

    Attributes:
        INFLIGHT_TIMEOUT_SEC (float): Default waiting time in seconds.
    """

    INFLIGHT_TIMEOUT_SEC: ClassVar[float] = 10.0

    def __init__(self, timeout_sec: float | None = None) -> None:
        self._timeout_sec: float | None = timeout_sec
        self._inflight: dict[TranslationCacheKey, asyncio.Future[Result]] = {}
        self._lock: asyncio.Lock = asyncio.Lock()
        self._is_initialized: bool = False

    @property
    def timeout_sec(self) -> float:
        return self._timeout_sec if self._timeout_sec is not None else self.INFLIGHT_TIMEOUT_SEC

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    def __len__(self) -> int:
        return len(self._inflight)

    async def start(self) -> None:
        self._is_initialized = True
        logger.info("InFlightManager initialized successfully")

    async def shutdown(self) -> None:
        """Cancel pending futures and stop coordinating."""
        self._is_initialized = False
        async with self._lock:
            for fut in self._inflight.values():
                if not fut.done():
                    fut.cancel()
            self._inflight.clear()
        logger.info("InFlightManager torn down and in-flight state cleared")

    async def mark_inflight_start(self, key: TranslationCacheKey) -> Result | None:
        """Register ``key`` as in flight, or wait for the request already in flight.

        Args:
            key (TranslationCacheKey): Key of the translation request.

        Returns:
            Result | None: The producer's result when a request was already in flight,
            or None when the caller has just become the producer.

        Raises:
            TimeoutError: If waiting times out or the shared future is cancelled.
            Exception: Whatever the producer stored with ``store_inflight_exception``.
        """
        if not self._is_initialized:
            return None

        async with self._lock:
            if key not in self._inflight:
                fut: asyncio.Future[Result] = asyncio.get_running_loop().create_future()
                self._inflight[key] = fut
                logger.debug("Marked in-flight start for key: %s", key)
                return None
            fut = self._inflight[key]
            logger.debug("In-flight translation detected for key: %s", key)

        try:
            # shield: a waiter's timeout must not cancel the producer's future
            result: Result = await asyncio.wait_for(asyncio.shield(fut), timeout=self.timeout_sec)
        except TimeoutError:
            logger.warning("In-flight translation timeout for key: %s", key)
            await self._discard(key, fut)
            msg: str = f"In-flight translation timed out for key: {key}"
            raise TimeoutError(msg) from None
        except asyncio.CancelledError:
            if not fut.cancelled():
                raise
            logger.warning("In-flight translation cancelled for key: %s", key)
            await self._discard(key, fut)
            msg = f"In-flight translation cancelled for key: {key}"
            raise TimeoutError(msg) from None

        logger.debug("Received in-flight translation result for key: %s", key)
        return result

    async def _discard(self, key: TranslationCacheKey, fut: asyncio.Future[Result]) -> None:
        async with self._lock:
            if self._inflight.get(key) is fut:
                self._inflight.pop(key, None)

    async def store_inflight_result(self, key: TranslationCacheKey, result: Result) -> None:
        """Complete the in-flight request for ``key`` with ``result``."""
        async with self._lock:
            fut: asyncio.Future[Result] | None = self._inflight.pop(key, None)
            if fut is not None and not fut.done():
                fut.set_result(result)
                logger.debug("Set in-flight translation result for key: %s", key)

    async def store_inflight_exception(self, key: TranslationCacheKey, exc: Exception) -> None:
        """Fail the in-flight request for ``key`` with ``exc``."""
        async with self._lock:
            fut: asyncio.Future[Result] | None = self._inflight.pop(key, None)
            if fut is not None and not fut.done():
                fut.set_exception(exc)
                # Mark retrieved so an unobserved failure is not reported at garbage collection.
                fut.exception()
                logger.debug("Set in-flight translation exception for key: %s", key)
