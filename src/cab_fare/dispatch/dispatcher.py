"""Caller side of the dispatch channel — request/reply correlation.

Each call goes ``created → sent → resolved | rejected``:

  1. ``compute`` mints a call id, registers a future under it and posts
     ``{"id", "args"}`` on the channel (opened lazily on first use).
  2. The worker answers ``{"id", "result"}`` or ``{"id", "error"}``.
  3. ``_route_reply`` runs on the event loop, pops the future for that id
     and settles it.  Replies for ids not in the pending map are ignored.

Replies may arrive in any order.  There are no timeouts and no
cancellation: a reply that never arrives leaves its future pending and
its entry in the pending map.

If the channel cannot be built or refuses a post, the dispatcher drops it
and is dead for good: pending and later calls all fail with
``WorkerUnavailable``.  ``close`` refuses new calls at once without
waiting for the worker; ``aclose`` (and ``async with``) also waits for it
on a helper thread so the event loop keeps running.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from functools import partial
from typing import Any

from pydantic import ValidationError

from cab_fare.config.settings import Settings
from cab_fare.config.tariff import DEFAULT_LIMITS, TripLimits
from cab_fare.dispatch.channel import Channel, ChannelFactory, Envelope, ReplyCallback, ThreadWorkerChannel
from cab_fare.errors import FareComputationError, FareEngineError, InvalidServiceType, WorkerUnavailable
from cab_fare.models.results import FareResult
from cab_fare.models.trip import FareRequest

logger = logging.getLogger(__name__)


class FareDispatcher:
    """Runs fare computations off the caller's thread.

    Construct one per application and hand it to whoever needs fares.  All
    methods must be called from the same running event loop.
    """

    def __init__(
        self,
        channel_factory: ChannelFactory | None = None,
        limits: TripLimits = DEFAULT_LIMITS,
    ):
        self._channel_factory = channel_factory or partial(ThreadWorkerChannel, limits=limits)
        self._channel: Channel | None = None
        self._failure: str | None = None
        self._pending: dict[str, asyncio.Future[FareResult]] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "FareDispatcher":
        return cls(limits=settings.trip_limits)

    async def __aenter__(self) -> "FareDispatcher":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def pending_count(self) -> int:
        """Calls sent but not yet answered."""
        return len(self._pending)

    @property
    def is_available(self) -> bool:
        return self._failure is None

    def compute(self, request: FareRequest) -> asyncio.Future[FareResult]:
        """Send ``request`` to the worker; the returned future holds its ``FareResult``."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future[FareResult] = loop.create_future()

        try:
            channel = self._open_channel(loop)
        except WorkerUnavailable as exc:
            future.set_exception(exc)
            return future

        call_id = uuid.uuid4().hex
        self._pending[call_id] = future

        try:
            channel.post({"id": call_id, "args": request.to_args()})
        except Exception as exc:
            self._mark_failed(exc)
        return future

    def close(self) -> None:
        """Refuse new calls and tell the worker to stop.

        Does not wait for the worker; calls still pending stay pending.
        """
        if self._failure is None:
            self._failure = "fare dispatcher is closed"
        self._drop_channel()

    async def aclose(self) -> None:
        """``close`` and wait, off the event loop, for the worker to exit."""
        channel = self._channel
        self.close()
        if channel is not None:
            await asyncio.to_thread(channel.join)

    # ── Internals ─────────────────────────────────────────────────────

    def _open_channel(self, loop: asyncio.AbstractEventLoop) -> Channel:
        if self._failure is not None:
            raise WorkerUnavailable(self._failure)
        if self._channel is None:
            try:
                self._channel = self._channel_factory(self._reply_callback(loop))
            except Exception as exc:
                self._mark_failed(exc)
                raise WorkerUnavailable(self._failure) from exc
        return self._channel

    def _reply_callback(self, loop: asyncio.AbstractEventLoop) -> ReplyCallback:
        def deliver(reply: Envelope) -> None:
            try:
                loop.call_soon_threadsafe(self._route_reply, reply)
            except RuntimeError:
                logger.warning("Event loop closed, dropping reply for call %s", reply.get("id"))

        return deliver

    def _route_reply(self, reply: Envelope) -> None:
        call_id = reply.get("id")
        future = self._pending.pop(call_id, None)
        if future is None:
            logger.debug("Ignoring reply for unknown call %r", call_id)
            return
        if future.done():
            return

        if reply.get("error") is not None:
            future.set_exception(_rebuild_error(reply))
            return
        try:
            future.set_result(FareResult.model_validate(reply.get("result")))
        except ValidationError as exc:
            future.set_exception(FareComputationError(f"Malformed reply for call {call_id}: {exc}"))

    def _mark_failed(self, cause: BaseException) -> None:
        logger.error("Fare worker unavailable: %s", cause)
        self._failure = f"fare worker unavailable: {cause}"
        self._drop_channel()
        pending, self._pending = self._pending, {}
        for future in pending.values():
            if not future.done():
                exc = WorkerUnavailable(self._failure)
                exc.__cause__ = cause
                future.set_exception(exc)

    def _drop_channel(self) -> None:
        channel, self._channel = self._channel, None
        if channel is None:
            return
        try:
            channel.close()
        except Exception:
            logger.warning("Error closing fare worker channel", exc_info=True)


def _rebuild_error(reply: Envelope) -> FareEngineError:
    message = str(reply.get("error"))
    if reply.get("error_type") == "InvalidServiceType":
        return InvalidServiceType(None, message)
    return FareComputationError(message)
