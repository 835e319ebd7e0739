"""Channels carry request envelopes to a worker and replies back.

A channel is built by a factory that receives the reply callback; the
callback may be invoked from any thread.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable, Protocol

from cab_fare.config.tariff import DEFAULT_LIMITS, TripLimits
from cab_fare.dispatch.worker import handle_message

logger = logging.getLogger(__name__)

Envelope = dict[str, Any]
ReplyCallback = Callable[[Envelope], None]


class Channel(Protocol):
    def post(self, message: Envelope) -> None: ...

    def close(self) -> None: ...

    def join(self, timeout: float | None = None) -> None: ...


ChannelFactory = Callable[[ReplyCallback], Channel]

_STOP = object()


class ThreadWorkerChannel:
    """One daemon worker thread draining an inbox queue.

    Requests are processed one at a time in arrival order; callers must
    still match replies by id only.
    """

    def __init__(
        self,
        on_reply: ReplyCallback,
        limits: TripLimits = DEFAULT_LIMITS,
        name: str = "fare-worker",
    ):
        self._on_reply = on_reply
        self._limits = limits
        self._inbox: queue.Queue[Any] = queue.Queue()
        self._closed = False
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()
        logger.info("Started %s thread", name)

    def post(self, message: Envelope) -> None:
        if self._closed:
            raise RuntimeError("channel is closed")
        self._inbox.put(message)

    def close(self) -> None:
        """Stop accepting requests.  Queued requests are still answered."""
        if self._closed:
            return
        self._closed = True
        self._inbox.put(_STOP)

    def join(self, timeout: float | None = 5.0) -> None:
        """Block until the worker has drained its inbox and exited."""
        self._thread.join(timeout=timeout)

    def _run(self) -> None:
        while True:
            message = self._inbox.get()
            if message is _STOP:
                break
            self._on_reply(handle_message(message, self._limits))
