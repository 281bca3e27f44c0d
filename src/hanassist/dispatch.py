"""Deferred diagnostic dispatch.

Missing-key lookups must stay cheap: scanning every known key for a similar
one is pushed onto a work queue and run by a background worker instead of on
the lookup path. Scheduling never blocks, tasks are fire-and-forget, and there
is no ordering guarantee relative to other deferred work.

Python 3.13+.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

__all__ = [
    "DiagnosticDispatcher",
    "get_dispatcher",
]

logger = logging.getLogger(__name__)

type Task = tuple[Callable[..., object], tuple[object, ...]]


class DiagnosticDispatcher:
    """Background worker draining a queue of diagnostic tasks.

    The worker thread is a daemon started lazily on the first schedule()
    call, so idle dispatchers cost nothing and never keep the interpreter
    alive. A task that raises is logged and does not stop the worker.

    Example:
        >>> dispatcher = DiagnosticDispatcher()
        >>> dispatcher.schedule(print, "deferred")
        >>> dispatcher.join()
        deferred
    """

    __slots__ = ("_closed", "_lock", "_name", "_queue", "_worker")

    def __init__(self, name: str = "hanassist-diagnostics") -> None:
        self._name = name
        self._queue: queue.Queue[Task | None] = queue.Queue()
        self._lock = threading.Lock()
        self._worker: threading.Thread | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self, func: Callable[..., object], *args: object) -> None:
        """Queue func(*args) to run on the worker thread.

        Raises:
            RuntimeError: If the dispatcher has been closed
        """
        with self._lock:
            if self._closed:
                msg = f"Dispatcher '{self._name}' is closed"
                raise RuntimeError(msg)
            self._ensure_worker()
            self._queue.put((func, args))

    def join(self) -> None:
        """Block until every task scheduled so far has run."""
        self._queue.join()

    def close(self) -> None:
        """Run remaining tasks, then stop the worker. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            worker = self._worker
            if worker is not None:
                self._queue.put(None)
        if worker is not None:
            worker.join()
            logger.debug("Dispatcher '%s' stopped", self._name)

    def _ensure_worker(self) -> None:
        if self._worker is None:
            self._worker = threading.Thread(target=self._run, name=self._name, daemon=True)
            self._worker.start()
            logger.debug("Dispatcher '%s' started", self._name)

    def _run(self) -> None:
        while True:
            task = self._queue.get()
            try:
                if task is None:
                    return
                func, args = task
                try:
                    func(*args)
                except Exception:
                    logger.exception("Deferred diagnostic %r failed", func)
            finally:
                self._queue.task_done()


_dispatcher: DiagnosticDispatcher | None = None
_dispatcher_lock = threading.Lock()


def get_dispatcher() -> DiagnosticDispatcher:
    """Return the process-wide dispatcher, replacing it if it was closed."""
    global _dispatcher  # noqa: PLW0603 - process-wide singleton
    with _dispatcher_lock:
        if _dispatcher is None or _dispatcher.closed:
            _dispatcher = DiagnosticDispatcher()
        return _dispatcher
