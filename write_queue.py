"""Background persistence with one writer per list."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

logger = logging.getLogger(__name__)


class WriteQueue:
    """Runs persistence jobs on a thread pool, serialized per key.

    Each key has at most one running job and one pending slot. Submitting
    while a job for the key is running replaces whatever is pending, so only
    the newest state is written once the running job finishes.
    """

    def __init__(self, max_workers: int = 2):
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="list-writer"
        )
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._running: set[str] = set()
        self._pending: dict[str, Callable[[], None]] = {}
        self._closed = False

    def submit(self, key: str, job: Callable[[], None]) -> None:
        with self._lock:
            if self._closed:
                raise RuntimeError("WriteQueue is closed")
            if key in self._running:
                if key in self._pending:
                    logger.debug("Superseding queued write for %r", key)
                self._pending[key] = job
                return
            self._running.add(key)
        self._executor.submit(self._run, key, job)

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no job is running. Returns False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: not self._running, timeout)

    def close(self) -> None:
        with self._lock:
            self._closed = True
        self.wait_idle()
        self._executor.shutdown(wait=True)

    def _run(self, key: str, job: Callable[[], None]) -> None:
        while True:
            try:
                job()
            except Exception:
                logger.exception("Write for %r failed", key)
            with self._lock:
                job = self._pending.pop(key, None)
                if job is None:
                    self._running.discard(key)
                    if not self._running:
                        self._idle.notify_all()
                    return
