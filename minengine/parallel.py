"""A persistent worker pool running index loops in fixed-size chunks."""

from __future__ import annotations

import os
import threading
from collections import deque
from typing import Callable

WorkFunc = Callable[[int, int], None]


class ParallelForContext:
    """Worker threads that share the chunks of one loop at a time.

    ``parallel_for`` blocks until every index has been processed.
    """

    def __init__(self, workers: int | None = None) -> None:
        count = get_core_number() if workers is None else workers
        if count < 1:
            raise ValueError("a parallel context needs at least one worker")
        self._cond = threading.Condition()
        self._call_lock = threading.Lock()
        self._queue: deque[tuple[int, int]] = deque()
        self._active = 0
        self._shutdown = False
        self._func: WorkFunc | None = None
        self._error: BaseException | None = None
        self._threads = [
            threading.Thread(target=self._work, args=(thread_id,), daemon=True)
            for thread_id in range(count)
        ]
        for thread in self._threads:
            thread.start()

    @property
    def workers(self) -> int:
        """Number of worker threads."""
        return len(self._threads)

    def _work(self, thread_id: int) -> None:
        while True:
            with self._cond:
                while not self._shutdown and not self._queue:
                    self._cond.wait()
                if self._shutdown:
                    return
                low, high = self._queue.popleft()
                self._active += 1
                func = self._func
            error: BaseException | None = None
            try:
                for index in range(low, high):
                    func(index, thread_id)
            except BaseException as exc:  # reported to the caller of parallel_for
                error = exc
            with self._cond:
                self._active -= 1
                if error is not None and self._error is None:
                    self._error = error
                    self._queue.clear()
                self._cond.notify_all()

    def parallel_for(self, begin: int, end: int, func: WorkFunc, work_size: int = 1) -> None:
        """Call ``func(index, thread_id)`` for every index in ``[begin, end)``.

        Indices are handed out in chunks of ``work_size``. The first exception
        raised by ``func`` stops the remaining chunks and is re-raised here.
        """
        if work_size < 1:
            raise ValueError("work_size must be at least 1")
        with self._call_lock:
            with self._cond:
                if self._shutdown:
                    raise RuntimeError("parallel context is closed")
                if begin >= end:
                    return
                self._func = func
                self._error = None
                self._queue.extend(
                    (low, min(end, low + work_size)) for low in range(begin, end, work_size)
                )
                self._cond.notify_all()
                while (self._queue or self._active) and not self._shutdown:
                    self._cond.wait()
                unfinished = bool(self._queue)
                self._queue.clear()
                error, self._error = self._error, None
                self._func = None
            if error is not None:
                raise error
            if unfinished:
                raise RuntimeError("parallel context closed before the loop finished")

    def close(self) -> None:
        """Stop the workers and wait for them to exit."""
        with self._cond:
            self._shutdown = True
            self._cond.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> ParallelForContext:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_core_number = os.cpu_count() or 1
_default_context: ParallelForContext | None = None
_default_lock = threading.Lock()


def get_core_number() -> int:
    """Return the number of workers a new context starts with."""
    return _core_number


def set_core_number(n: int) -> None:
    """Set the number of workers a new context starts with."""
    global _core_number
    if n < 1:
        raise ValueError("core number must be at least 1")
    _core_number = n


def parallel_for(begin: int, end: int, func: WorkFunc, work_size: int = 1) -> None:
    """Run ``func(index, thread_id)`` over ``[begin, end)`` on the shared context."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = ParallelForContext()
        context = _default_context
    context.parallel_for(begin, end, func, work_size)