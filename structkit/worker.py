"""A worker thread fed through a message queue, with a periodic timer."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence

TIMER_INTERVAL = 0.25


@dataclass
class UserData:
    """Payload posted to a worker."""

    msg: str = ""
    year: int = 0


class MessageKind(IntEnum):
    EXIT_THREAD = 1
    POST_USER_DATA = 2
    TIMER = 3


class WorkerThread:
    """Runs a thread that handles queued messages.

    A companion timer posts a timer message every ``timer_interval`` seconds.
    The first timer expiry is announced and then ends the worker, just as an
    exit request does. Posted data is recorded in ``processed``.
    """

    def __init__(self, name: str, timer_interval: float = TIMER_INTERVAL) -> None:
        self.name = name
        self.timer_interval = timer_interval
        self.processed: list[UserData] = []
        self.timer_expired = threading.Event()
        self._queue: queue.Queue[tuple[MessageKind, Any]] = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._timer_exit = threading.Event()

    def start(self) -> bool:
        """Start the worker thread if it is not running yet."""
        if self._thread is None:
            self._thread = threading.Thread(target=self._process, name=self.name, daemon=True)
            self._thread.start()
        return True

    def thread_id(self) -> int:
        """Return the worker thread's identifier."""
        if self._thread is None or self._thread.ident is None:
            raise RuntimeError("worker thread is not started")
        return self._thread.ident

    def stop(self) -> None:
        """Ask the worker to exit and wait for it."""
        if self._thread is None:
            return
        self._queue.put((MessageKind.EXIT_THREAD, None))
        self._thread.join()
        self._thread = None

    def post(self, data: UserData) -> None:
        """Queue ``data`` for the worker."""
        if self._thread is None:
            raise RuntimeError("worker thread is not started")
        self._queue.put((MessageKind.POST_USER_DATA, data))

    def _timer(self) -> None:
        while not self._timer_exit.wait(self.timer_interval):
            self._queue.put((MessageKind.TIMER, None))

    def _process(self) -> None:
        self._timer_exit.clear()
        timer = threading.Thread(target=self._timer, daemon=True)
        timer.start()
        try:
            while True:
                kind, payload = self._queue.get()
                if kind is MessageKind.POST_USER_DATA:
                    if payload is None:
                        raise AssertionError("posted message carries no data")
                    self.processed.append(payload)
                    continue
                if kind is MessageKind.TIMER:
                    print(f"Timer expired on {self.name}")
                    self.timer_expired.set()
                    return
                if kind is MessageKind.EXIT_THREAD:
                    return
                raise AssertionError(f"unknown message kind {kind!r}")
        finally:
            self._timer_exit.set()
            timer.join()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start two workers, post a message to each, wait, then stop them."""
    parser = argparse.ArgumentParser(description="Run two message-queue worker threads.")
    parser.add_argument("--wait", type=float, default=2.0, help="seconds to let the workers run")
    args = parser.parse_args(argv)

    first = WorkerThread("WorkerThread1")
    second = WorkerThread("WorkerThread2")
    first.start()
    second.start()
    first.post(UserData("Hello world", 2017))
    second.post(UserData("Goodbye world", 2017))
    time.sleep(max(args.wait, 0.0))
    first.stop()
    second.stop()
    return 0