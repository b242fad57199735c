"""Line reader that never keeps the event loop from shutting down."""

from __future__ import annotations

import asyncio
import sys
import threading
from typing import TextIO


class StdinLineReader:
    """Feeds lines from a blocking stream into an ``asyncio.Queue``.

    The blocking ``readline`` runs on a daemon thread, so cancelling the
    awaiting coroutine (or Ctrl-C) returns immediately instead of waiting
    for the user to press Enter. End of input yields ``None`` from then on.
    """

    def __init__(self, stream: TextIO | None = None, output: TextIO | None = None) -> None:
        self._stream = stream or sys.stdin
        self._output = output or sys.stdout
        self._queue: asyncio.Queue[str | None] | None = None
        self._eof = False

    async def __call__(self, prompt: str) -> str | None:
        if self._eof:
            return None
        if self._queue is None:
            self._queue = asyncio.Queue()
            threading.Thread(
                target=self._pump,
                args=(asyncio.get_running_loop(), self._queue),
                name="stdin-reader",
                daemon=True,
            ).start()
        self._output.write(prompt)
        self._output.flush()
        line = await self._queue.get()
        if line is None:
            self._eof = True
        return line

    def _pump(self, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue[str | None]) -> None:
        for line in iter(self._stream.readline, ""):
            if not self._deliver(loop, queue, line.rstrip("\r\n")):
                return
        self._deliver(loop, queue, None)

    @staticmethod
    def _deliver(loop: asyncio.AbstractEventLoop, queue: asyncio.Queue[str | None], line: str | None) -> bool:
        try:
            loop.call_soon_threadsafe(queue.put_nowait, line)
        except RuntimeError:
            # Loop already closed; the session is over.
            return False
        return True


__all__ = ["StdinLineReader"]
