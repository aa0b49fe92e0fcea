"""Console logging and logger decorators."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Protocol, TextIO


class Logger(Protocol):
    def info(self, message: str) -> None: ...

    def error(self, message: str, err: BaseException) -> None: ...


@dataclass
class Log:
    """Prints timestamped lines to a stream (stdout by default)."""

    stream: Optional[TextIO] = None
    clock: Callable[[], datetime] = lambda: datetime.now().astimezone()

    def _emit(self, *parts: str) -> None:
        stamp = self.clock().strftime("%d %b %y %H:%M %Z")
        print(parts[0], stamp, *parts[1:], file=self.stream or sys.stdout)

    def info(self, message: str) -> None:
        self._emit("INFO", message)

    def error(self, message: str, err: BaseException) -> None:
        self._emit("ERROR", message, str(err))


@dataclass
class _Decorated:
    inner: Logger

    def info(self, message: str) -> None:
        self.inner.info(message)

    def error(self, message: str, err: BaseException) -> None:
        self.inner.error(message, err)


def with_message(logger: Logger) -> Logger:
    """Wrap ``logger`` in a forwarding decorator."""
    return _Decorated(logger)


with_error = with_message