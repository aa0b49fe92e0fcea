"""Process-wide configuration created once."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Shared settings; ``duration`` is in seconds."""

    filename: str
    workers: int
    duration: float


_config: Optional[Config] = None
_lock = threading.Lock()


def get_config(filename: str, workers: int, duration: float) -> Config:
    """Return the shared config, built from the arguments of the first call."""
    global _config
    with _lock:
        if _config is None:
            _config = Config(filename, workers, duration)
        return _config