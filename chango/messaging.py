"""Two producers sending random messages to one topic until a timer fires."""

from __future__ import annotations

import queue
import threading
import time
from typing import List

from chango.config import Config
from chango.logs import Logger
from chango.strategy import random_string

CHANNEL_SIZE = 3
SEND_INTERVAL = 1.0
CLOSE_DELAY = 1.0


def _format_duration(seconds: float) -> str:
    """Render a duration like 1h2m3s, 1m30s, 1.5s or 300ms."""
    if seconds == 0:
        return "0s"
    sign, seconds = ("-" if seconds < 0 else ""), abs(seconds)
    if seconds < 1:
        return f"{sign}{seconds * 1000:g}ms"
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    text = f"{secs:g}s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


def send_receive(logger: Logger, config: Config) -> List[str]:
    """Receive from the topic for ``config.duration`` seconds; return the messages logged."""
    topic: queue.Queue = queue.Queue(maxsize=CHANNEL_SIZE)
    stop = threading.Event()

    def send(message: str) -> None:
        while not stop.is_set():
            try:
                topic.put(message, timeout=0.05)
                return
            except queue.Full:
                pass

    def sender(lengths, log_message: bool) -> None:
        while True:
            time.sleep(SEND_INTERVAL)
            message = " ".join(random_string(n) for n in lengths)
            if stop.is_set():
                logger.info("timer stopped")
                return
            logger.info("message from farm channel: " + message if log_message else "send to channel")
            send(message)

    for args in (((5, 3, 8), False), ((2, 4, 4), True)):
        threading.Thread(target=sender, args=args, daemon=True).start()

    deadline = time.monotonic() + config.duration
    received: List[str] = []
    try:
        while True:
            # One message wakes the receiver; the next one is the one logged.
            topic.get(timeout=max(0.0, deadline - time.monotonic()))
            message = topic.get(timeout=max(0.0, deadline - time.monotonic()))
            logger.info("message from farm channel: " + message)
            received.append(message)
    except queue.Empty:
        pass

    stop.set()
    logger.info(
        f"Pubsub is closed after {_format_duration(config.duration)}. Sleep one second and close"
    )
    time.sleep(CLOSE_DELAY)
    return received