"""Lottery draw published over a queue to one subscriber."""

from __future__ import annotations

import queue
import random
import threading
from typing import List, Optional

from chango.strategy import random_integer

SELECTED_BALLS = 6
BALLS_QUANTITY = 49


def publisher(channel: queue.Queue, rng: Optional[random.Random] = None) -> None:
    """Put the drawn balls on ``channel``, then ``None`` to close it."""
    for _ in range(SELECTED_BALLS):
        channel.put(random_integer(BALLS_QUANTITY, 1, rng))
    channel.put(None)


def subscriber(channel: queue.Queue) -> List[int]:
    """Print balls until the channel is closed; return them."""
    print("The selected balls are: \n***********************")
    balls = list(iter(channel.get, None))
    for ball in balls:
        print(ball)
    return balls


def lottery(rng: Optional[random.Random] = None) -> List[int]:
    """Draw the balls in one thread and print them in this one."""
    channel: queue.Queue = queue.Queue(maxsize=1)
    threading.Thread(target=publisher, args=(channel, rng)).start()
    return subscriber(channel)