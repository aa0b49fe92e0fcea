"""Random string and integer generators."""

from __future__ import annotations

import random
from typing import Optional

LETTERS = "abcdefghijklmnop"


def random_string(length: int, rng: Optional[random.Random] = None) -> str:
    """Return ``length`` letters drawn from :data:`LETTERS`."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return "".join((rng or random).choice(LETTERS) for _ in range(length))


def random_integer(maximum: int, minimum: int, rng: Optional[random.Random] = None) -> int:
    """Return an integer in ``[minimum, maximum)``."""
    if maximum <= minimum:
        raise ValueError(f"maximum ({maximum}) must be greater than minimum ({minimum})")
    return (rng or random).randrange(minimum, maximum)