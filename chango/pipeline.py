"""Supermarket stocking pipeline built from chained generators."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from chango.strategy import random_integer

PRODUCTS = (
    "milk", "bread", "onions", "cucmber", "cookies", "ketchop", "mayo", "meat",
    "cheese", "salami", "tofu", "apples", "grapes", "chilli", "avocado",
)
LOCATIONS = ("fridge", "upper-shelve", "warehouse", "fruit-corner", "vegtebale-place")


@dataclass(frozen=True)
class StockedProduct:
    name: str
    location: str = ""
    price: int = 0


def importer(products: Iterable[str]) -> Iterator[str]:
    """Bring the products into the store one by one."""
    yield from products


def organizer(
    items: Iterable[str], locations: Sequence[str], rng: Optional[random.Random] = None
) -> Iterator[StockedProduct]:
    """Place each product in one of the first four locations."""
    for name in items:
        yield StockedProduct(name=name, location=locations[random_integer(4, 0, rng)])


def accountant(
    items: Iterable[StockedProduct], rng: Optional[random.Random] = None
) -> Iterator[StockedProduct]:
    """Give each product a price between 1 and 11."""
    for item in items:
        yield dataclasses.replace(item, price=random_integer(12, 1, rng))


def cashier(items: Iterable[StockedProduct]) -> List[StockedProduct]:
    """Print the numbered receipt and return the products on it."""
    receipt = []
    for count, item in enumerate(items, start=1):
        print(f"{count}. {item.name} = {item.price} (taken from {item.location})")
        receipt.append(item)
    return receipt


def lucky_supermarket(rng: Optional[random.Random] = None) -> List[StockedProduct]:
    """Run the whole pipeline over the store's products."""
    stocked = organizer(importer(PRODUCTS), LOCATIONS, rng)
    return cashier(accountant(stocked, rng))