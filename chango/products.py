"""Products built with functional options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class Product:
    name: str = ""
    price: float = 0.0


Option = Callable[[Product], None]


def new_product(*options: Option) -> Product:
    """Create a product and apply each option in order."""
    product = Product()
    for option in options:
        option(product)
    return product


def with_name(name: str) -> Option:
    return lambda product: setattr(product, "name", name)


def with_price(price: float) -> Option:
    return lambda product: setattr(product, "price", price)