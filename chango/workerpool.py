"""Pool of worker threads labelling supermarket products."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from typing import List, Optional

from chango.config import Config
from chango.logs import Logger
from chango.strategy import random_integer, random_string

NUMBER_OF_PRODUCTS_TO_ARRANGE = 20
WORK_DELAY = 1.0
COLLECT_DELAY = 3.0


@dataclass(frozen=True)
class _Product:
    name: str
    price: int

    def __str__(self) -> str:
        return f"{{{self.name} {self.price}}}"


def work(
    logger: Logger,
    ident: int,
    jobs: "queue.Queue[Optional[int]]",
    results: "queue.Queue[_Product]",
) -> None:
    """Label products until the job queue is closed, passing the close on."""
    time.sleep(WORK_DELAY)
    while (job := jobs.get()) is not None:
        product = _Product(
            name=f"{job}. {random_string(random_integer(12, 4))}",
            price=random_integer(10, 2),
        )
        product_name = random_string(random_integer(12, 4))
        logger.info(f"worker {ident} stick a new product price to product {product_name}")
        results.put(product)
    jobs.put(None)


def work_in_supermarket(logger: Logger, config: Config) -> List[_Product]:
    """Have ``config.workers`` threads label the products; print and return them."""
    if config.workers < 1:
        raise ValueError(f"at least one worker is needed, got {config.workers}")
    jobs: "queue.Queue[Optional[int]]" = queue.Queue()
    results: "queue.Queue[_Product]" = queue.Queue()

    for ident in range(1, config.workers + 1):
        threading.Thread(target=work, args=(logger, ident, jobs, results), daemon=True).start()

    for job in range(1, NUMBER_OF_PRODUCTS_TO_ARRANGE + 1):
        jobs.put(job)
    jobs.put(None)

    time.sleep(COLLECT_DELAY)
    products = []
    for _ in range(NUMBER_OF_PRODUCTS_TO_ARRANGE):
        product = results.get()
        print(product)
        products.append(product)
    return products