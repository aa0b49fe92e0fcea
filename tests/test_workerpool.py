import queue
import re

import pytest

from chango import workerpool
from chango.config import Config

NAME = re.compile(r"^(\d+)\. [a-p]{4,11}$")
LOG = re.compile(r"^worker (\d+) stick a new product price to product [a-p]{4,11}$")


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def info(self, message):
        self.messages.append(message)

    def error(self, message, err):
        self.messages.append(message)


@pytest.fixture
def fast(monkeypatch):
    monkeypatch.setattr(workerpool, "WORK_DELAY", 0.0)
    monkeypatch.setattr(workerpool, "COLLECT_DELAY", 0.0)


def test_work_labels_each_job(fast):
    logger = RecordingLogger()
    jobs = queue.Queue()
    for item in (1, 2, None):
        jobs.put(item)
    results = queue.Queue()
    workerpool.work(logger, 4, jobs, results)
    products = [results.get_nowait(), results.get_nowait()]
    assert [NAME.match(p.name).group(1) for p in products] == ["1", "2"]
    assert all(2 <= p.price <= 9 for p in products)
    assert jobs.get_nowait() is None
    assert all(LOG.match(m).group(1) == "4" for m in logger.messages)


def test_every_product_is_arranged(fast):
    logger = RecordingLogger()
    products = workerpool.work_in_supermarket(logger, Config("data.json", 3, 1.0))
    numbers = sorted(int(NAME.match(p.name).group(1)) for p in products)
    assert numbers == list(range(1, workerpool.NUMBER_OF_PRODUCTS_TO_ARRANGE + 1))
    assert all(2 <= p.price <= 9 for p in products)
    assert len(logger.messages) == workerpool.NUMBER_OF_PRODUCTS_TO_ARRANGE
    assert all(1 <= int(LOG.match(m).group(1)) <= 3 for m in logger.messages)


def test_products_are_printed_in_braces(fast, capsys):
    products = workerpool.work_in_supermarket(RecordingLogger(), Config("data.json", 2, 1.0))
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(p) for p in products]
    assert all(re.match(r"^\{\d+\. [a-p]{4,11} [2-9]\}$", line) for line in lines)


def test_no_workers_is_rejected(fast):
    with pytest.raises(ValueError):
        workerpool.work_in_supermarket(RecordingLogger(), Config("data.json", 0, 1.0))