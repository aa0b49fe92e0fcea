"""Executions of each demonstration, chosen by pattern name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from chango.config import Config
from chango.fanio import math_class
from chango.hello import say_hello
from chango.logs import Logger
from chango.lottery import lottery
from chango.messaging import send_receive
from chango.phonebook import dynamic_phone_book
from chango.pipeline import lucky_supermarket
from chango.registry import Image, update_image_in_registry
from chango.workerpool import work_in_supermarket

_USAGE = "Choose relevant pattern by using -pattern=<pattern_name>. Details in README.md"


class UnknownPatternError(ValueError):
    """Raised when no execution exists for the requested pattern."""

    def __init__(self, pattern: str) -> None:
        super().__init__(_USAGE)
        self.pattern = pattern


class Execution(ABC):
    @abstractmethod
    def execute(self) -> Any:
        """Run the demonstration and return what it produced."""


@dataclass
class Hello(Execution):
    def execute(self) -> str:
        return say_hello()


@dataclass
class Observer(Execution):
    logger: Logger
    image: Image

    def execute(self):
        self.logger.info(
            "image registry update args "
            + self.image.name + " " + self.image.tag + " " + self.image.sha
        )
        return update_image_in_registry(self.image.name, self.image.tag, self.image.sha)


@dataclass
class Messaging(Execution):
    logger: Logger
    config: Config

    def execute(self):
        return send_receive(self.logger, self.config)


@dataclass
class WorkerPool(Execution):
    logger: Logger
    config: Config

    def execute(self):
        return work_in_supermarket(self.logger, self.config)


@dataclass
class FanOutFanIn(Execution):
    logger: Logger
    config: Config

    def execute(self):
        return math_class(self.logger, self.config)


@dataclass
class Repository(Execution):
    logger: Logger
    config: Config

    def execute(self):
        return dynamic_phone_book(self.logger, self.config)


@dataclass
class PipeLine(Execution):
    def execute(self):
        return lucky_supermarket()


@dataclass
class PubSub(Execution):
    def execute(self):
        return lottery()


def execution_factory(logger: Logger, config: Config, image: Image, pattern: str) -> Execution:
    """Return the execution for ``pattern``; raise UnknownPatternError for any other name."""
    builders = {
        "hello": lambda: Hello(),
        "observer": lambda: Observer(logger=logger, image=image),
        "messaging": lambda: Messaging(logger=logger, config=config),
        "workerpool": lambda: WorkerPool(logger=logger, config=config),
        "fanio": lambda: FanOutFanIn(logger=logger, config=config),
        "repository": lambda: Repository(logger=logger, config=config),
        "pipeline": lambda: PipeLine(),
        "pubsub": lambda: PubSub(),
    }
    try:
        builder = builders[pattern]
    except KeyError:
        raise UnknownPatternError(pattern) from None
    return builder()