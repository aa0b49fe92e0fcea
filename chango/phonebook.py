"""Phone book changed concurrently by several background threads."""

from __future__ import annotations

import random
import threading
from typing import Callable, Dict, List, Optional

from chango.config import Config
from chango.logs import Logger
from chango.strategy import random_integer, random_string

PHONE_NUMBER_LENGTH = 10
INITIAL_CONTACT_NUMBER = 11


def format_phone_number(numbers: List[int]) -> str:
    """Join the digits, with a dash after the third and seventh."""
    return "".join(
        f"{digit}-" if index in (2, 6) else str(digit) for index, digit in enumerate(numbers)
    )


class PhoneBook:
    """Thread-safe mapping from contact names to phone numbers."""

    def __init__(self, logger: Logger, rng: Optional[random.Random] = None) -> None:
        self.logger = logger
        self.rng = rng
        self.contacts: Dict[str, List[int]] = {}
        self._lock = threading.Lock()

    def add_contact(self) -> None:
        with self._lock:
            self.contacts[self.generate_contact_name()] = self.generate_phone_number()

    def update_contact(self, contact_name: str) -> None:
        with self._lock:
            self.contacts[contact_name] = self.generate_phone_number()

    def delete_contact(self, contact_name: str) -> None:
        with self._lock:
            self.contacts.pop(contact_name, None)

    def show_all_contacts(self) -> None:
        with self._lock:
            print("-" * 48)
            for name, number in self.contacts.items():
                print(f"{name} - {format_phone_number(number)}")

    def generate_phone_number(self) -> List[int]:
        """Return ten digits: 0, 1, then eight random digits from 0 to 8."""
        return [0, 1] + [
            random_integer(9, 0, self.rng) for _ in range(PHONE_NUMBER_LENGTH - 2)
        ]

    def generate_contact_name(self) -> str:
        """Return "Family, Surname" with random capitalised parts."""
        surname = random_string(random_integer(6, 2, self.rng), self.rng)
        family_name = random_string(random_integer(12, 3, self.rng), self.rng)
        return f"{family_name.capitalize()}, {surname.capitalize()}"

    def init_contacts(self) -> None:
        for _ in range(INITIAL_CONTACT_NUMBER):
            self.add_contact()

    def random_contact_name(self) -> str:
        """Return any contact name, or an empty string when the book is empty."""
        with self._lock:
            if not self.contacts:
                return ""
            source = self.rng if self.rng is not None else random
            return source.choice(list(self.contacts))


def _repeat(stop: threading.Event, interval: Callable[[], int], action: Callable[[], None]) -> None:
    while not stop.wait(interval()):
        action()


def dynamic_phone_book(logger: Logger, config: Config) -> PhoneBook:
    """Let threads show, add, update and delete contacts for ``config.duration`` seconds."""
    book = PhoneBook(logger)
    book.init_contacts()
    logger.info("New phone book created")
    logger.info("----------------------")
    book.show_all_contacts()

    def show() -> None:
        logger.info("Current phone book print")
        logger.info("------------------------")
        book.show_all_contacts()

    stop = threading.Event()
    tasks = [
        (lambda: random_integer(8, 7, book.rng), show),
        (lambda: random_integer(4, 3, book.rng), book.add_contact),
        (lambda: random_integer(2, 1, book.rng),
         lambda: book.update_contact(book.random_contact_name())),
        (lambda: random_integer(6, 5, book.rng),
         lambda: book.delete_contact(book.random_contact_name())),
    ]
    threads = [
        threading.Thread(target=_repeat, args=(stop, interval, action), daemon=True)
        for interval, action in tasks
    ]
    for thread in threads:
        thread.start()

    stop.wait(config.duration)
    stop.set()
    for thread in threads:
        thread.join()

    logger.info("Last phone book update")
    logger.info("----------------------")
    book.show_all_contacts()
    return book