"""Fan-out of questions to student threads and fan-in of their answers."""

from __future__ import annotations

import queue
import threading
import time
from typing import List

from chango.config import Config
from chango.logs import Logger
from chango.strategy import random_integer

QUESTIONS = 30
QUESTION_INTERVAL = 0.1


def teacher(jobs: queue.Queue) -> None:
    """Ask the questions one by one, then close the queue with ``None``."""
    for question in range(1, QUESTIONS + 1):
        jobs.put(question)
        time.sleep(QUESTION_INTERVAL)
    jobs.put(None)


def student(logger: Logger, ident: int, jobs: queue.Queue, results: queue.Queue) -> None:
    """Answer questions until the queue is closed, passing the close on."""
    for job in iter(jobs.get, None):
        number = random_integer(30, 1)
        logger.info(f"student {ident} answer question {job} * {number}\n")
        results.put(job * number)
    jobs.put(None)


def math_class(logger: Logger, config: Config) -> List[int]:
    """Run ``config.workers`` students against one teacher; print and return the answers."""
    jobs: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()
    students = [
        threading.Thread(target=student, args=(logger, ident, jobs, results), daemon=True)
        for ident in range(1, config.workers + 1)
    ]
    for thread in students:
        thread.start()
    threading.Thread(target=teacher, args=(jobs,), daemon=True).start()

    def close_results() -> None:
        for thread in students:
            thread.join()
        results.put(None)

    threading.Thread(target=close_results, daemon=True).start()

    answers = []
    for answer in iter(results.get, None):
        print("Answer: ", answer)
        answers.append(answer)
    return answers