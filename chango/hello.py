"""Pass a greeting between two threads."""

import queue
import threading


def say_hello() -> str:
    """Send "hello" from a thread and print what is received."""
    channel: queue.Queue = queue.Queue(maxsize=1)
    threading.Thread(target=channel.put, args=("hello",)).start()
    message = channel.get()
    print("value from channel", message)
    return message