"""Runnable demonstrations of concurrency and design patterns with threads, queues and generators."""

__version__ = "0.1.0"