[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chango"
version = "0.1.0"
description = "Small runnable demonstrations of concurrency and design patterns: observer, fan-out/fan-in, worker pool, pipeline, pub/sub and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "design-patterns",
    "threads",
    "queues",
    "pipeline",
    "worker-pool",
    "observer",
    "pubsub",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chango = "chango.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chango"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
