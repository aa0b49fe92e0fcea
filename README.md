# chango

`chango` is a collection of small programs. Each one acts out a single
concurrency or design pattern with threads, queues and generators. Each
pattern is a short scene: students answer a teacher's questions, workers
label supermarket products, several threads edit one phone book, a lottery
draws its balls, and so on.

## Installation

```
pip install .
```

To install and run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running a pattern

The package installs one command, `chango`. Choose a pattern with `--pattern`
(the single-dash form `-pattern` works too):

```
chango --pattern hello
chango --pattern pipeline
chango --pattern pubsub
chango --pattern fanio --workers 5
chango --pattern workerpool --workers 4
chango --pattern messaging --duration 10s
chango --pattern repository --duration 30s
chango --pattern observer --name etzba/gopu --tag latest --sha sha256:0000
```

If you leave out `--pattern`, the observer pattern runs. For an unknown
pattern name the command prints
`Choose relevant pattern by using -pattern=<pattern_name>. Details in README.md`
and exits with status 2.

Before it runs a pattern, the command logs a line such as
`INFO 10 Oct 11 12:23 UTC start executing pattern hello`.

### Patterns

| Pattern      | What it does                                                                                          |
|--------------|-------------------------------------------------------------------------------------------------------|
| `hello`      | One thread puts `"hello"` on a queue. The main thread receives it and prints `value from channel hello`. |
| `observer`   | A subject notifies a registry of three preset images. Every image that matches the name and tag gets the new digest and a fresh timestamp. The registry is then printed. If nothing matches, `Image was not found in registry` is printed. |
| `messaging`  | Two threads send random letter strings to a topic that holds 3 messages, about once a second each. The receiver logs messages until `--duration` has passed, waits one more second and stops. |
| `workerpool` | `--workers` threads turn 20 jobs into products named `"<job>. <letters>"`, each priced from 2 to 9. After a 3-second wait the 20 products are printed. At least one worker is required. |
| `fanio`      | A teacher puts questions 1 to 30 on a queue, one every 0.1 s. `--workers` students each multiply a question by a random number from 1 to 29, and every answer is printed. |
| `repository` | A phone book starts with 11 contacts. Background threads print, add, update and delete contacts at random intervals until `--duration` has passed. The final book is then printed. |
| `pipeline`   | 15 products go through importer → organizer → accountant → cashier. Each gets one of the first four locations and a price from 1 to 11, and a numbered receipt is printed. |
| `pubsub`     | A publisher thread draws six balls, each from 1 to 48 (repeats are possible). A subscriber prints them. |

### Options

| Option       | Default         | Meaning                                                   |
|--------------|-----------------|-----------------------------------------------------------|
| `--pattern`  | `observer`      | Which pattern to run.                                     |
| `--filename` | `data.json`     | File name stored in the shared configuration.             |
| `--name`     | `etzba/etz`     | Image name for the observer pattern.                      |
| `--tag`      | `latest`        | Image tag for the observer pattern.                       |
| `--sha`      | a sha256 digest | Image digest for the observer pattern.                    |
| `--workers`  | `20`            | Number of threads for `fanio` and `workerpool`.           |
| `--duration` | `20s`           | How long `messaging` and `repository` run.                |
| `--interval` | `3s`            | Parsed and checked, but no pattern uses it.               |

A duration is a number followed by a unit (`ns`, `us`, `µs`, `ms`, `s`, `m`,
`h`), repeated as often as needed, for example `1h2m3s`, `1.5s` or `300ms`.
It may carry a leading sign, and a bare `0` is also accepted.
`chango.cli.parse_duration` turns such text into seconds and raises
`ValueError` for anything else.

## Using the pieces from Python

Each building block can be imported on its own:

```python
import random

from chango.strategy import random_integer, random_string
from chango.products import new_product, with_name, with_price
from chango.phonebook import format_phone_number
from chango.registry import default_registry
from chango.pipeline import lucky_supermarket

rng = random.Random(7)
random_string(8, rng)            # eight letters from "a" to "p"
random_integer(12, 1, rng)       # an integer from 1 up to, not including, 12

product = new_product(with_name("milk"), with_price(4.5))

format_phone_number([0, 1, 2, 3, 4, 5, 6, 7, 8, 9])   # '012-3456-789'

registry = default_registry()
registry.update_sha_or_add_image("etzba/gopu", "latest", "sha256:0000")  # True

receipt = lucky_supermarket(rng)  # list of StockedProduct, receipt printed
```

Other entry points:

- `chango.executions.execution_factory(logger, config, image, pattern)` returns
  an `Execution`, and its `execute()` runs the pattern. For an unknown name it
  raises `UnknownPatternError`, which is a `ValueError`.
- `chango.config.get_config(filename, workers, duration)` returns one shared
  `Config`. The first call sets its values, and every later call returns that
  same object.
- `chango.logs.Log` prints timestamped `INFO` and `ERROR` lines.
  `with_message` and `with_error` wrap a logger in a decorator that forwards
  every call.

## What it does not do

- `--filename` only stores a name in the configuration. No pattern reads or
  writes that file, and nothing is saved between runs.
- The observer pattern only updates images that already exist in its
  in-memory registry. It never adds a new image and never contacts a real
  container registry.