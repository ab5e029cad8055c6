# learnkit

A set of small, well-tested Python modules. Each one is a compact example of
one idea: plain functions, data classes, errors, injected dependencies,
concurrency, recursive traversal, generic helpers, simple geometry, file
parsing and a tiny WSGI application. Only the standard library is used.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `learnkit.basics` | `hello`, `add`, `repeat`, `sum_of`, `sum_all`, `sum_all_tails`, `greet` |
| `learnkit.shapes` | `Shape`, `Rectangle`, `Circle`, `Triangle` (each with `area()`) and `perimeter` |
| `learnkit.wallet` | `Wallet` (`deposit`, `withdraw`, `balance`), `Bitcoin` and `InsufficientFundsError` |
| `learnkit.dictionary` | `Dictionary` with `search`, `add`, `update`, `delete`; errors `WordNotFoundError`, `WordExistsError`, `WordDoesNotExistError`, all `DictionaryError` |
| `learnkit.countdown` | `countdown` with pluggable sleepers (`DefaultSleeper`, `SpySleeper`, `SpyCountdownOperations`) |
| `learnkit.concurrency` | `check_websites`, `racer` (raises `RacerTimeoutError`) and a thread-safe `Counter` |
| `learnkit.walk` | `walk`, which calls a function for every string found in strings, mappings, dataclasses, lists, tuples and iterators |
| `learnkit.context_server` | `Store` and `server`, which returns an async handler that writes nothing when the fetch fails or is cancelled |
| `learnkit.generics` | `Stack`, `reduce`, `find`, `total`, `sum_all`, `sum_all_tails`, `Account`, `Transaction`, `new_transaction`, `new_balance_for` |
| `learnkit.clockface` | `Point` and the angles and unit vectors of the hands of an analogue clock |
| `learnkit.svg` | `write`, which draws a clock face as SVG |
| `learnkit.blogposts` | `Post`, `new_post` and `new_posts_from_fs` for reading posts from a directory or a name-to-content mapping |
| `learnkit.blogrenderer` | `RenderPost` with `sanitised_title` |
| `learnkit.player_store` | `PlayerStore` and `InMemoryPlayerStore` |
| `learnkit.player_server` | `PlayerServer`, a WSGI application keeping player scores |

## Examples

```python
from learnkit.basics import hello, sum_all_tails
from learnkit.dictionary import Dictionary, WordExistsError
from learnkit.generics import Stack, find, reduce

hello("Elodie", "French")          # 'Bonjour, Elodie'
hello()                            # 'Hello, World'
sum_all_tails([1, 2], [0, 9])      # [2, 9]

words = Dictionary()
words.add("test", "this is just a test")
try:
    words.add("test", "something else")
except WordExistsError:
    pass

stack = Stack()
stack.push(123)
stack.push(456)
stack.pop()                        # 456; popping an empty stack raises IndexError

reduce([1, 2, 3], lambda acc, x: acc * x, 1)   # 6
find([1, 2, 3, 4], lambda x: x % 2 == 0)       # 2; None when nothing matches
```

A blog post file starts with three metadata lines, a separator line and the
body:

```
Title: Post 1
Description: Description 1
Tags: tdd, go
---
Hello
World
```

`new_posts_from_fs` reads the files in name order and raises any error met
while reading them.

## Commands

`learnkit-countdown` prints `3`, `2`, `1` one second apart and then `Go!`.

`learnkit-clock` writes an SVG drawing of a clock showing the current local
time to standard output:

```
learnkit-clock > clock.svg
```

`learnkit-blogposts [DIRECTORY]` reads every file in `DIRECTORY` (by default
the `posts` directory under the current working directory) and prints the
parsed posts to standard error. If the directory cannot be read it reports
the failure and exits with status 1.

`learnkit-server [--host HOST] [--port PORT]` starts the player score server
(port 8080 by default), backed by an in-memory store:

- `POST /players/<name>` records a win and answers `202 Accepted`;
- `GET /players/<name>` answers with the player's score, or `404` with a body
  of `0` when the player has none;
- `GET /league` answers `200 OK` with an empty body;
- `/players` redirects to `/players/`; any other path answers `404`.

## What it does not do

- Scores are kept in memory only and are lost when the server stops.
- `/league` does not list players or scores.
- `learnkit.blogrenderer` does not render posts to HTML; it only offers the
  `RenderPost` data class and its `sanitised_title`.