# codedrills

Small programming drills you can import as functions or run from the
command line:

- `codedrills.euler`: Project Euler problems 1, 2, 3, 4, 8, 9, 20, 21, 25
  and 55, each as a function with the problem's numbers as defaults.
- `codedrills.collatz`: Collatz steps and `CollatzCache`, which measures
  sequence lengths and remembers them.
- `codedrills.primes`: circular-prime tests and counts, built on
  `codedrills.euler.sieve_of_eratosthenes`.
- `codedrills.weather`: weather values (`Sunny`, `Rainy`, `Cloudy`,
  `Snowy`) and a `divide` that raises `DivisionByZero`, `IncorrectInput`
  or, on a coin flip, `UnknownError` (all subclasses of `MathError`).
- `codedrills.basics`: `add` (32-bit checked), `Person`, `Rectangle`,
  control-flow and data-type examples.
- `codedrills.fibapi`: a Flask JSON API serving cached Fibonacci numbers.
- `codedrills.notestore` and `codedrills.noteapi`: notes kept in SQLite and
  a Flask JSON API to create, list, read, edit and delete them.
- `codedrills.userdb`: a small client for a Firebase-style realtime JSON
  database over its REST interface, with user create/read/list/update/delete
  helpers.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from codedrills.euler import sum_multiples_of_3_or_5, is_palindrome, sieve_of_eratosthenes
from codedrills.collatz import CollatzCache
from codedrills.primes import count_circular_primes

sum_multiples_of_3_or_5(10)        # 23
is_palindrome(9009)                # True

cache = CollatzCache()
cache.length(13)                   # length of the Collatz sequence for 13
cache.longest_below(100)           # (number, length) of the longest below 100

count_circular_primes(sieve_of_eratosthenes(100))
```

Errors are raised as exceptions:

```python
from codedrills.weather import divide, DivisionByZero, MathError

try:
    divide(10.0, 0.0)
except DivisionByZero:
    print("DivisionByZero Detected")
```

`describe_division(a, b)` turns the same outcomes into text, and
`describe_weather(Sunny(43.2))` gives a sentence for a weather value.

The web services are ordinary Flask applications:

```python
from codedrills.fibapi import create_app, FibonacciCache

client = create_app(FibonacciCache()).test_client()
client.get("/api/fibonacci?n=10").get_json()   # {"result": 55, "status": "OK"}
```

Results that do not fit a 32-bit signed integer are answered with status 500.

```python
from codedrills.notestore import NoteStore
from codedrills.noteapi import create_app

store = NoteStore()                 # in-memory SQLite by default
note = store.create("Title", "Body")
store.update(note.id, published=True)
app = create_app(store)
```

`NoteStore` raises `NoteNotFound` for an unknown id and `DuplicateTitle`
when a title is already taken.

The user client works on locations of the database:

```python
from codedrills.userdb import Firebase, User, set_user, get_user

db = Firebase("https://db.example.com")
key = set_user(db, User(name="Jake", age=30, email="jake@example.com"))
get_user(db, key)
```

## Command line

```
codedrills-euler 1                  # any of 1 2 3 4 8 9 20 21 25 55
codedrills-euler 8 --input digits.txt
codedrills-collatz --n 13 --limit 1000000
codedrills-primes --limit 1000000
codedrills-weather --seed 1
codedrills-basics structs           # hello test arithmetic functions names ctrlflow datatypes structs
```

The web services start a server (`--host`, default `0.0.0.0`; `--port`,
default 8000):

```
codedrills-fibapi
codedrills-noteapi --database notes.db
```

The Fibonacci service answers `GET /api/healthz` and
`GET /api/fibonacci?n=<number>`. The notes service answers
`GET /api/healthchecker`, `GET` and `POST /api/notes` (with `page` and
`limit` query parameters for listing), and `GET`, `PATCH` and
`DELETE /api/notes/<id>`. `--database` defaults to the `DATABASE_URL`
environment variable; a leading `sqlite:///` is stripped. Both services add
CORS headers for requests from `http://localhost:3000`.

The user client runs a create, read, list, update and delete round against
the database at the given base URL:

```
codedrills-userdb https://db.example.com
```

Pass `--help` to any command to see its options.

## What it does not do

- The notes service stores notes in SQLite only; it does not connect to a
  PostgreSQL or other database server.
- The user client sends no authentication and has no offline store.
- The digit file for Euler problem 8 is not included; give it with `--input`.
- `codedrills-primes` needs a limit with more than 10,000 primes below it
  to report the 10,001st prime, and stops with an error otherwise.