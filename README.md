# pokedex

An interactive command-line Pokedex. Browse location areas, explore them to
see which Pokemon appear there, try to catch Pokemon, and inspect the ones you
have caught. Data comes from the public PokeAPI over plain HTTP (standard
library only). Raw responses are kept in an in-memory cache whose entries are
dropped after about five minutes, so revisiting a page or a Pokemon within that
time needs no network request.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Usage

Start the interactive prompt:

```
pokedex
```

The command takes no options besides `--help`. You will see a `Pokedex > `
prompt. Input is lower-cased and split on whitespace, so commands and names are
case-insensitive. The session ends with `exit` or at the end of input
(Ctrl-D). The available commands are:

| Command                    | What it does                                |
|----------------------------|---------------------------------------------|
| `help`                     | Displays a help message                     |
| `map`                      | Get the next page of locations              |
| `mapb`                     | Get the previous page of locations          |
| `explore <location_name>`  | Explore a location                          |
| `catch <pokemon_name>`     | Attempt to catch a pokemon                  |
| `inspect <pokemon_name>`   | View details about a caught Pokemon         |
| `pokedex`                  | See all the pokemon you've caught           |
| `exit`                     | Exit the Pokedex                            |

A short session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
 - tentacool
 - magikarp
...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
You may now inspect it with the inspect command.
Pokedex > inspect magikarp
Name: magikarp
Height: 9
Weight: 100
Stats:
  -hp: 20
  ...
Types:
  - water
```

`map` on its first use shows the first page; `mapb` before any page with a
previous one reports `you're on the first page`.

Catching is a matter of luck: a number is drawn from zero up to the Pokemon's
base experience, and the Pokemon escapes if it is above 40, so Pokemon with a
higher base experience are harder to catch.

Errors such as a missing argument, inspecting a Pokemon you have not caught, an
unknown Pokemon or location, or a network failure are printed and the prompt
continues. Unknown commands print `Unknown command`.

## What it does not do

Caught Pokemon live only in memory for the current session; nothing is saved
to disk. Requests time out after five seconds and are not retried.

## Using it as a library

The pieces behind the prompt can be used on their own:

```python
from pokedex.cache import Cache
from pokedex.client import ApiError, Client
from pokedex.repl import clean_input

with Client(timeout=5.0, cache_interval=300.0) as client:
    page = client.list_locations(None)
    for area in page.results:
        print(area.name)
    print(page.next, page.previous)

    pikachu = client.get_pokemon("pikachu")
    print(pikachu.name, pikachu.base_experience, [t.name for t in pikachu.types])

    area = client.get_location("pastoria-city-area")
    print([p.name for p in area.pokemon_encounters])

with Cache(5.0) as cache:
    cache.add("key", b"value")
    print(cache.get("key"))   # b'value'
    print(cache.get("other")) # None

print(clean_input("  HellO  World  "))  # ['hello', 'world']
```

- `pokedex.cache.Cache(interval)` stores byte strings; a background thread
  removes entries older than `interval` seconds once per interval. `close()`
  stops the thread.
- `pokedex.client.Client(timeout, cache_interval, fetch)` returns parsed
  `Location`, `LocationPage` and `Pokemon` objects from `pokedex.models`.
  `fetch` is an optional function taking a URL and a timeout and returning the
  response body, in place of the default HTTP GET. Failures raise
  `pokedex.client.ApiError`.
- `pokedex.models.parse_location_page`, `parse_location` and `parse_pokemon`
  parse JSON text, bytes or an already decoded mapping, and raise `ValueError`
  on malformed data.
- `pokedex.commands` holds the commands (`get_commands()`, `Config`,
  `CommandError`), and `pokedex.repl.start_repl(cfg, stream)` runs the prompt
  over any text stream.

## Running the tests

```
pip install .[test]
pytest
```