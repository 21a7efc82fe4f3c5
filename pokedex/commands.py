"""The commands the Pokedex prompt understands."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from pokedex.client import Client
from pokedex.models import Pokemon

CATCH_THRESHOLD = 40


class CommandError(Exception):
    """Raised when a command cannot do what it was asked."""


@dataclass
class Config:
    """State shared between commands during a session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class CliCommand:
    """A command name, its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def get_commands() -> dict[str, CliCommand]:
    """Return the available commands keyed by the word that starts them."""
    return {
        "help": CliCommand("help", "Displays a help message", command_help),
        "catch": CliCommand(
            "catch <pokemon_name>", "Attempt to catch a pokemon", command_catch
        ),
        "inspect": CliCommand(
            "inspect <pokemon_name>",
            "View details about a caught Pokemon",
            command_inspect,
        ),
        "explore": CliCommand(
            "explore <location_name>", "Explore a location", command_explore
        ),
        "map": CliCommand("map", "Get the next page of locations", command_map),
        "mapb": CliCommand(
            "mapb", "Get the previous page of locations", command_mapb
        ),
        "pokedex": CliCommand(
            "pokedex", "See all the pokemon you've caught", command_pokedex
        ),
        "exit": CliCommand("exit", "Exit the Pokedex", command_exit),
    }


def command_help(cfg: Config, *args: str) -> None:
    """Print a usage summary of every command."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a pokeball at the named pokemon; stronger ones escape more often."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    pokemon = cfg.client.get_pokemon(args[0])
    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name} has no base experience")

    roll = cfg.rng.randrange(pokemon.base_experience)
    print(f"Throwing a Pokeball at {pokemon.name}...")
    if roll > CATCH_THRESHOLD:
        print(f"{pokemon.name} escaped!")
        return

    print(f"{pokemon.name} was caught!")
    print("You may now inspect it with the inspect command.")
    cfg.caught_pokemon[pokemon.name] = pokemon


def command_inspect(cfg: Config, *args: str) -> None:
    """Print the details of a caught pokemon."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    pokemon = cfg.caught_pokemon.get(args[0])
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")

    print("Name:", pokemon.name)
    print("Height:", pokemon.height)
    print("Weight:", pokemon.weight)
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.name}: {stat.base_stat}")
    print("Types:")
    for type_info in pokemon.types:
        print("  -", type_info.name)


def command_explore(cfg: Config, *args: str) -> None:
    """List the pokemon that can be found in a location area."""
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    location = cfg.client.get_location(args[0])
    print(f"Exploring {location.name}...")
    print("Found Pokemon: ")
    for pokemon in location.pokemon_encounters:
        print(f" - {pokemon.name}")


def _show_page(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(cfg: Config, *args: str) -> None:
    """Print the next page of location areas."""
    _show_page(cfg, cfg.next_locations_url)


def command_mapb(cfg: Config, *args: str) -> None:
    """Print the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.prev_locations_url)


def command_pokedex(cfg: Config, *args: str) -> None:
    """List every pokemon caught so far."""
    print("Your Pokedex:")
    for pokemon in cfg.caught_pokemon.values():
        print(f" - {pokemon.name}")


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye, release the client and end the program."""
    print("Closing the Pokedex... Goodbye!")
    cfg.client.close()
    sys.exit(0)