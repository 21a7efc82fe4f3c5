"""Data types for PokeAPI location and pokemon responses, and their parsers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

RawJSON = Union[bytes, bytearray, str, Mapping[str, Any]]


@dataclass(frozen=True)
class NamedResource:
    """A name paired with the API URL that describes it."""

    name: str = ""
    url: str = ""


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)


@dataclass(frozen=True)
class Location:
    """A location area and the pokemon that can be encountered there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: dict[str, str] = field(default_factory=dict)
    pokemon_encounters: list[NamedResource] = field(default_factory=list)


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a pokemon."""

    name: str = ""
    base_stat: int = 0
    effort: int = 0


@dataclass(frozen=True)
class PokemonType:
    """A type slot of a pokemon."""

    name: str = ""
    slot: int = 0


@dataclass(frozen=True)
class Pokemon:
    """The parts of a pokemon record the Pokedex uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[NamedResource] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)


def _load(data: RawJSON) -> Mapping[str, Any]:
    if isinstance(data, (bytes, bytearray, str)):
        data = json.loads(data)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _object(obj: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = obj.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"field {key!r} must be an object")
    return value


def _list(obj: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    items = []
    for item in value:
        if item is None:
            item = {}
        if not isinstance(item, Mapping):
            raise ValueError(f"items of {key!r} must be objects")
        items.append(item)
    return items


def _int(obj: Mapping[str, Any], key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _str(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _optional_str(obj: Mapping[str, Any], key: str) -> str | None:
    if obj.get(key) is None:
        return None
    return _str(obj, key)


def _bool(obj: Mapping[str, Any], key: str) -> bool:
    value = obj.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


def _resource(obj: Mapping[str, Any]) -> NamedResource:
    return NamedResource(name=_str(obj, "name"), url=_str(obj, "url"))


def parse_location_page(data: RawJSON) -> LocationPage:
    """Parse a location-area listing page."""
    obj = _load(data)
    return LocationPage(
        count=_int(obj, "count"),
        next=_optional_str(obj, "next"),
        previous=_optional_str(obj, "previous"),
        results=[_resource(item) for item in _list(obj, "results")],
    )


def parse_location(data: RawJSON) -> Location:
    """Parse a single location-area record."""
    obj = _load(data)
    names = {
        _str(_object(entry, "language"), "name"): _str(entry, "name")
        for entry in _list(obj, "names")
    }
    return Location(
        id=_int(obj, "id"),
        name=_str(obj, "name"),
        game_index=_int(obj, "game_index"),
        location=_resource(_object(obj, "location")),
        names=names,
        pokemon_encounters=[
            _resource(_object(enc, "pokemon"))
            for enc in _list(obj, "pokemon_encounters")
        ],
    )


def parse_pokemon(data: RawJSON) -> Pokemon:
    """Parse a single pokemon record."""
    obj = _load(data)
    return Pokemon(
        id=_int(obj, "id"),
        name=_str(obj, "name"),
        base_experience=_int(obj, "base_experience"),
        height=_int(obj, "height"),
        weight=_int(obj, "weight"),
        order=_int(obj, "order"),
        is_default=_bool(obj, "is_default"),
        species=_resource(_object(obj, "species")),
        abilities=[_resource(_object(a, "ability")) for a in _list(obj, "abilities")],
        stats=[
            PokemonStat(
                name=_str(_object(s, "stat"), "name"),
                base_stat=_int(s, "base_stat"),
                effort=_int(s, "effort"),
            )
            for s in _list(obj, "stats")
        ],
        types=[
            PokemonType(name=_str(_object(t, "type"), "name"), slot=_int(t, "slot"))
            for t in _list(obj, "types")
        ],
    )