"""An HTTP client for the PokeAPI that caches raw responses."""

from __future__ import annotations

import urllib.request
from collections.abc import Callable
from typing import TypeVar

from pokedex.cache import Cache
from pokedex.models import (
    Location,
    LocationPage,
    Pokemon,
    parse_location,
    parse_location_page,
    parse_pokemon,
)

BASE_URL = "https://pokeapi.co/api/v2"

Fetcher = Callable[[str, float], bytes]
_T = TypeVar("_T")


class ApiError(Exception):
    """Raised when a request fails or its response cannot be understood."""


def _http_get(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, headers={"Accept": "application/json"})
    with urllib.request.urlopen(request, timeout=timeout) as response:
        return response.read()


class Client:
    """Fetches locations and pokemon, keeping responses in a cache.

    ``fetch`` takes a URL and a timeout in seconds and returns the response
    body; by default it performs a plain HTTP GET.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        fetch: Fetcher | None = None,
    ) -> None:
        self.timeout = float(timeout)
        self.cache = Cache(cache_interval)
        self._fetch: Fetcher = fetch if fetch is not None else _http_get

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return the location-area page at ``page_url``, or the first page."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._get(url, parse_location_page)

    def get_location(self, name: str) -> Location:
        """Return the location area called ``name``."""
        return self._get(f"{BASE_URL}/location-area/{name}", parse_location)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the pokemon called ``name``."""
        return self._get(f"{BASE_URL}/pokemon/{name}", parse_pokemon)

    def close(self) -> None:
        """Release the cache's background thread."""
        self.cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, url: str, parse: Callable[[bytes], _T]) -> _T:
        cached = self.cache.get(url)
        if cached is not None:
            return self._parse(url, cached, parse)
        try:
            body = self._fetch(url, self.timeout)
        except OSError as exc:
            raise ApiError(f"GET {url}: {exc}") from exc
        result = self._parse(url, body, parse)
        self.cache.add(url, body)
        return result

    @staticmethod
    def _parse(url: str, body: bytes, parse: Callable[[bytes], _T]) -> _T:
        try:
            return parse(body)
        except ValueError as exc:
            raise ApiError(f"invalid response from {url}: {exc}") from exc