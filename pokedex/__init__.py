"""Interactive command-line Pokedex backed by the PokeAPI, with a response cache, data models, client and prompt."""

__version__ = "0.1.0"
__all__ = ["cache", "client", "commands", "models", "repl"]