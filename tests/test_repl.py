import io
import json

import pytest

from pokedex.client import BASE_URL, Client
from pokedex.commands import Config
from pokedex.repl import PROMPT, clean_input, main, start_repl


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  ", []),
        ("  hello  ", ["hello"]),
        ("  hello  world  ", ["hello", "world"]),
        ("  HellO  World  ", ["hello", "world"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def _fetch(url, timeout):
    if url == f"{BASE_URL}/location-area":
        body = {"next": None, "previous": None, "results": [{"name": "canalave-city-area"}]}
        return json.dumps(body).encode()
    return b"Not Found"


@pytest.fixture
def cfg():
    client = Client(cache_interval=60.0, fetch=_fetch)
    yield Config(client=client)
    client.close()


def test_repl_prompts_per_line_and_reports_unknown(cfg, capsys):
    start_repl(cfg, io.StringIO("bogus\n\n   \n"))
    out = capsys.readouterr().out
    assert out.count(PROMPT) == 4
    assert out.count("Unknown command") == 1


def test_repl_dispatches_case_insensitively(cfg, capsys):
    start_repl(cfg, io.StringIO("MAP\n"))
    out = capsys.readouterr().out
    assert "canalave-city-area" in out


def test_repl_prints_command_errors_and_continues(cfg, capsys):
    start_repl(cfg, io.StringIO("inspect pikachu\nmapb\npokedex\n"))
    out = capsys.readouterr().out
    assert "you have not caught that pokemon" in out
    assert "you're on the first page" in out
    assert "Your Pokedex:" in out


def test_repl_prints_api_errors(cfg, capsys):
    start_repl(cfg, io.StringIO("explore nowhere\n"))
    out = capsys.readouterr().out
    assert f"{BASE_URL}/location-area/nowhere" in out


def test_repl_exit_stops_session(cfg, capsys):
    with pytest.raises(SystemExit) as info:
        start_repl(cfg, io.StringIO("exit\nhelp\n"))
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "Closing the Pokedex... Goodbye!" in out
    assert "Welcome to the Pokedex!" not in out


def test_main_returns_zero_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("help\n"))
    assert main([]) == 0
    assert "Welcome to the Pokedex!" in capsys.readouterr().out


def test_main_exit_command(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 0