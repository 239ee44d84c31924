# tests/test_cli.py
"""Tests for suggestion formatting and the command line tool."""

from bmdict import cli
from bmdict.dictionary_service import DictionaryService
from bmdict.config import Settings
from bmdict.display import format_entry, format_suggestion, highlight_match
from bmdict.models import WordEntry


def test_highlight_match():
    assert highlight_match("Kaksia", "aks") == ("K", "aks", "ia")
    assert highlight_match("kaksi", "KAK") == ("", "kak", "si")
    assert highlight_match("kaksi", "zz") is None
    assert highlight_match("kaksi", "  ") is None


def test_format_suggestion():
    assert format_suggestion(WordEntry("kaksia", "n", "baskets"), "aks") == "k[aks]ia (n)"
    assert format_suggestion(WordEntry("kaksi", "", ""), "kaski") == "kaksi"


def test_format_entry():
    text = format_entry(WordEntry("kaksi", "n", "a basket"))
    assert text.splitlines() == ["kaksi", "  part of speech: n", "  a basket"]
    assert "(no definition)" in format_entry(WordEntry("kaksi"))


def test_single_query(wordlist_file, capsys):
    assert cli.main(["--wordlist", str(wordlist_file), "--query", "kaks"]) == 0
    out = capsys.readouterr().out
    assert "1. [kaks]i (n)" in out
    assert "2. [kaks]ia (n)" in out


def test_single_definition_query(wordlist_file, capsys):
    assert cli.main(["--wordlist", str(wordlist_file), "--query", "basket", "--mode", "definition"]) == 0
    out = capsys.readouterr().out
    assert "kaksi (n)" in out
    assert "kaksia (n)" in out


def test_missing_wordlist(tmp_path, capsys):
    assert cli.main(["--wordlist", str(tmp_path / "missing.json"), "--query", "kaks"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_undecodable_wordlist(tmp_path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[{"word": "k\xff\xfeaksi"}]')
    assert cli.main(["--wordlist", str(path), "--query", "kaks"]) == 1
    assert "invalid encoding" in capsys.readouterr().err


def test_prompt_session(wordlist_file, monkeypatch, capsys):
    service = DictionaryService(settings=Settings())
    service.load(wordlist_file)
    lines = iter(["kaks", "2", "9", ":def", "basket", ":stats", "zzzz", ":quit", "never read"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    cli.run_prompt(service)

    out = capsys.readouterr().out
    assert "[kaks]ia (n)" in out
    assert "part of speech: n" in out
    assert "baskets" in out
    assert "Pick a number between 1 and 2" in out
    assert '"index_built": true' in out
    assert "No results found" in out


def test_prompt_stops_on_eof(wordlist_file, monkeypatch):
    service = DictionaryService(settings=Settings())
    service.load(wordlist_file)

    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    cli.run_prompt(service)
