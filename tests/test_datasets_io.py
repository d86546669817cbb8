from pathlib import Path

import pytest
from wordbits import LoadError, ParseError, parse_word
from wordbits.datasets import Lang, load_wordlist


def test_load_wordlist(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\r\n  Stare \nTRACE\n", encoding="utf-8")
    assert load_wordlist(p) == [parse_word("crane"), parse_word("stare"), parse_word("trace")]


def test_load_wordlist_bad_line_is_not_skipped(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nstare\ncr4ne\ntrace\n", encoding="utf-8")
    with pytest.raises(LoadError) as exc:
        load_wordlist(p)
    assert exc.value.kind == LoadError.PARSE
    assert exc.value.line_no == 3
    assert isinstance(exc.value.__cause__, ParseError)
    assert f"{p}:3" in str(exc.value)


def test_load_wordlist_blank_line_fails(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\n\nstare\n", encoding="utf-8")
    with pytest.raises(LoadError) as exc:
        load_wordlist(p)
    assert exc.value.line_no == 2


def test_load_wordlist_missing_file(tmp_path: Path):
    with pytest.raises(LoadError) as exc:
        load_wordlist(tmp_path / "missing.txt")
    assert exc.value.kind == LoadError.IO
    assert isinstance(exc.value.__cause__, OSError)


def test_load_wordlist_invalid_utf8_is_a_load_error(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"crane\n\xff\xfeabc\nstare\n")
    with pytest.raises(LoadError) as exc:
        load_wordlist(p)
    assert exc.value.kind == LoadError.PARSE
    assert exc.value.line_no == 2
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_load_wordlist_empty_file_loads_empty(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"")
    assert load_wordlist(p) == []


def test_lang_default_paths(tmp_path: Path):
    assert Lang.EN.wordlist == "en_words.txt" and Lang.EN.sollist == "en_sols.txt"
    assert Lang.DE.paths(tmp_path) == (tmp_path / "de_words.txt", tmp_path / "de_sols.txt")
    assert Lang("de") is Lang.DE
