from pathlib import Path

from apps.cli import best, compare


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_compare_cli_prints_mask(capsys):
    assert compare.main(["--guess", "speed", "--answer", "arise"]) == 0
    out = capsys.readouterr().out
    assert "Answer: ARISE" in out
    assert "\U0001F7E8⬜\U0001F7E8⬜⬜" in out


def test_compare_cli_rejects_bad_guess(capsys):
    assert compare.main(["--guess", "toolong"]) == 2
    assert "error" in capsys.readouterr().err


def test_best_cli_ranks_with_lang_defaults(tmp_path: Path, capsys):
    _write(tmp_path / "en_words.txt", ["crane", "raise", "stare", "trace", "cared", "adieu"])
    _write(tmp_path / "en_sols.txt", ["crane", "raise", "stare", "trace"])
    assert best.main(["--data-dir", str(tmp_path), "--top", "3", "--workers", "1"]) == 0
    lines = [ln for ln in capsys.readouterr().out.splitlines() if "bits" in ln]
    assert len(lines) == 3 and lines[0].strip().startswith("1.")


def test_best_cli_history_narrows(tmp_path: Path, capsys):
    _write(tmp_path / "en_words.txt", ["crane", "raise", "stare", "trace", "cared"])
    _write(tmp_path / "en_sols.txt", ["crane", "raise", "stare", "trace", "cared"])
    rc = best.main(["--data-dir", str(tmp_path), "--history", "crane=YGG-G", "--workers", "1"])
    assert rc == 0
    assert "Remaining: TRACE" in capsys.readouterr().out


def test_best_cli_load_error(tmp_path: Path, capsys):
    _write(tmp_path / "en_words.txt", ["crane", "cr4ne"])
    _write(tmp_path / "en_sols.txt", ["crane"])
    assert best.main(["--data-dir", str(tmp_path)]) == 2
    assert ":2" in capsys.readouterr().err


def test_best_cli_empty_solutions(tmp_path: Path, capsys):
    _write(tmp_path / "en_words.txt", ["crane", "stare"])
    (tmp_path / "en_sols.txt").write_text("", encoding="utf-8")
    assert best.main(["--data-dir", str(tmp_path), "--workers", "1"]) == 2
    assert "non-empty" in capsys.readouterr().err


def test_best_cli_undecodable_word_list(tmp_path: Path, capsys):
    (tmp_path / "en_words.txt").write_bytes(b"crane\n\xff\xfeabc\n")
    _write(tmp_path / "en_sols.txt", ["crane"])
    assert best.main(["--data-dir", str(tmp_path), "--workers", "1"]) == 2
    assert "invalid UTF-8" in capsys.readouterr().err
