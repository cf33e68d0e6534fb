from __future__ import annotations

import pytest

import plugcalc


@pytest.fixture(autouse=True)
def _empty_plugins_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("PLUGCALC_PLUGINS_DIR", str(tmp_path))


def test_eval_prints_result(capsys):
    plugcalc.main(["eval", "--text", "2+3*4"])

    assert "Result: 14.0" in capsys.readouterr().out


def test_eval_failure_exits_with_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        plugcalc.main(["eval", "--text", "ln(-5)"])

    assert excinfo.value.code == 1
    assert "INVALID_FUNCTION_ARGUMENT" in capsys.readouterr().err


def test_repl_continues_after_error(monkeypatch, capsys):
    lines = iter(["log(-1)", "", "(2+3)*4", "quit", "1+1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    plugcalc.main(["repl"])

    captured = capsys.readouterr()
    assert "INVALID_FUNCTION_ARGUMENT" in captured.err
    assert "Result: 20.0" in captured.out
    assert "Result: 2.0" not in captured.out


def test_repl_ends_on_eof(monkeypatch, capsys):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)

    plugcalc.main(["repl"])

    captured = capsys.readouterr()
    assert "Mistake" not in captured.err
    assert "Result" not in captured.out


def test_providers_lists_builtin(capsys):
    plugcalc.main(["providers"])

    out = capsys.readouterr().out
    assert "math" in out
    assert "builtin" in out
