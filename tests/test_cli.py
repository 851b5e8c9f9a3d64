# tests/test_cli.py
from __future__ import annotations

from pathlib import Path

import pytest

from qif_csv import cli

QIF = "!Type:Bank\nD25/12/2023\nN100\nMGifts, wrapping\nT-1,234.5\n^\n"


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_single_file_to_stdout(tmp_path, capsys):
    # Arrange
    src = _write(tmp_path / "in.qif", QIF)
    # Act
    rc = cli.main([str(src)])
    # Assert
    out = capsys.readouterr().out
    assert rc == 0
    assert out.splitlines() == [
        "date,reference,note,amount",
        '2023-12-25T00:00:00Z,100,"Gifts, wrapping",-1234.50',
    ]


def test_directory_to_file(tmp_path, capsys):
    # Arrange
    _write(tmp_path / "in" / "a.qif", "!Type:Bank\nN1\n^\n")
    _write(tmp_path / "in" / "b" / "b.qif", "!Type:Bank\nN2\n^\n")
    _write(tmp_path / "in" / ".hidden" / "c.qif", "!Type:Bank\nN3\n^\n")
    out = tmp_path / "out" / "all.csv"
    # Act
    rc = cli.main([str(tmp_path / "in"), str(out)])
    # Assert
    assert rc == 0
    assert out.read_text(encoding="utf-8").splitlines() == [
        "date,reference,note,amount",
        ",1,,",
        ",2,,",
    ]
    err = capsys.readouterr().err
    assert "parsing:" in err
    assert "wrote 2 record(s) from 2 of 2 source(s)" in err


def test_parse_error_stops_and_returns_failure(tmp_path, capsys):
    # Arrange
    _write(tmp_path / "in" / "a.qif", "!Type:Bank\nN1\n^\n")
    _write(tmp_path / "in" / "b.qif", "!Type:Bank\nTabc\n^\n")
    _write(tmp_path / "in" / "c.qif", "!Type:Bank\nN3\n^\n")
    out = tmp_path / "out.csv"
    # Act
    rc = cli.main([str(tmp_path / "in"), str(out)])
    # Assert
    assert rc == 1
    assert out.read_text(encoding="utf-8").splitlines() == [
        "date,reference,note,amount",
        ",1,,",
    ], "Rows flushed before the failure stay; later sources are skipped"
    assert "invalid amount 'abc'" in capsys.readouterr().err


def test_continue_on_error_converts_the_rest(tmp_path):
    # Arrange
    _write(tmp_path / "in" / "a.qif", "D01/01/2023\n^\n")
    _write(tmp_path / "in" / "b.qif", "!Type:Bank\nN2\n^\n")
    out = tmp_path / "out.csv"
    # Act
    rc = cli.main([str(tmp_path / "in"), str(out), "--continue-on-error"])
    # Assert
    assert rc == 1, "Any failed source is reported through the exit code"
    assert out.read_text(encoding="utf-8").splitlines()[1:] == [",2,,"]


def test_empty_directory_writes_header_only(tmp_path, capsys):
    out = tmp_path / "out.csv"
    (tmp_path / "in").mkdir()
    rc = cli.main([str(tmp_path / "in"), str(out)])
    assert rc == 0
    assert out.read_text(encoding="utf-8") == "date,reference,note,amount\n"
    assert "no .qif files found" in capsys.readouterr().err


def test_missing_input_is_a_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as ei:
        cli.main([str(tmp_path / "missing.qif")])
    assert ei.value.code == 2
    assert "Input not found" in capsys.readouterr().err


def test_log_file_option(tmp_path, capsys):
    src = _write(tmp_path / "in.qif", "!Type:Bank\nX1\n^\n")
    log_file = tmp_path / "logs" / "run.log"
    rc = cli.main([str(src), str(tmp_path / "o.csv"), "--log-file", str(log_file), "--log-level", "ERROR"])
    assert rc == 0
    text = log_file.read_text(encoding="utf-8")
    assert "unknown field code 'X'" in text
    assert "unknown field code" not in capsys.readouterr().err, "Console is at ERROR"


def test_out_of_range_amount_is_reported_not_raised(tmp_path, capsys):
    # Arrange
    src = _write(tmp_path / "big.qif", "!Type:Bank\nT1e999999999\n^\n")
    # Act
    rc = cli.main([str(src), str(tmp_path / "o.csv"), "--continue-on-error"])
    # Assert
    err = capsys.readouterr().err
    assert rc == 1
    assert "value out of range" in err
    assert "Traceback" not in err
