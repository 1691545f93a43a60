"""Tests for the command line entry point."""

import pandas as pd

from config.config import validate_config
from main import main


def test_validate_config(capsys):
    validate_config()
    assert "validated" in capsys.readouterr().out


def test_expr(capsys):
    assert main(["--expr", "2 + 2 * 2"]) == 0
    assert capsys.readouterr().out.strip() == "6"


def test_expr_failure_exit_code():
    assert main(["--expr", "1 +"]) == 1


def test_no_grouping():
    assert main(["--expr", "2 * ( 3 )", "--no_grouping"]) == 1
    assert main(["--expr", "2 * ( 3 )"]) == 0


def test_file(tmp_path, capsys):
    path = tmp_path / "expr.txt"
    path.write_bytes(b"3 * 2 - 4\n")
    assert main(["--file", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "2"


def test_missing_file():
    assert main(["--file", "/nonexistent/expr.txt"]) == 1


def test_csv(tmp_path):
    source = tmp_path / "exprs.csv"
    source.write_text("expression\n1 + 1\n7 / 2\n1 / 0\n")
    output = tmp_path / "results.csv"

    assert main(["--csv", str(source), "--output_path", str(output)]) == 0
    results = pd.read_csv(output, index_col=0)
    assert list(results["value"].iloc[:2]) == [2, 3]
    assert results["error"].iloc[2] == "DivisionByZero"


def test_csv_missing_file(tmp_path):
    output = tmp_path / "results.csv"
    assert main(["--csv", str(tmp_path / "missing.csv"), "--output_path", str(output)]) == 1
    assert not output.exists()


def test_csv_missing_column(tmp_path):
    source = tmp_path / "exprs.csv"
    source.write_text("formula\n1 + 1\n")
    assert main(["--csv", str(source), "--output_path", str(tmp_path / "out.csv")]) == 1
