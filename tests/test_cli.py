import logging

import pytest
from quartz.__main__ import main


@pytest.fixture
def write_source(tmp_path):
    def _write(text, name="src.qz"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write


def test_prints_expressions(write_source, capsys):
    path = write_source("(a (b 'c'))\nd\n()\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ['(a (b "c"))', "d", "()"]


def test_prints_tokens(write_source, capsys):
    path = write_source("(a 'b')")
    assert main(["--tokens", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "1:1\tLParen",
        "1:2\tSymbol\t'a'",
        "1:4\tStringLiteral\t'b'",
        "1:7\tRParen",
    ]


def test_reports_parse_error(write_source, capsys):
    path = write_source("(ok)\n(a))\n")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["(ok)", "(a)"]
    assert captured.err.strip() == f"{path}:2:4: Unexpected closing parentheses"


def test_strict_strings(write_source, capsys):
    path = write_source("a 'b")
    assert main([str(path)]) == 0
    assert main(["--strict", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["a"]
    assert "1:3: Unterminated string literal" in captured.err


def test_max_depth(write_source, capsys):
    path = write_source("((a))")
    assert main(["--max-depth", "1", str(path)]) == 1
    assert "Maximum nesting depth exceeded" in capsys.readouterr().err
    assert main(["--max-depth", "0", str(path)]) == 0


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.qz")]) == 2
    assert "nope.qz" in capsys.readouterr().err


def test_verbose_logs(write_source, caplog):
    path = write_source("(a)")
    with caplog.at_level(logging.DEBUG, logger="quartz"):
        assert main(["--verbose", str(path)]) == 0
    assert "parsed top-level form" in caplog.text


def test_unlimited_depth_reports_error(write_source, capsys):
    path = write_source("(" * 3000 + ")" * 3000)
    assert main(["--max-depth", "0", str(path)]) == 1
    assert "Maximum nesting depth exceeded" in capsys.readouterr().err
