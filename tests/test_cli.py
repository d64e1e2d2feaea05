import io
import subprocess
import sys

import pytest

from line_diff import cli


def test_identical_files_exit_zero(write_text, capsys):
    a = write_text("a.txt", "one\ntwo\n")
    b = write_text("b.txt", "one\ntwo\n")

    assert cli.main([str(a), str(b)]) == cli.EXIT_SAME
    assert capsys.readouterr().out == "+0 -0\nNo differences found\n"


def test_different_files_exit_one(write_text, capsys):
    a = write_text("a.txt", "a\nb\nc")
    b = write_text("b.txt", "a\nx")

    assert cli.main([str(a), str(b)]) == cli.EXIT_DIFFERENT
    assert capsys.readouterr().out == "+1 -2\n  a\n- b\n+ x\n- c\n"


def test_carriage_returns_are_line_content(write_text, capsys):
    a = write_text("a.txt", "x\r\ny")
    b = write_text("b.txt", "x\ny")

    assert cli.main([str(a), str(b)]) == cli.EXIT_DIFFERENT
    assert "- x\r\n+ x\n  y" in capsys.readouterr().out


def test_side_by_side_and_context_options(write_text, capsys):
    a = write_text("a.txt", "1\n2\n3")
    b = write_text("b.txt", "1\n2\nX")

    cli.main([str(a), str(b), "--view-mode", "side_by_side", "--context-lines", "0"])
    assert capsys.readouterr().out == "+1 -1\n~ 3 | X\n"


def test_stdin_is_read_for_dash(write_text, monkeypatch, capsys):
    b = write_text("b.txt", "hello")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"Hello")))

    assert cli.main(["-", str(b)]) == cli.EXIT_DIFFERENT
    assert capsys.readouterr().out == "+1 -1\n- Hello\n+ hello\n"


def test_stdin_for_both_files_is_trouble(capsys):
    assert cli.main(["-", "-"]) == cli.EXIT_TROUBLE
    assert "standard input" in capsys.readouterr().err


def test_missing_file_is_trouble(tmp_path, write_text, capsys):
    b = write_text("b.txt", "x")

    assert cli.main([str(tmp_path / "missing.txt"), str(b)]) == cli.EXIT_TROUBLE
    assert capsys.readouterr().err.startswith("line-diff: ")


def test_invalid_context_lines_is_trouble(write_text, capsys):
    a = write_text("a.txt", "a")
    b = write_text("b.txt", "b")

    assert cli.main([str(a), str(b), "--context-lines", "-3"]) == cli.EXIT_TROUBLE
    assert "context_lines" in capsys.readouterr().err


def test_environment_variables_set_defaults(write_text, monkeypatch, capsys):
    monkeypatch.setenv("LINE_DIFF_VIEW_MODE", "side_by_side")
    monkeypatch.setenv("LINE_DIFF_CONTEXT_LINES", "0")
    a = write_text("a.txt", "1\n2")
    b = write_text("b.txt", "1\nX")

    cli.main([str(a), str(b)])
    assert capsys.readouterr().out == "+1 -1\n~ 2 | X\n"


def test_invalid_environment_values_are_ignored(monkeypatch, caplog):
    monkeypatch.setenv("LINE_DIFF_VIEW_MODE", "html")
    monkeypatch.setenv("LINE_DIFF_CONTEXT_LINES", "many")

    args = cli.create_parser().parse_args(["a", "b"])

    assert args.view_mode == "unified"
    assert args.context_lines == -1
    assert "LINE_DIFF_VIEW_MODE" in caplog.text
    assert "LINE_DIFF_CONTEXT_LINES" in caplog.text


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("line-diff ")


def test_module_entry_point(write_text):
    a = write_text("a.txt", "same")
    b = write_text("b.txt", "same")
    proc = subprocess.run(
        [sys.executable, "-m", "line_diff", str(a), str(b)],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0
    assert "No differences found" in proc.stdout
