import io

import pytest

from linecat import __version__
from linecat.cli import build_parser, main
from linecat.options import FlagSet


def test_parser_maps_flags():
    ns = build_parser().parse_args(["-A", "-e", "-t", "-E", "-T", "-v", "f1", "f2"])
    assert FlagSet.from_namespace(ns) == FlagSet(True, True, True, True, True, True)
    assert ns.files == ["f1", "f2"]


def test_parser_defaults():
    ns = build_parser().parse_args([])
    assert FlagSet.from_namespace(ns) == FlagSet()
    assert ns.files == []


def test_files(tmp_path, capsys):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("hello\n")
    b.write_text("wor\tld\n")
    assert main(["-t", str(a), str(b)]) == 0
    assert capsys.readouterr().out == "hello\nwor^Ild\n"


def test_missing_file_reports_path(tmp_path, capsys):
    b = tmp_path / "b.txt"
    b.write_text("world\n")
    missing = tmp_path / "a.txt"
    assert main([str(missing), str(b)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("linecat: ")
    assert str(missing) in captured.err


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("one\ntwo\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "one\ntwo\n"


def test_partial_flag_needs_gate(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\tb\n"))
    assert main(["-T"]) == 0
    assert capsys.readouterr().out == "a\tb\n"

    monkeypatch.setattr("sys.stdin", io.StringIO("a\tb\n"))
    assert main(["-T", "-v"]) == 0
    assert capsys.readouterr().out == "a^Ib\n"


def test_keyboard_interrupt(monkeypatch, capsys):
    class Interrupted(io.StringIO):
        def readline(self, *args):
            raise KeyboardInterrupt

    monkeypatch.setattr("sys.stdin", Interrupted())
    assert main([]) == 130


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_unknown_flag_is_usage_error(capsys):
    with pytest.raises(SystemExit) as info:
        main(["-n"])
    assert info.value.code == 2


def test_closed_output_pipe(monkeypatch, capsys):
    class ClosedPipe(io.StringIO):
        def write(self, s):
            raise BrokenPipeError(32, "Broken pipe")

    monkeypatch.setattr("sys.stdin", io.StringIO("y\ny\n"))
    monkeypatch.setattr("sys.stdout", ClosedPipe())
    assert main([]) == 141
    assert "Traceback" not in capsys.readouterr().err
