"""Tests for console logging mirrored into a log file."""

from mastr2gpx.utils.logging import close_log_file, log, open_log_file


def test_log_writes_to_console_and_file(tmp_path, capsys):
    path = tmp_path / "export.log"
    open_log_file(path)
    try:
        log("Reading file EinheitenSolar_1.xml")
    finally:
        close_log_file()

    assert capsys.readouterr().out == "Reading file EinheitenSolar_1.xml\n"
    assert path.read_text(encoding="utf-8") == "Reading file EinheitenSolar_1.xml\n"


def test_nothing_is_mirrored_after_close(tmp_path, capsys):
    path = tmp_path / "export.log"
    open_log_file(path)
    log("first")
    close_log_file()
    close_log_file()

    log("second")

    assert path.read_text(encoding="utf-8") == "first\n"
    assert capsys.readouterr().out == "first\nsecond\n"


def test_reopening_switches_file(tmp_path):
    first = tmp_path / "a.log"
    second = tmp_path / "b.log"
    open_log_file(first)
    log("one")
    open_log_file(second)
    try:
        log("two")
    finally:
        close_log_file()

    assert first.read_text(encoding="utf-8") == "one\n"
    assert second.read_text(encoding="utf-8") == "two\n"


def test_log_without_file(capsys):
    log("plain")
    assert capsys.readouterr().out == "plain\n"
