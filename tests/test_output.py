import io

import pytest

from pipex.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_one_character():
    stream = io.StringIO()
    put_char("z", stream)
    put_char("y", stream)
    assert stream.getvalue() == "zy"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_non_single(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_text():
    stream = io.StringIO()
    put_str("Error Fd : ", stream)
    assert stream.getvalue() == "Error Fd : "


def test_put_str_none_writes_nothing():
    stream = io.StringIO()
    put_str(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_appends_newline():
    stream = io.StringIO()
    put_endl("line", stream)
    assert stream.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    stream = io.StringIO()
    put_endl(None, stream)
    assert stream.getvalue() == ""


def test_put_number_minimum_int():
    stream = io.StringIO()
    put_number(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [0, 5, -5, 10, 123456, -98765, 2147483647])
def test_put_number_round_trip(number):
    stream = io.StringIO()
    put_number(number, stream)
    assert int(stream.getvalue()) == number
    assert stream.getvalue().lstrip("-").isdigit()


def test_put_str_defaults_to_stdout(capsys):
    put_str("shown")
    assert capsys.readouterr().out == "shown"


def test_put_str_to_stderr(capsys):
    import sys

    put_str("Error Pipe : ", sys.stderr)
    captured = capsys.readouterr()
    assert captured.err == "Error Pipe : "
    assert captured.out == ""