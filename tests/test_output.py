import io

import pytest

from fractview.numparse import INT_MAX, INT_MIN
from fractview.output import put_char, put_endl, put_number, put_str, terminate


def test_put_char_string(capsys):
    put_char("a")
    assert capsys.readouterr().out == "a"


def test_put_char_integer_code(capsys):
    put_char(ord("Q"))
    assert capsys.readouterr().out == "Q"


def test_put_char_to_given_stream():
    buffer = io.StringIO()
    put_char("x", buffer)
    assert buffer.getvalue() == "x"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab")


def test_put_str_writes_text(capsys):
    put_str("fract-ol")
    assert capsys.readouterr().out == "fract-ol"


def test_put_str_none_writes_nothing(capsys):
    put_str(None)
    assert capsys.readouterr().out == ""


def test_put_str_stops_at_nul():
    buffer = io.StringIO()
    put_str("ab\0cd", buffer)
    assert buffer.getvalue() == "ab"


def test_put_endl_appends_newline():
    buffer = io.StringIO()
    put_endl("line", buffer)
    assert buffer.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    buffer = io.StringIO()
    put_endl(None, buffer)
    assert buffer.getvalue() == ""


@pytest.mark.parametrize("number", [0, 7, -7, 42, -1234567, INT_MAX, INT_MIN])
def test_put_number_round_trip(number):
    buffer = io.StringIO()
    put_number(number, buffer)
    assert int(buffer.getvalue()) == number


def test_put_number_negative_has_minus_sign():
    buffer = io.StringIO()
    put_number(-5, buffer)
    assert buffer.getvalue().startswith("-")


@pytest.mark.parametrize("number", [INT_MAX + 1, INT_MIN - 1])
def test_put_number_out_of_range(number):
    with pytest.raises(OverflowError):
        put_number(number, io.StringIO())


def test_terminate_without_message(capsys):
    with pytest.raises(SystemExit) as excinfo:
        terminate()
    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_terminate_success_prints_to_stdout(capsys):
    with pytest.raises(SystemExit) as excinfo:
        terminate("bye", True)
    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == "bye\n"
    assert captured.err == ""


def test_terminate_failure_prints_to_stderr(capsys):
    with pytest.raises(SystemExit) as excinfo:
        terminate("bad input", False)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.err == "bad input"
    assert captured.out == "\n"