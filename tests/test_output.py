import io

import pytest

from pipex.numbers import INT_MAX, INT_MIN, itoa
from pipex.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("c", buf)
    assert buf.getvalue() == "c"


def test_put_char_sequence_builds_string():
    buf = io.StringIO()
    for ch in "Prueba":
        put_char(ch, buf)
    assert buf.getvalue() == "Prueba"


def test_put_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("Prueba", buf)
    put_str("", buf)
    assert buf.getvalue() == "Prueba"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("Prueba", buf)
    assert buf.getvalue() == "Prueba" + "\n"


def test_put_endl_of_empty_string():
    buf = io.StringIO()
    put_endl("", buf)
    assert buf.getvalue() == "\n"


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 9, 10, -1, 49, INT_MAX, INT_MIN])
def test_put_nbr_matches_itoa(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == itoa(n)


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(INT_MAX + 1, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("hi")
    put_char("!")
    put_endl("")
    assert capsys.readouterr().out == "hi!\n"