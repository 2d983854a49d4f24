import io

import pytest

from memorpg.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_write_goes_to_stdout():
    console, out = make("")
    console.write("hello")
    console.write(" world")
    assert out.getvalue() == "hello world"


def test_read_token_splits_on_whitespace_across_lines():
    console, _ = make("alpha  beta\n\n   gamma\n")
    assert [console.read_token() for _ in range(3)] == ["alpha", "beta", "gamma"]


def test_read_token_at_end_raises_eof():
    console, _ = make("only\n")
    console.read_token()
    with pytest.raises(EOFError):
        console.read_token()


def test_read_int_parses_signed_numbers():
    console, _ = make("4 -2 +7\n")
    assert console.read_ints(3) == [4, -2, 7]


def test_read_int_rejects_and_consumes_bad_token():
    console, _ = make("abc 3\n")
    with pytest.raises(ValueError):
        console.read_int()
    assert console.read_int() == 3


def test_read_ints_stops_at_first_bad_token():
    console, _ = make("2 x 5\n")
    with pytest.raises(ValueError):
        console.read_ints(2)
    assert console.read_int() == 5


def test_discard_line_drops_rest_of_line():
    console, _ = make("1 2 3\n4\n")
    assert console.read_int() == 1
    console.discard_line()
    assert console.read_int() == 4


def test_discard_line_after_last_token_keeps_next_line():
    console, _ = make("1\n2\n")
    assert console.read_int() == 1
    console.discard_line()
    assert console.read_int() == 2


def test_discard_line_with_nothing_pending_reads_a_line():
    console, _ = make("skip me\n9\n")
    console.discard_line()
    assert console.read_int() == 9