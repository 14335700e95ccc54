import io

import pytest

from boxkeeper.console import Console, InputExhausted


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_tokens_span_lines():
    console, _ = make_console("alpha beta\n  gamma\n")
    assert [console.next_token() for _ in range(3)] == ["alpha", "beta", "gamma"]


def test_token_at_end_raises():
    console, _ = make_console("only\n")
    console.next_token()
    with pytest.raises(InputExhausted):
        console.next_token()


def test_next_int_reads_prefix():
    console, _ = make_console("12abc\n")
    assert console.next_int() == 12
    assert console.next_token() == "abc"


def test_next_int_failure_leaves_token():
    console, _ = make_console("abc 5\n")
    with pytest.raises(ValueError):
        console.next_int()
    assert console.next_token() == "abc"
    assert console.next_int() == 5


def test_next_int_signed():
    console, _ = make_console("-7 +3\n")
    assert (console.next_int(), console.next_int()) == (-7, 3)


@pytest.mark.parametrize("text,expected", [("2.5", 2.5), ("4", 4.0), (".5", 0.5), ("1e2", 100.0)])
def test_next_float(text, expected):
    console, _ = make_console(text + "\n")
    assert console.next_float() == expected


def test_next_float_failure():
    console, _ = make_console("wide\n")
    with pytest.raises(ValueError):
        console.next_float()


def test_read_line_after_number_returns_rest():
    console, _ = make_console("3\nnext line here\n")
    assert console.next_int() == 3
    assert console.read_line() == ""
    assert console.read_line() == "next line here"


def test_read_line_keeps_spaces():
    console, _ = make_console("  padded words \n")
    assert console.read_line() == "  padded words "


def test_read_line_without_final_newline():
    console, _ = make_console("tail")
    assert console.read_line() == "tail"
    with pytest.raises(InputExhausted):
        console.read_line()


def test_skip_line_discards_rest():
    console, _ = make_console("bad input here\n42\n")
    with pytest.raises(ValueError):
        console.next_int()
    console.skip_line()
    assert console.next_int() == 42


def test_skip_line_at_end_is_quiet():
    console, _ = make_console("")
    console.skip_line()
    with pytest.raises(InputExhausted):
        console.next_token()


def test_write_and_say():
    console, out = make_console("")
    console.write("Prompt: ")
    console.say("done")
    assert out.getvalue() == "Prompt: done\n"