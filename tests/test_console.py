import io

import pytest

from aventura.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_read_word_splits_on_any_whitespace():
    console, _ = make("mers  nord\n\n  inventar\n")
    assert [console.read_word() for _ in range(3)] == ["mers", "nord", "inventar"]


def test_read_word_at_end_of_input_raises():
    console, _ = make("unu\n")
    assert console.read_word() == "unu"
    with pytest.raises(EOFError):
        console.read_word()


def test_read_word_without_trailing_newline():
    console, _ = make("ultimul")
    assert console.read_word() == "ultimul"


def test_read_line_after_word_skips_rest_of_line():
    console, _ = make("foloseste\nPotiune de viata\n")
    assert console.read_word() == "foloseste"
    assert console.read_line() == "Potiune de viata"


def test_read_line_at_end_returns_empty():
    console, _ = make("")
    assert console.read_line() == ""


def test_write_goes_to_output():
    console, out = make("")
    console.write("Actiunea ta este ")
    console.write("x\n")
    assert out.getvalue() == "Actiunea ta este x\n"