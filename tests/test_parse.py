import pytest

from soshell.parse import parse_line


def test_simple_words():
    assert parse_line("ls -l /tmp") == ["ls", "-l", "/tmp"]


def test_multiple_and_mixed_whitespace():
    assert parse_line("  calc\t2.0   +\v3.0 \r") == ["calc", "2.0", "+", "3.0"]


def test_empty_line_has_no_arguments():
    assert parse_line("") == []


def test_only_whitespace_has_no_arguments():
    assert parse_line(" \t \n") == []


@pytest.mark.parametrize("words", [["a"], ["echo", "x", "|", "wc"], ["cd", "-"]])
def test_join_round_trip(words):
    assert parse_line(" ".join(words)) == words


def test_no_token_contains_whitespace():
    tokens = parse_line("a  b\tc\nd")
    assert all(not any(ch.isspace() for ch in token) for token in tokens)
    assert len(tokens) == 4