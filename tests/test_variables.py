import pytest

from minishparse.variables import (
    count_non_identifier,
    expand_digit,
    expand_heredoc_parts,
    expand_variable,
    temp_heredoc_path,
)

ENV = {"HOME": "/home/user", "USER": "alice", "EMPTY": None}


def test_plain_variable():
    assert expand_variable("HOME", ENV, 0) == "/home/user"


def test_unset_variable_is_none():
    assert expand_variable("NOPE", ENV, 0) is None


def test_variable_without_value_is_none():
    assert expand_variable("EMPTY", ENV, 0) is None


def test_status_variable():
    assert expand_variable("?", ENV, 42) == "42"


def test_status_followed_by_text():
    assert expand_variable("?abc", ENV, 7) == "7abc"


def test_name_followed_by_special_character():
    assert expand_variable("HOME/docs", ENV, 0) == "/home/user/docs"


def test_unset_name_followed_by_special_character():
    assert expand_variable("NOPE.txt", ENV, 0) == ".txt"


def test_expand_digit_drops_first_character():
    assert expand_digit("1abc") == "abc"
    assert expand_digit("0") == ""


@pytest.mark.parametrize(
    "text, expected",
    [("abc_DEF", 0), ("a1", 1), ("", 0), ("$x y", 2)],
)
def test_count_non_identifier(text, expected):
    assert count_non_identifier(text) == expected


def test_temp_heredoc_path_shape():
    path = temp_heredoc_path()
    assert path.startswith("/tmp/.")
    name = path[len("/tmp/."):]
    assert len(name) == 17
    assert set(name) <= set("0123456789ABCDEF")


def test_temp_heredoc_paths_differ():
    assert len({temp_heredoc_path() for _ in range(20)}) > 1


def test_heredoc_parts_expanded():
    parts = ["hello ", "$USER", " at ", "$HOME"]
    assert expand_heredoc_parts(parts, ENV) == "hello alice at /home/user"


def test_heredoc_unset_and_bare_dollar():
    assert expand_heredoc_parts(["$NOPE", "$", "x"], ENV) == "$x"


def test_heredoc_without_variables_is_joined():
    parts = ["a", "b", " c"]
    assert expand_heredoc_parts(parts, ENV) == "".join(parts)