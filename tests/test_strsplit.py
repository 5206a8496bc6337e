import pytest

from dsakit.dynstr import DynStr
from dsakit.strsplit import join_list, str_split


def _texts(parts):
    return [str(p) for p in parts]


def test_split_on_every_separator():
    assert _texts(str_split("a,b,c", ",")) == ["a", "b", "c"]


def test_split_returns_dynstr_parts():
    parts = str_split("x;y", ";")
    assert all(isinstance(p, DynStr) for p in parts)
    assert len(parts) == 2


def test_split_without_separator_gives_whole_text():
    assert _texts(str_split("hello", ",")) == ["hello"]


def test_split_empty_text_gives_one_empty_part():
    assert _texts(str_split("", ",")) == [""]


def test_split_keeps_empty_parts_at_edges():
    assert _texts(str_split(",a,", ",")) == ["", "a", ""]


def test_split_multi_character_separator():
    assert _texts(str_split("one::two::three", "::")) == ["one", "two", "three"]


def test_max_split_limits_count():
    parts = _texts(str_split("a,b,c,d", ",", 2))
    assert parts == ["a", "b,c,d"]


def test_max_split_one_returns_whole_text():
    assert _texts(str_split("a,b,c", ",", 1)) == ["a,b,c"]


@pytest.mark.parametrize("limit", [0, -1, -5])
def test_non_positive_max_split_is_unlimited(limit):
    assert len(str_split("a,b,c,d", ",", limit)) == 4


@pytest.mark.parametrize("limit", [1, 2, 3, 4, 10])
def test_max_split_never_exceeded(limit):
    text = "p|q|r|s"
    parts = str_split(text, "|", limit)
    assert len(parts) == min(limit, 4)
    assert "|".join(_texts(parts)) == text


def test_empty_separator_rejected():
    with pytest.raises(ValueError):
        str_split("abc", "")


@pytest.mark.parametrize(
    "text,sep",
    [("a,b,c", ","), ("", ","), (",,", ","), ("key=value=more", "="), ("abab", "ab")],
)
def test_split_then_join_round_trip(text, sep):
    joined = join_list(str_split(text, sep), sep)
    assert str(joined) == text


def test_join_into_new_string():
    result = join_list(["a", DynStr("b"), "c"], "-")
    assert str(result) == "a-b-c"
    assert result.capacity() >= len(result)


def test_join_appends_to_destination():
    dest = DynStr("head:")
    result = join_list(["x", "y"], ",", dest)
    assert result is dest
    assert str(dest) == "head:x,y"


def test_join_empty_list_leaves_destination_unchanged():
    dest = DynStr("keep")
    join_list([], ",", dest)
    assert str(dest) == "keep"
    assert str(join_list([], ",")) == ""


def test_join_single_part_has_no_separator():
    assert str(join_list(["only"], ", ")) == "only"