import pytest

from pushswap.textops import (
    itoa,
    split,
    strdup,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


def test_strdup_copies_whole_string():
    assert strdup("hello") == "hello"


def test_strdup_stops_at_terminator():
    assert strdup("ab\0cd") == "ab"


def test_substr_full_range_is_identity():
    text = "hello world"
    assert substr(text, 0, len(text)) == text


def test_substr_never_longer_than_length():
    text = "hello world"
    for start in range(len(text) + 2):
        assert len(substr(text, start, 3)) <= 3


def test_substr_start_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_pieces_rebuild_the_string():
    text = "abcdefgh"
    pieces = [substr(text, start, 3) for start in range(0, len(text), 3)]
    assert "".join(pieces) == text


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foo" + "bar"


def test_strjoin_with_empty_parts():
    assert strjoin("", "x") == "x"
    assert strjoin("x", "") == "x"


def test_split_drops_empty_words():
    assert split("  a b  c ", " ") == ["a", "b", "c"]


def test_split_only_separators_gives_nothing():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_rejoin_round_trip():
    text = "one,two,three"
    assert ",".join(split(text, ",")) == text


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strmapi_applies_function():
    assert strmapi("abc", lambda _i, c: c.upper()) == "ABC"


def test_strmapi_passes_indexes_in_order():
    seen = []
    strmapi("xyz", lambda i, c: seen.append(i) or c)
    assert seen == list(range(len("xyz")))


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda _i, c: c.upper())
    assert chars == list("ABC")


def test_striteri_none_leaves_characters():
    chars = list("abc")
    striteri(chars, lambda _i, _c: None)
    assert chars == list("abc")


def test_striteri_stops_at_terminator():
    chars = ["a", "\0", "b"]
    striteri(chars, lambda _i, c: c.upper())
    assert chars == ["A", "\0", "b"]


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything():
    assert strtrim("xyxy", "xy") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("abc", "") == "abc"


def test_itoa_zero_and_limits():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"


@pytest.mark.parametrize("n", [1, -1, 42, -999, 123456789])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)