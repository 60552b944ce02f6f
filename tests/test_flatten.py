"""
Unit tests for the comma-joining field flattener
"""
import pytest

from movieShipper.metadata.core.errors import ParseError
from movieShipper.metadata.core.flatten import flatten_named_list, require, require_text


def people(*names):
    return [{"peopleNm": n} for n in names]


def test_limit_truncates_in_order():
    assert flatten_named_list(people(*"ABCDEFG"), "peopleNm", 5) == "A,B,C,D,E"


def test_fewer_than_limit_returns_all():
    assert flatten_named_list(people("A", "B", "C"), "peopleNm", 5) == "A,B,C"


def test_exactly_limit():
    assert flatten_named_list(people(*"ABCDE"), "peopleNm", 5) == "A,B,C,D,E"


def test_empty_array_gives_empty_string():
    assert flatten_named_list([], "peopleNm", 5) == ""


def test_unbounded_keeps_everything():
    genres = [{"genreNm": g} for g in ("액션", "드라마", "코미디", "스릴러", "범죄", "사극", "멜로")]
    assert flatten_named_list(genres, "genreNm") == "액션,드라마,코미디,스릴러,범죄,사극,멜로"


def test_entries_past_limit_are_not_inspected():
    items = people(*"ABCDE") + [{"somethingElse": 1}]
    assert flatten_named_list(items, "peopleNm", 5) == "A,B,C,D,E"


def test_missing_name_key_names_the_entry():
    with pytest.raises(ParseError) as err:
        flatten_named_list([{"peopleNm": "A"}, {"peopleNmEn": "B"}], "peopleNm", 5, where="actors")
    assert err.value.field == "actors[1].peopleNm"


def test_non_list_rejected():
    with pytest.raises(ParseError):
        flatten_named_list({"peopleNm": "A"}, "peopleNm", 5, where="actors")


def test_non_object_entry_rejected():
    with pytest.raises(ParseError):
        flatten_named_list(["A"], "peopleNm", 5, where="actors")


def test_require_reports_dotted_path():
    with pytest.raises(ParseError) as err:
        require({"a": 1}, "movieNm", "movieInfoResult.movieInfo")
    assert err.value.field == "movieInfoResult.movieInfo.movieNm"
    assert "movieInfoResult.movieInfo.movieNm" in str(err.value)


def test_require_text_rejects_nested_values():
    with pytest.raises(ParseError):
        require_text({"movieNm": ["x"]}, "movieNm", "")


def test_require_text_keeps_empty_strings():
    assert require_text({"openDt": ""}, "openDt", "") == ""
