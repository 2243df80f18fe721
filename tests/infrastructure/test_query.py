"""Tests for the query string encoder."""
from __future__ import annotations

from urllib.parse import parse_qsl

from efa_mcp.domain.value_objects import StationType
from efa_mcp.infrastructure.query import build_query_string


def test_empty_mapping_returns_empty_string() -> None:
    assert build_query_string({}) == ""


def test_only_none_values_returns_empty_string() -> None:
    assert build_query_string({"a": None, "b": None}) == ""


def test_none_values_are_dropped() -> None:
    result = build_query_string({"name_dm": "5006118", "limit": None})
    assert result == "?name_dm=5006118"
    assert "limit" not in result


def test_list_value_repeats_key_in_order() -> None:
    result = build_query_string({"includedMeans": [4, 1, 5]})
    assert result == "?includedMeans=4&includedMeans=1&includedMeans=5"


def test_tuple_value_repeats_key() -> None:
    result = build_query_string({"k": ("a", "b")})
    assert result.count("k=") == 2


def test_empty_list_emits_nothing() -> None:
    assert build_query_string({"excludedMeans": []}) == ""


def test_values_are_percent_encoded() -> None:
    result = build_query_string({"name_sf": "Stuttgart Hbf", "line": "U1|U2"})
    assert result == "?name_sf=Stuttgart%20Hbf&line=U1%7CU2"


def test_keys_are_percent_encoded() -> None:
    assert build_query_string({"a b": 1}) == "?a%20b=1"


def test_umlauts_are_utf8_encoded() -> None:
    assert build_query_string({"name_destination": "Tübingen"}) == "?name_destination=T%C3%BCbingen"


def test_unreserved_marks_are_kept() -> None:
    assert build_query_string({"x": "a-b_c.d!e~f*g'h(i)"}) == "?x=a-b_c.d!e~f*g'h(i)"


def test_brackets_and_colons_are_encoded() -> None:
    result = build_query_string({"coordOutputFormat": "WGS84[DD.ddddd]", "coord": "9.18:48.78"})
    assert dict(parse_qsl(result[1:])) == {
        "coordOutputFormat": "WGS84[DD.ddddd]",
        "coord": "9.18:48.78",
    }
    assert "[" not in result
    assert ":" not in result


def test_booleans_render_as_words() -> None:
    assert build_query_string({"a": True, "b": False}) == "?a=true&b=false"


def test_enum_members_render_as_value() -> None:
    assert build_query_string({"type_sf": StationType.POI}) == "?type_sf=poi"


def test_encoding_is_deterministic() -> None:
    params = {"mode": "direct", "limit": 10, "includedMeans": [1, 2], "skip": None}
    assert build_query_string(params) == build_query_string(dict(params))
