import logging
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from deepform.errors import InvalidPathError
from deepform.parser import ParseOptions, parse_form_data


class _Blob:
    """Stand-in for an uploaded file."""


def test_top_level_assignments() -> None:
    assert parse_form_data([("a", "1"), ("b", "2"), ("c", "3")]) == {"a": "1", "b": "2", "c": "3"}


def test_nested_assignments() -> None:
    data = [("a.b", "1"), ("a.c", "2"), ("a.d.0", "0"), ("a.d.1", "1")]
    assert parse_form_data(data) == {"a": {"b": "1", "c": "2", "d": ["0", "1"]}}


def test_array_assignments_preserve_order() -> None:
    data = [("a[]", "1"), ("a[]", "2"), ("a[]", "3")]
    assert parse_form_data(data) == {"a": ["1", "2", "3"]}


def test_nested_array_assignments_with_mixed_keys() -> None:
    data = [("a.b[]", "1"), ("a.b[]", "2"), ("a.c", "3")]
    assert parse_form_data(data) == {"a": {"b": ["1", "2"], "c": "3"}}


def test_interleaved_arrays_accumulate_per_path() -> None:
    data = [("a[]", "1"), ("b[]", "x"), ("a[]", "2"), ("b[]", "y")]
    assert parse_form_data(data) == {"a": ["1", "2"], "b": ["x", "y"]}


def test_number_cast() -> None:
    assert parse_form_data([("+a", "1"), ("+b", "2.2"), ("+c", "3.33")]) == {"a": 1, "b": 2.2, "c": 3.33}


def test_number_cast_of_non_numeric_string_is_nan() -> None:
    result = parse_form_data([("+a", "abc")])
    assert math.isnan(result["a"])


def test_boolean_cast() -> None:
    result = parse_form_data([("&a", "1"), ("&b", "true"), ("&c", "on"), ("&d", "0"), ("&e", "xyz")])
    assert result == {"a": True, "b": True, "c": True, "d": False, "e": True}
    assert all(isinstance(value, bool) for value in result.values())


def test_nested_mixed_assignments() -> None:
    data = [
        ("a.b", "1"),
        ("+a.c", "2"),
        ("&a.d", "true"),
        ("a.e.0", "0"),
        ("&a.e.1", "1"),
        ("+a.e.2", "2"),
    ]
    result = parse_form_data(data)
    assert result == {"a": {"b": "1", "c": 2, "d": True, "e": ["0", True, 2]}}
    assert result["a"]["e"][1] is True


def test_array_mixed_assignments_cast_each_element() -> None:
    result = parse_form_data([("a[]", "1"), ("+a[]", "2"), ("&a[]", "true")])
    assert result == {"a": ["1", 2, True]}
    assert result["a"][2] is True


def test_nested_array_mixed_assignments() -> None:
    data = [
        ("a.b[]", "1"),
        ("+a.b[]", "2"),
        ("&a.b[]", "true"),
        ("a.c.0[]", "foo"),
        ("a.c.0[]", "bar"),
    ]
    assert parse_form_data(data) == {"a": {"b": ["1", 2, True], "c": [["foo", "bar"]]}}


def test_nested_array_mixed_assignments_with_mixed_keys() -> None:
    data = [
        ("a", "0"),
        ("b.c[]", "1"),
        ("+b.c[]", "2"),
        ("&b.d", "on"),
        ("e.0", "3"),
        ("e.1", "4"),
    ]
    assert parse_form_data(data) == {"a": "0", "b": {"c": ["1", 2], "d": True}, "e": ["3", "4"]}


def test_repeated_plain_key_last_value_wins() -> None:
    assert parse_form_data([("a", "1"), ("a", "2")]) == {"a": "2"}


def test_empty_input_returns_empty_dict() -> None:
    assert parse_form_data([]) == {}
    assert parse_form_data("") == {}


def test_empty_strings_are_kept_by_default() -> None:
    assert parse_form_data([("a", ""), ("b[]", "")]) == {"a": "", "b": [""]}


def test_omit_empty_strings() -> None:
    data = [("a", "1"), ("b", ""), ("c", "3"), ("d[]", ""), ("d[]", "0"), ("&e", "")]
    assert parse_form_data(data, omit_empty_strings=True) == {"a": "1", "c": "3", "d": ["0"]}


def test_omit_empty_strings_through_options() -> None:
    data = [("a", ""), ("b", "0")]
    assert parse_form_data(data, options=ParseOptions(omit_empty_strings=True)) == {"b": "0"}
    assert parse_form_data(data, omit_empty_strings=False, options=ParseOptions(omit_empty_strings=True)) == {
        "a": "",
        "b": "0",
    }


def test_blobs_pass_through_uncast() -> None:
    upload = _Blob()
    other = _Blob()
    result = parse_form_data([("doc", upload), ("+n", other), ("files[]", upload)], omit_empty_strings=True)
    assert result["doc"] is upload
    assert result["n"] is other
    assert result["files"] == [upload]


def test_consumes_generators_in_order() -> None:
    entries = (("+a[]", str(i)) for i in range(5))
    assert parse_form_data(entries) == {"a": [0, 1, 2, 3, 4]}


def test_query_string_input() -> None:
    assert parse_form_data("a=1&b=2&c=3") == {"a": "1", "b": "2", "c": "3"}
    assert parse_form_data("?tags[]=x&tags[]=y&%2Bpage=2&%26draft=on") == {
        "tags": ["x", "y"],
        "page": 2,
        "draft": True,
    }


def test_scalar_replaced_by_nested_path() -> None:
    assert parse_form_data([("a", "1"), ("a.b", "2")]) == {"a": {"b": "2"}}


def test_empty_paths_propagate_errors() -> None:
    with pytest.raises(InvalidPathError):
        _ = parse_form_data([("", "x")])
    with pytest.raises(InvalidPathError):
        _ = parse_form_data([("+[]", "1")])


def test_key_on_list_is_dropped() -> None:
    assert parse_form_data([("a.0", "x"), ("a.b", "y"), ("a.1", "z")]) == {"a": ["x", "z"]}


def test_huge_index_does_not_allocate() -> None:
    result = parse_form_data("a.10000000=x&b.0=y&b.99999999999=z")
    assert result == {"a": [], "b": ["y"]}


def test_logs_summary_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="deepform.parser"):
        _ = parse_form_data([("a", ""), ("b[]", "1")], omit_empty_strings=True)
    assert "1 top-level keys, 1 arrays, 1 empty entries skipped" in caplog.text


def test_docstring_example() -> None:
    data = [("a", "0"), ("b.c[]", "1"), ("+b.c[]", "2"), ("&b.d", "on")]
    assert parse_form_data(data) == {"a": "0", "b": {"c": ["1", 2], "d": True}}


@given(st.lists(st.text(max_size=10), max_size=20))
def test_array_values_keep_input_order(values: list[str]) -> None:
    result = parse_form_data([("a.b[]", value) for value in values])
    assert result == ({"a": {"b": values}} if values else {})


@given(st.lists(st.text(max_size=5), max_size=20))
def test_omit_empty_strings_never_leaves_empty_values(values: list[str]) -> None:
    result = parse_form_data([("a[]", value) for value in values], omit_empty_strings=True)
    assert result.get("a", []) == [value for value in values if value != ""]
