import pytest
from rave.arrays import bump, bump_join, compact, filter_map, join_unique, merge_all, to_array
from rave.errors import RaveWarning


class Point:
	def __init__(self):
		self.x = 1
		self.y = 2


def test_to_array():
	assert to_array("abc") == ["abc"]
	assert to_array("abc", "b") == ["a", "c"]
	assert to_array(["abc"]) == ["abc"]
	assert to_array(2013, 1) == ["20", "3"]
	assert to_array(None) == []
	assert to_array(True) == [True]
	assert to_array((1, 2)) == [1, 2]


def test_to_array_ignores_unusable_delimiter():
	assert to_array("a,b", "") == ["a,b"]
	assert to_array("a,b", True) == ["a,b"]


def test_to_array_collections_contribute_values():
	assert to_array({"a": 1, "b": 2}) == [1, 2]
	assert to_array(Point()) == [1, 2]


def test_filter_map_transforms_passing_items():
	result = filter_map(lambda v: isinstance(v, int), lambda v: v * 10, [1, "a", 2])
	assert result == [10, "a", 20]


def test_filter_map_requires_exact_true():
	result = filter_map(lambda v: 1, lambda v: "changed", ["a"])
	assert result == ["a"]


def test_filter_map_extra_args():
	result = filter_map(lambda v: isinstance(v, str), lambda v, a, b: a + v + b, ["x", 3], "<", ">")
	assert result == ["<x>", 3]


def test_filter_map_mapping():
	result = filter_map(lambda v: isinstance(v, str), str.upper, {"k": "v", "n": 1})
	assert result == {"k": "V", "n": 1}


def test_filter_map_rejects_non_callables():
	with pytest.warns(RaveWarning, match="must be callable"):
		assert filter_map("nope", str.strip, ["a"]) is False
	with pytest.warns(RaveWarning, match="must be callable"):
		assert filter_map(callable, None, ["a"]) is False


def test_filter_map_rejects_non_collections():
	with pytest.warns(RaveWarning, match="must be a list or mapping"):
		assert filter_map(callable, str, "abc") is False


def test_filter_map_propagates_callback_errors():
	def boom(_):
		raise ValueError("boom")

	with pytest.raises(ValueError):
		filter_map(boom, str, ["a"])


def test_compact():
	assert compact([" ", "a", "", None, False, "b "]) == ["a", "b"]
	assert compact(["\tx\n", 3, 0]) == ["x", 3]
	assert compact({"a": " ", "b": " y"}) == {"b": "y"}


def test_merge_all_with_dust_delimiter():
	assert merge_all(",", "a,b", ["c"], "d") == ["a", "b", "c", "d"]


def test_merge_all_without_delimiter():
	assert merge_all("a,b", ["c"], None, 4) == ["a,b", "c", 4]
	assert merge_all() == []


def test_join_unique():
	assert join_unique("-", "a-b", ["b", "c"]) == "a-b-c"
	assert join_unique(" ", "x y", " y z ", ["", "x"]) == "x y z"


def test_join_unique_dedupes_by_text():
	assert join_unique(",", [1, "1", 2]) == "1,2"


def test_join_unique_without_glue():
	assert join_unique(False, ["a", "b"], "c") == "abc"


def test_bump_plain_separator():
	assert bump({"foo": "1", "bar": "2"}, ": ", True, False) == ["foo: 1", "bar: 2"]


def test_bump_quote_separator_closes_value():
	assert bump({"a": "x"}, ': "') == ['a: "x"']


def test_bump_mirrors_separator_brackets():
	assert bump({"a": 1}, "=[") == ["a=[1]"]
	assert bump({"a": 1}, "]=[", True, True) == ["[a]=[1]"]


def test_bump_explicit_edges_and_no_separator():
	assert bump({"a": 1}, False, ";", "$") == ["$a1;"]
	assert bump({"a": 1}, "=", False) == ["a=1"]


def test_bump_sequence_uses_indices():
	assert bump(["x", "y"], "=", False) == ["0=x", "1=y"]


def test_bump_join():
	assert bump_join(", ", {"foo": "1", "bar": "2"}, ": ", True, False) == "foo: 1, bar: 2"
	assert bump_join(" ", {"id": "main"}, '="') == 'id="main"'


def test_compact_drops_zero_string():
	assert compact(["0", " 0 ", "a", 0]) == ["a"]
	assert join_unique("-", "0-a") == "a"
