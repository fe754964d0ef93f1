"""Array conversion, merging and joining helpers.

These accept loosely typed input (scalars, delimited strings, lists, mappings)
and normalise it into lists before merging or joining.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Literal

from rave.brackets import mirror
from rave.classify import can_split, humanize, is_dust, is_human
from rave.errors import report_misuse
from rave.kinds import TRIM_CHARS, Kind, kind_of, to_text


def to_array(value: Any, delimiter: Any = False) -> list[Any]:
	"""Convert anything to a list.

	>>> to_array("abc"), to_array("abc", "b"), to_array(["abc"])
	(['abc'], ['a', 'c'], ['abc'])

	Mappings and plain objects contribute their values. ``None`` becomes an
	empty list and any other scalar a one-element list.
	"""
	if is_human(value) and can_split(delimiter):
		return to_text(value).split(to_text(delimiter))

	kind = kind_of(value)
	if kind is Kind.ABSENT:
		return []
	if kind is Kind.SEQUENCE:
		return list(value)
	if kind is Kind.MAPPING:
		return list(value.values())
	if kind is Kind.OBJECT and hasattr(value, "__dict__"):
		return list(vars(value).values())
	return [value]


def filter_map(
	test: Callable[[Any], Any],
	transform: Callable[..., Any],
	items: Any,
	*args: Any,
) -> list[Any] | dict[Any, Any] | Literal[False]:
	"""Replace every item for which ``test(item) is True`` with
	``transform(item, *args)``. Items failing the test are kept as they are.

	Returns False (with a :class:`~rave.errors.RaveWarning`) when ``test`` or
	``transform`` is not callable or ``items`` is not a list, tuple or mapping.
	"""
	if not callable(test) or not callable(transform):
		report_misuse("filter_map", "parameters 1 and 2 must be callable")
		return False

	def apply(item: Any) -> Any:
		return transform(item, *args) if test(item) is True else item

	kind = kind_of(items)
	if kind is Kind.MAPPING:
		return {key: apply(item) for key, item in items.items()}
	if isinstance(items, (list, tuple)):
		return [apply(item) for item in items]

	report_misuse("filter_map", "parameter 3 must be a list or mapping")
	return False


def _is_string(item: Any) -> bool:
	return isinstance(item, str)


def _trim(item: str) -> str:
	return item.strip(TRIM_CHARS)


def _kept(item: Any) -> bool:
	# "0" counts as empty, as in template-engine array filters
	return bool(item) and item != "0"


def compact(items: Any) -> Any:
	"""Trim string items, then drop every item that is empty, falsy or ``"0"``."""
	trimmed = filter_map(_is_string, _trim, items)
	if trimmed is False:
		return False
	if isinstance(trimmed, dict):
		return {key: item for key, item in trimmed.items() if _kept(item)}
	return [item for item in trimmed if _kept(item)]


def _concat(values: Iterable[Any], delimiter: Any) -> list[Any]:
	merged: list[Any] = []
	for value in values:
		merged.extend(to_array(value, delimiter))
	return merged


def merge_all(*args: Any) -> list[Any]:
	"""Convert every argument to a list and concatenate them in order.

	A leading argument made only of punctuation/whitespace is used as the
	delimiter for splitting the string arguments that follow.
	"""
	values = list(args)
	delimiter: Any = False
	if values and is_dust(values[0]):
		delimiter = values.pop(0)
	return _concat(values, delimiter)


def join_unique(glue: Any, *args: Any) -> str:
	"""Merge the arguments (splitting strings on ``glue``), drop empties and
	duplicates, then join with ``glue``.

	>>> join_unique("-", "a-b", ["b", "c"])
	'a-b-c'
	"""
	glue = humanize(glue)
	merged = compact(_concat(args, glue))

	seen: set[str] = set()
	pieces: list[str] = []
	for item in merged:
		if not is_human(item):
			continue
		text = to_text(item)
		if text in seen:
			continue
		seen.add(text)
		pieces.append(text)
	return to_text(glue).join(pieces)


def _edge(char: str, option: Any) -> str:
	if option is not True:
		return to_text(humanize(option))
	# whitespace has no counterpart
	if char.strip(TRIM_CHARS) == "":
		return ""
	return mirror(char)


def bump(
	data: Any,
	separator: Any = False,
	after: Any = True,
	before: Any = False,
) -> list[str]:
	"""Turn each key/value pair into ``before + key + separator + value + after``.

	When ``after`` (or ``before``) is True it is derived from the last (first)
	character of ``separator`` through :func:`~rave.brackets.mirror`, so a
	separator of ``': "'`` closes every value with ``"``.
	"""
	sep = to_text(separator) if can_split(separator) else ""
	first, last = sep[:1], sep[-1:]

	opening = _edge(first, before)
	closing = _edge(last, after)

	if isinstance(data, Mapping):
		pairs = data.items()
	else:
		pairs = enumerate(to_array(data))
	return [opening + to_text(key) + sep + to_text(value) + closing for key, value in pairs]


def bump_join(
	glue: Any,
	data: Any,
	separator: Any = False,
	after: Any = True,
	before: Any = False,
) -> str:
	"""Run :func:`bump` and join the result with ``glue``."""
	return to_text(humanize(glue)).join(bump(data, separator, after, before))
