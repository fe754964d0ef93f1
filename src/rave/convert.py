"""Rendering Python data as JavaScript array/object literal text.

Values are quoted and then passed through :func:`~rave.pad.unquote`, so
strings that already read as literals (numbers, booleans, ``null``, arrays,
objects, functions) end up bare in the output::

	>>> data_to_js(["a", 1, "true", "function(){ go(); }"])
	'["a", 1, true, function(){ go(); }]'
	>>> data_to_js({"id": 7, "name": "x"}, "{", quote=1)
	"{id: 7, name: 'x'}"
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Literal

from rave.arrays import bump
from rave.brackets import mirror
from rave.errors import report_misuse
from rave.ident import is_valid_id
from rave.kinds import Kind, kind_of, to_text
from rave.pad import affix, unquote

logger = logging.getLogger(__name__)

QUOTES = {1: "'", 2: '"'}
_NOT_GROUPING = re.compile(r"[^\[\{]")


def _quote_char(quote: Any) -> str:
	if isinstance(quote, bool):
		return QUOTES[2]
	return QUOTES.get(quote, QUOTES[2])


def _clean_grouping(grouping: Any) -> str:
	if not isinstance(grouping, str):
		return ""
	return _NOT_GROUPING.sub("", grouping)


def _jsonable(value: Any) -> Any:
	kind = kind_of(value)
	if kind is Kind.MAPPING:
		return {to_text(key): _jsonable(item) for key, item in value.items()}
	if kind is Kind.SEQUENCE:
		return [_jsonable(item) for item in value]
	if kind is Kind.OBJECT:
		return str(value)
	return value


def _script_value(value: Any) -> Any:
	kind = kind_of(value)
	if kind is Kind.ABSENT:
		return "null"
	if kind is Kind.BOOLEAN:
		return "true" if value else "false"
	if kind in (Kind.SEQUENCE, Kind.MAPPING):
		return json.dumps(_jsonable(value))
	if kind is Kind.OBJECT:
		return str(value)
	return value


def _is_collection(data: Any) -> bool:
	return isinstance(data, (list, tuple, Mapping))


def data_to_js(data: Any, grouping: Any = "[", quote: Any = 2) -> str | Literal[False]:
	"""Convert a one-dimensional list or mapping into a script literal.

	``grouping`` is ``"{"`` for an object literal (mapping keys become
	property names) or ``"["`` for an array literal. ``quote`` is ``1`` for
	single quotes or ``2`` for double quotes.
	"""
	if not _is_collection(data):
		logger.debug("data_to_js: not a list or mapping: %r", type(data).__name__)
		return False
	return _emit(data, grouping, quote)


def _emit(data: list[Any] | tuple[Any, ...] | Mapping[Any, Any], grouping: Any, quote: Any) -> str:
	q = _quote_char(quote)
	group = _clean_grouping(grouping)

	if isinstance(data, Mapping):
		values: Any = {key: _script_value(value) for key, value in data.items()}
	else:
		values = [_script_value(value) for value in data]

	if group == "{":
		parts = bump(values, ": " + q)
	else:
		group = "["
		padded = affix(values, q, q)
		parts = list(padded.values()) if isinstance(padded, dict) else padded

	return unquote(group + ", ".join(str(part) for part in parts) + mirror(group))


def each_to_js(data: Any, grouping: Any = "[", quote: Any = 2) -> str | Literal[False]:
	"""Multidimensional :func:`data_to_js`.

	``grouping`` is a series of opening brackets such as ``"{["`` giving the
	bracket for each nesting depth, outermost first. Depths past the end of
	the series reuse its last bracket.
	"""
	if not _is_collection(data):
		report_misuse("each_to_js", "parameter 1 must be a list or mapping")
		return False

	groups = _clean_grouping(grouping)
	if groups == "":
		report_misuse(
			"each_to_js",
			"parameter 2 must be a series of opening brackets such as {[, [[, or [{{"
			+ " that represents the structure of the desired output",
		)
		return False

	return _render(data, groups, 0, quote)


def _render(data: Any, groups: str, depth: int, quote: Any) -> str:
	if depth >= len(groups):
		logger.debug("each_to_js: depth %d reuses grouping %r", depth, groups[-1])
	group = groups[min(depth, len(groups) - 1)]

	def inner(value: Any) -> Any:
		if _is_collection(value):
			return _render(value, groups, depth + 1, quote)
		return value

	if isinstance(data, Mapping):
		converted: Any = {key: inner(value) for key, value in data.items()}
	else:
		converted = [inner(value) for value in data]

	return _emit(converted, group, quote)


def data_to_json(
	data: Any,
	attr: Any = False,
	*,
	indent: int | None = None,
	sort_keys: bool = False,
) -> str:
	"""Encode ``data`` as JSON.

	When ``attr`` is a valid identifier the result is formatted as an HTML
	attribute: ``attr='{"a": 1}'``.
	"""
	encoded = json.dumps(_jsonable(data), indent=indent, sort_keys=sort_keys)
	if is_valid_id(attr):
		return f"{attr}='{encoded}'"
	return encoded
