"""Value classification shared by every helper.

Helpers accept values of unknown type. Instead of coercing implicitly, each
value is first tagged with a :class:`Kind` and downstream code branches on the
tag.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any


class Kind(Enum):
	ABSENT = "absent"
	BOOLEAN = "boolean"
	NUMBER = "number"
	STRING = "string"
	SEQUENCE = "sequence"
	MAPPING = "mapping"
	OBJECT = "object"


# Characters stripped by trim() in template engines. Narrower than str.strip().
TRIM_CHARS = " \t\n\r\0\x0b"

_NUMERIC_STRING = re.compile(
	r"[ \t\n\r\v\f]*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?[ \t\n\r\v\f]*"
)


def kind_of(value: Any) -> Kind:
	if value is None:
		return Kind.ABSENT
	# bool before int: bool is an int subclass
	if isinstance(value, bool):
		return Kind.BOOLEAN
	if isinstance(value, (int, float)):
		return Kind.NUMBER
	if isinstance(value, str):
		return Kind.STRING
	if isinstance(value, (list, tuple, set, frozenset)):
		return Kind.SEQUENCE
	if isinstance(value, Mapping):
		return Kind.MAPPING
	return Kind.OBJECT


def is_numeric(value: Any) -> bool:
	"""True for numbers and for strings that spell a decimal number."""
	kind = kind_of(value)
	if kind is Kind.NUMBER:
		return True
	if kind is Kind.STRING:
		return _NUMERIC_STRING.fullmatch(value) is not None
	return False


def to_text(value: Any) -> str:
	"""Render a scalar the way string concatenation in a template would."""
	kind = kind_of(value)
	if kind is Kind.STRING:
		return value
	if kind is Kind.ABSENT:
		return ""
	if kind is Kind.BOOLEAN:
		return "true" if value else "false"
	if kind is Kind.NUMBER:
		if isinstance(value, float) and value.is_integer():
			return str(int(value))
		return str(value)
	return str(value)
