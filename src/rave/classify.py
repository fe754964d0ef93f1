from __future__ import annotations

import string
from typing import Any

from rave.kinds import TRIM_CHARS, Kind, is_numeric, kind_of
from rave.literals import classify_literal

# Each gets replaced by a punctuation character before the punctuation check.
# "\\s" is the two-character sequence, not a regex class.
_DUST_WHITESPACE = (" ", "\\s", "\t", "\n", "\r", "\0", "\x0b")
_PUNCTUATION = frozenset(string.punctuation)


def is_human(value: Any) -> bool:
	"""True for strings and numbers (including ``""`` and ``0``).

	False for sequences, mappings, objects, ``None`` and booleans.
	"""
	return kind_of(value) in (Kind.STRING, Kind.NUMBER)


def humanize(value: Any) -> Any:
	"""Return ``value`` if it is human, else the empty string.

	>>> humanize(1000), humanize("dj"), humanize([8]), humanize(None), humanize(0)
	(1000, 'dj', '', '', 0)
	"""
	return value if is_human(value) else ""


def can_split(value: Any) -> bool:
	"""True when ``value`` can be used as a delimiter to split a string."""
	return is_human(value) and value != ""


def is_dust(value: Any) -> bool:
	"""True for non-empty strings made only of punctuation and/or whitespace."""
	if kind_of(value) is not Kind.STRING:
		return False
	for ws in _DUST_WHITESPACE:
		value = value.replace(ws, "#")
	return value != "" and all(ch in _PUNCTUATION for ch in value)


def is_void(value: Any) -> bool:
	"""True unless ``value`` is a string with non-whitespace content.

	Numbers, booleans and containers are all void.
	"""
	return kind_of(value) is not Kind.STRING or value.strip(TRIM_CHARS) == ""


def is_literal(value: Any) -> bool:
	"""True when ``value`` would read as a JavaScript literal if emitted bare."""
	kind = kind_of(value)
	if kind is Kind.ABSENT:
		return False
	if kind is Kind.BOOLEAN or is_numeric(value):
		return True
	if kind is not Kind.STRING:
		return False
	return classify_literal(value) is not None
