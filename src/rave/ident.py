"""Identifier validation and conversion.

Identifiers here are the names used for data keys, CSS classes and script
variables: a letter or underscore followed by letters, digits and underscores
(plus dashes for :func:`is_valid_id`).
"""

from __future__ import annotations

import re
from typing import Any

from rave.classify import is_void

_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*")
_VAR_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_SEGMENT_BREAK = re.compile(r"[^a-z0-9]+")


def is_valid_id(value: Any) -> bool:
	"""Check for a data-key / CSS identifier.

	>>> is_valid_id("yes_or_no"), is_valid_id("data-r480"), is_valid_id("7seconds")
	(True, True, False)
	"""
	return not is_void(value) and _ID.fullmatch(value) is not None


def is_valid_var_name(value: Any) -> bool:
	"""Check for an allowed JavaScript variable name (no dashes)."""
	return not is_void(value) and _VAR_NAME.fullmatch(value) is not None


def to_var_name(text: Any, camel_case: bool = False, offset: Any = 1) -> str | bool:
	"""Convert arbitrary text into a variable name.

	The text is lower-cased and split on runs of anything that is not a
	lowercase letter or digit. A first segment made only of digits gets an
	underscore prefix. Segments are joined with ``_``, or camel-cased starting
	at segment ``offset`` when ``camel_case`` is True (``offset=False`` means
	from the first segment; any other non-int means 1).

	Returns False for void input.
	"""
	if is_void(text):
		return False

	parts = _SEGMENT_BREAK.split(text.lower())
	if parts[0].isdigit():
		parts[0] = "_" + parts[0]

	if camel_case is not True:
		return "_".join(parts)

	if offset is False:
		start = 0
	elif isinstance(offset, int) and not isinstance(offset, bool):
		start = max(offset, 0)
	else:
		start = 1

	for i in range(start, len(parts)):
		parts[i] = parts[i][:1].upper() + parts[i][1:]
	return "".join(parts)
