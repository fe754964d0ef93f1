from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from rave.brackets import mirror
from rave.classify import humanize, is_human, is_literal
from rave.kinds import to_text
from rave.literals import strip_literal_quotes

_OPENING_RUN = re.compile(r"[\[\(\{<]+")


def pad(value: Any, left: Any = False, right: Any = True) -> Any:
	"""Wrap a string or number with ``left`` and ``right``.

	When ``right`` is True the right side is derived from ``left``: if ``left``
	holds opening brackets every character is mirrored and the order
	reversed, so ``pad("x", "([")`` gives ``"([x])"``; otherwise ``left`` is
	repeated. Non-human values are returned unchanged.
	"""
	if not is_human(value):
		return value

	left_text = to_text(humanize(left))
	text = to_text(value)

	if right is not True:
		return left_text + text + to_text(humanize(right))
	if _OPENING_RUN.search(left_text):
		closing = "".join(mirror(ch) for ch in reversed(left_text))
		return left_text + text + closing
	return left_text + text + left_text


def affix(items: Any, left: Any = False, right: Any = True) -> Any:
	"""Apply :func:`pad` to every value of a list, tuple or mapping."""
	if isinstance(items, Mapping):
		return {key: pad(value, left, right) for key, value in items.items()}
	if isinstance(items, list):
		return [pad(value, left, right) for value in items]
	if isinstance(items, tuple):
		return tuple(pad(value, left, right) for value in items)
	return items


def quote(code: Any, quote_char: str = '"') -> Any:
	"""Quote a string of script unless it already reads as a literal.

	Existing ``quote_char`` characters at either end are trimmed first, so
	quoting is idempotent. Non-strings are returned unchanged.
	"""
	if not isinstance(code, str) or is_literal(code):
		return code
	q = quote_char[:1]
	return q + code.strip(q) + q


def unquote(js: Any) -> str:
	"""Remove quotes around any literal-looking text inside ``js``.

	>>> unquote("'{  }'"), unquote('"true"'), unquote('"1000"')
	('{  }', 'true', '1000')
	"""
	return strip_literal_quotes(to_text(js))
