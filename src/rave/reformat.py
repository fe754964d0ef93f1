from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from rave.kinds import TRIM_CHARS, to_text

CDATA_OPEN = "/*<![CDATA[*/"
CDATA_CLOSE = "/*]]>*/"

_WHITESPACE_RUN = re.compile(r"[ \s\t\n\r\0\x0b]+", re.ASCII)
# Entities, then percent-encoded octets, then anything not alnum|_|-|space.
_ILLEGAL = re.compile(r"&.+?;|%[a-fA-F0-9]{2}|[^a-zA-Z0-9_\- \s]", re.ASCII)

# Applied in order. "}!comma!" holds the comma of "},{" so the "}," rule
# does not break that line a second time.
_COMMA_PLACEHOLDER = "}!comma!"


def _unfold_table(line: str, indent: str) -> tuple[tuple[str, str], ...]:
	return (
		("},{", line + _COMMA_PLACEHOLDER + " {" + line + indent),
		("([{", "([{" + line + indent),
		("}])", line + "}])"),
		("',", "'," + line + indent),
		("},", "}," + line + indent),
		("],", "]," + line + indent),
		(_COMMA_PLACEHOLDER, "},"),
	)


def wrap_cdata(code: Any, line_break: str = "\n", indent: str = "\t") -> Any:
	"""Wrap script code in comment-protected CDATA markers."""
	if code is None:
		return code
	return CDATA_OPEN + line_break + to_text(code) + line_break + indent + CDATA_CLOSE


def sanitize(
	text: Any,
	space: Any = "-",
	filter: Callable[[str], str] | bool = True,
	other: Any = False,
) -> Any:
	"""Reduce a string to letters, digits, underscores, dashes and spaces.

	``filter`` is applied after trimming: a callable is called with the text,
	True lower-cases it and False leaves it alone. Whitespace runs become
	``space`` when it is a string. Entities, percent-encoded octets and other
	characters are replaced by ``other`` (empty unless a string is given).
	Non-strings are returned unchanged.
	"""
	if not isinstance(text, str):
		return text

	text = text.strip(TRIM_CHARS)
	if callable(filter):
		text = filter(text)
	elif filter is True:
		text = text.lower()

	if isinstance(space, str):
		text = _WHITESPACE_RUN.sub(lambda _: space, text)

	replacement = other if isinstance(other, str) else ""
	return _ILLEGAL.sub(lambda _: replacement, text)


def unfold_code(
	js: Any,
	line_break: str = "\n",
	indent: str = "\t",
	offset: str = "\t",
	wrap: str = "\n\t",
) -> str:
	"""Add line breaks and indentation to a one-line blob of script.

	Purely textual: matching sequences inside string literals are unfolded
	too.
	"""
	code = to_text(js)
	for needle, replacement in _unfold_table(line_break + offset, indent):
		code = code.replace(needle, replacement)
	return wrap + code + wrap
