"""Recognition of text that already reads as a JavaScript literal.

Each literal form has its own pattern so forms can be matched and tested
independently. The same fragments are reused by :func:`strip_literal_quotes`,
which removes quotes wrapped around literal-looking text anywhere in a blob.
"""

from __future__ import annotations

import re
from enum import Enum

from rave.kinds import TRIM_CHARS


class LiteralKind(Enum):
	BOOLEAN = "boolean"
	NULL = "null"
	UNDEFINED = "undefined"
	NUMBER = "number"
	STRING = "string"
	ARRAY = "array"
	OBJECT = "object"
	FUNCTION = "function"


# Anonymous functions, function literals, IIFEs and `$(sel).ready(function…)`
# style wrappers. Heuristic: parens and braces are not balanced.
FUNCTION_FRAGMENT = (
	r"\s*(?:(?:\$|jQuery)\([a-z]+\)\.[a-z]+)?\(?\s*function[a-z0-9_\s]*\(.*\}\s*\)?\s*\(?.*\)?;?\s*"
)
NUMBER_FRAGMENT = r"-?[0-9]*[.]?[0-9]+"

_FORMS: tuple[tuple[LiteralKind, str], ...] = (
	(LiteralKind.BOOLEAN, r"true|false"),
	(LiteralKind.STRING, r"'.*'|\".*\""),
	(LiteralKind.ARRAY, r"\[.*\]"),
	(LiteralKind.OBJECT, r"\{.*\}"),
	(LiteralKind.FUNCTION, FUNCTION_FRAGMENT),
	(LiteralKind.UNDEFINED, r"undefined"),
	(LiteralKind.NULL, r"null"),
	(LiteralKind.NUMBER, NUMBER_FRAGMENT),
)

_FORM_PATTERNS: tuple[tuple[LiteralKind, re.Pattern[str]], ...] = tuple(
	(kind, re.compile(fragment, re.IGNORECASE)) for kind, fragment in _FORMS
)

# Order matters: the tight [..] / {..} bodies are tried before the greedy ones
# so adjacent quoted structures are unwrapped one at a time.
_UNQUOTE_BODIES = (
	r"\[[^\[\]]*\]",
	r"\{[^\}]*\}",
	r"\[.*\]",
	r"\{.*\}",
	r"true",
	r"false",
	FUNCTION_FRAGMENT,
	r"null",
	r"undefined",
	NUMBER_FRAGMENT,
)

_QUOTED_LITERAL = re.compile(
	r"['\"](?P<body>" + "|".join(_UNQUOTE_BODIES) + r")['\"]",
	re.IGNORECASE,
)


def classify_literal(text: str) -> LiteralKind | None:
	"""Return the literal form ``text`` takes once trimmed, or None."""
	candidate = text.strip(TRIM_CHARS)
	for kind, pattern in _FORM_PATTERNS:
		if pattern.fullmatch(candidate):
			return kind
	return None


def strip_literal_quotes(text: str) -> str:
	return _QUOTED_LITERAL.sub(lambda m: m.group("body"), text)
