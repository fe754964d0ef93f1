from __future__ import annotations

from typing import Any

_MIRRORS = {
	"[": "]",
	"{": "}",
	"(": ")",
	"<": ">",
	"]": "[",
	"}": "{",
	")": "(",
	">": "<",
}

OPENING = frozenset("[{(<")


def mirror(char: Any) -> Any:
	"""Return the opposite bracket for ``char``, or ``char`` unchanged."""
	if isinstance(char, str):
		return _MIRRORS.get(char, char)
	return char
