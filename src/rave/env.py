"""Environment-driven defaults for the command-line front-end.

The helpers themselves never read the environment.
"""

from __future__ import annotations

import os
from typing import Literal

ENV_RAVE_QUOTE_STYLE = "RAVE_QUOTE_STYLE"
ENV_RAVE_GROUPING = "RAVE_GROUPING"
ENV_RAVE_INDENT = "RAVE_INDENT"

QuoteStyle = Literal[1, 2]


class RaveEnv:
	def _get(self, key: str) -> str | None:
		value = os.environ.get(key)
		return value if value else None

	@property
	def quote_style(self) -> QuoteStyle:
		raw = self._get(ENV_RAVE_QUOTE_STYLE)
		if raw is not None and raw.strip() == "1":
			return 1
		return 2

	@quote_style.setter
	def quote_style(self, value: QuoteStyle) -> None:
		os.environ[ENV_RAVE_QUOTE_STYLE] = str(value)

	@property
	def grouping(self) -> str:
		return self._get(ENV_RAVE_GROUPING) or "["

	@grouping.setter
	def grouping(self, value: str) -> None:
		os.environ[ENV_RAVE_GROUPING] = value

	@property
	def indent(self) -> str:
		raw = os.environ.get(ENV_RAVE_INDENT)
		# an explicit empty value disables indentation
		return "\t" if raw is None else raw

	@indent.setter
	def indent(self, value: str) -> None:
		os.environ[ENV_RAVE_INDENT] = value


env = RaveEnv()
