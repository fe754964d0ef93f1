from __future__ import annotations

import logging
import warnings

logger = logging.getLogger(__name__)


class RaveWarning(UserWarning):
	"""A helper was called with arguments it cannot work with."""


def report_misuse(func: str, message: str) -> None:
	"""Emit a non-fatal diagnostic on behalf of the caller of ``func``."""
	logger.debug("%s rejected its arguments: %s", func, message)
	# 1: here, 2: the helper, 3: the helper's caller
	warnings.warn(f"[rave] {func}: {message}", RaveWarning, stacklevel=3)
