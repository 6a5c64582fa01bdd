"""Diagnostic sink adapter writing to the logging system."""

from __future__ import annotations

import logging

from ..core.errors import Diagnostic


class LoggingDiagnosticSink:
    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING):
        self._logger = logger or logging.getLogger("spellscope.diagnostics")
        self._level = level

    def report(self, diagnostic: Diagnostic) -> None:
        self._logger.log(
            self._level,
            "%s [%s %s]: %s",
            diagnostic.message,
            diagnostic.tier,
            diagnostic.source,
            diagnostic.error,
        )
