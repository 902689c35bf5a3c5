"""Append-only diagnostic log for a single processing run."""

import logging

from .diagnostics import Diagnostics
from .logger import get_logger
from .models import LogEntry

logger = get_logger("trail")


class DiagnosticLog:
    """
    Ordered record of every stage of one processing run.

    A new instance is created per run and passed explicitly to each
    component; entries are never removed or rewritten.
    """

    def __init__(self):
        self._entries: list[LogEntry] = []

    def record(
        self,
        stage: str,
        success: bool,
        details: str,
        error: str | None = None,
        html_preview: str | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> LogEntry:
        """
        Append one entry and mirror it to the package logger.

        Args:
            stage: Stage name
            success: Whether the stage found what it looked for
            details: Human-readable summary
            error: Optional error description
            html_preview: Optional markup excerpt
            diagnostics: Optional stage payload

        Returns:
            The appended entry
        """
        entry = LogEntry(
            stage=stage,
            success=success,
            details=details,
            error=error,
            html_preview=html_preview,
            diagnostics=diagnostics,
        )
        self._entries.append(entry)

        level = logging.DEBUG if success else logging.WARNING
        extra = {"stage": stage, "success": success}
        if error is not None:
            extra["error"] = error
        logger.log(level, details, extra=extra)
        return entry

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))
