"""Observational scan of the markup structure."""

from .diagnostics import LineBreakAnalysis, OccurrenceContext, PatternCheck, StructureOverview
from .markers import (
    BR_TAG_RE,
    CONSECUTIVE_BREAK_RE,
    PARAGRAPH_BREAK_RE,
    WHITESPACE_BLOCK_RE,
    MarkerSet,
)
from .trail import DiagnosticLog

PREVIEW_LENGTH = 200
OVERVIEW_LENGTH = 500
CONTEXT_RADIUS = 50
SNIPPET_LENGTH = 20


class StructureProber:
    """Count markers in the markup and record where each one occurs."""

    def __init__(self, markers: MarkerSet | None = None):
        self.markers = markers or MarkerSet()

    def probe(self, html: str, log: DiagnosticLog) -> None:
        """
        Record a structure overview followed by one pattern check per marker.

        Never raises on missing markers; absence is logged as a failed check.

        Args:
            html: Markup text
            log: Run log to append to
        """
        line_breaks = LineBreakAnalysis(
            paragraph_breaks=len(PARAGRAPH_BREAK_RE.findall(html)),
            consecutive_breaks=len(CONSECUTIVE_BREAK_RE.findall(html)),
            br_tags=len(BR_TAG_RE.findall(html)),
            whitespace_blocks=len(WHITESPACE_BLOCK_RE.findall(html)),
        )
        log.record(
            "HTML Structure Analysis",
            True,
            "Analyzing HTML structure for expected patterns",
            html_preview=html[:PREVIEW_LENGTH] + "...",
            diagnostics=StructureOverview(
                document_length=len(html),
                line_break_analysis=line_breaks,
                html_preview=html[:OVERVIEW_LENGTH],
            ),
        )

        for probe in self.markers.probes():
            positions = [m.start() for m in probe.regex.finditer(html)]
            count = len(positions)
            log.record(
                "Pattern Check",
                count > 0,
                f"Found {count} occurrences of {probe.name}",
                error=None if count else f"Missing pattern: {probe.name}",
                diagnostics=PatternCheck(
                    pattern=probe.regex.pattern,
                    match_count=count,
                    match_positions=positions,
                    surrounding_context=[self._context(html, pos) for pos in positions],
                ),
            )

    @staticmethod
    def _context(html: str, pos: int) -> OccurrenceContext:
        return OccurrenceContext(
            position=pos,
            context=html[max(0, pos - CONTEXT_RADIUS) : pos + CONTEXT_RADIUS],
            before_match=html[max(0, pos - SNIPPET_LENGTH) : pos],
            after_match=html[pos : pos + SNIPPET_LENGTH],
        )
