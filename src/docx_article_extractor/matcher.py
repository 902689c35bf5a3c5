"""Run an extraction pattern over markup and describe every match."""

import re
from dataclasses import dataclass

from .diagnostics import MatchContext, MatchDiagnostics, PatternParts
from .markers import ExtractionPattern, MarkerSet
from .models import PatternMatch

NO_TITLE_GROUP = "NO_TITLE_GROUP"
NO_CONTENT_GROUP = "NO_CONTENT_GROUP"

WINDOW = 50
FULL_CONTEXT = 100


@dataclass(frozen=True)
class MatchReport:
    matches: list[PatternMatch]
    diagnostics: MatchDiagnostics


class PatternMatcher:
    """Find non-overlapping matches of an extraction pattern."""

    def __init__(self, markers: MarkerSet | None = None):
        self.markers = markers or MarkerSet()

    def match_all(self, pattern: ExtractionPattern, html: str, start: int = 0) -> MatchReport:
        """
        Collect matches of ``pattern`` in ``html``.

        Repeating patterns scan on from the end of each match; others stop
        after the first. Zero matches is a normal outcome.

        Args:
            pattern: Extraction pattern
            html: Markup text
            start: Offset to start scanning from; positions stay absolute

        Returns:
            MatchReport with the matches and their diagnostics
        """
        matches: list[PatternMatch] = []
        contexts: list[MatchContext] = []

        for match in pattern.regex.finditer(html, start):
            matches.append(self._to_match(match, len(html)))
            contexts.append(self._context(match, html))
            if not pattern.repeat:
                break

        parts = pattern.source.split(re.escape(self.markers.content_keyword))
        diagnostics = MatchDiagnostics(
            pattern_name=pattern.name,
            pattern=pattern.source,
            match_count=len(matches),
            match_positions=[m.start for m in matches],
            match_contexts=contexts,
            pattern_parts=PatternParts(
                title_part=parts[0],
                content_part=parts[1] if len(parts) > 1 else None,
            ),
            full_html_length=len(html),
            html_structure=self.markers.count(html),
        )
        return MatchReport(matches=matches, diagnostics=diagnostics)

    @staticmethod
    def _group(match: re.Match, index: int) -> str | None:
        if match.re.groups < index:
            return None
        return match.group(index)

    def _to_match(self, match: re.Match, text_length: int) -> PatternMatch:
        return PatternMatch(
            matched_text=match.group(0),
            title=self._group(match, 1),
            content=self._group(match, 2),
            start=match.start(),
            length=match.end() - match.start(),
            # Multi-article matches stop either at the next title or at the end of text.
            bounded_by_title=match.end() < text_length,
        )

    def _context(self, match: re.Match, html: str) -> MatchContext:
        start, end = match.start(), match.end()
        return MatchContext(
            position=start,
            matched_text=match.group(0),
            title_group=self._group(match, 1) or NO_TITLE_GROUP,
            content_group=self._group(match, 2) or NO_CONTENT_GROUP,
            before_match=html[max(0, start - WINDOW) : start],
            after_match=html[end : end + WINDOW],
            full_context=html[max(0, start - FULL_CONTEXT) : end + FULL_CONTEXT],
        )
