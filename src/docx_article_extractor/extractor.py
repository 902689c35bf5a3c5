"""Article extraction with a multi-article pattern and a single-article fallback."""

import re

from .diagnostics import (
    ArticleFound,
    BoundaryCheck,
    DocumentStructure,
    ErrorDetails,
    ExtractionFailure,
    GroupBreakdown,
)
from .logger import get_logger
from .markers import PARAGRAPH_CLOSE, MarkerSet
from .matcher import MatchReport, PatternMatcher
from .models import Article, PatternMatch
from .trail import DiagnosticLog

logger = get_logger("extractor")

TAG_RE = re.compile(r"<[^>]*>")

TITLE_PREVIEW = 50
CONTENT_PREVIEW = 100


def strip_html_tags(html: str | None) -> str:
    """Remove every ``<...>`` tag from ``html``."""
    if not html:
        return ""
    return TAG_RE.sub("", html)


def _title_preview(title: str) -> str:
    return title[:TITLE_PREVIEW] + ("..." if len(title) > TITLE_PREVIEW else "")


class ArticleExtractor:
    """Extract title/content articles from converted markup."""

    def __init__(self, markers: MarkerSet | None = None, matcher: PatternMatcher | None = None):
        """
        Initialize article extractor.

        Args:
            markers: Marker set defining keywords. If None, uses the defaults.
            matcher: Optional PatternMatcher instance. If None, creates new one.
        """
        self.markers = markers or MarkerSet()
        self.matcher = matcher or PatternMatcher(self.markers)

    def _build_article(self, match: PatternMatch, stage: str, label: str, log: DiagnosticLog) -> Article:
        title = strip_html_tags(match.title).strip()
        raw_content = match.content or ""
        content = raw_content.strip()

        log.record(
            stage,
            True,
            f'{label} with title: "{_title_preview(title)}"',
            diagnostics=ArticleFound(
                raw_match=match.matched_text,
                title_group=GroupBreakdown(raw=match.title or "", stripped=title, length=len(title)),
                content_group=GroupBreakdown(
                    raw=raw_content,
                    stripped=content,
                    length=len(content),
                    preview=content[:CONTENT_PREVIEW],
                ),
                match_index=match.start,
                full_match_length=match.length,
            ),
        )
        return Article(title=title, content=content)

    def extract_with_multi_pattern(self, html: str, log: DiagnosticLog) -> tuple[list[Article], MatchReport]:
        """
        Extract every article bounded by the next title paragraph or the end of text.

        Matches are only accepted when at least one of them is bounded by a
        following title paragraph; a lone block running to the end of the
        text is left to the single-article pattern.

        Args:
            html: Markup text
            log: Run log

        Returns:
            Tuple of (articles, match report)
        """
        report = self.matcher.match_all(self.markers.multi_article_pattern(), html)
        count = len(report.matches)
        log.record(
            "Main Pattern Analysis",
            count > 0,
            f"Main pattern analysis complete - found {count} potential matches",
            diagnostics=report.diagnostics,
        )

        matches = report.matches
        bounded = sum(1 for m in matches if m.bounded_by_title)
        if matches and not bounded:
            log.record(
                "Multi-Article Boundary Check",
                False,
                f"None of {count} matches is followed by another title, deferring to single pattern",
                diagnostics=BoundaryCheck(
                    match_count=count,
                    bounded_by_title=bounded,
                    deferred_positions=[m.start for m in matches],
                ),
            )
            return [], report

        articles = [
            self._build_article(m, "Article Found (Main Pattern)", "Found article", log) for m in matches
        ]
        return articles, report

    def extract_with_single_pattern(
        self, html: str, log: DiagnosticLog, start: int = 0
    ) -> tuple[list[Article], MatchReport]:
        """
        Extract one article whose content runs to the end of the text.

        Args:
            html: Markup text
            log: Run log
            start: Offset to search from

        Returns:
            Tuple of (articles, match report); at most one article
        """
        report = self.matcher.match_all(self.markers.single_article_pattern(), html, start)
        count = len(report.matches)
        log.record(
            "Single Pattern Analysis",
            count > 0,
            f"Single pattern analysis complete - found {count} potential matches",
            diagnostics=report.diagnostics,
        )

        if not report.matches:
            return [], report

        article = self._build_article(
            report.matches[0], "Article Found (Single Pattern)", "Found single article", log
        )
        return [article], report

    def document_structure(self, html: str) -> DocumentStructure:
        return DocumentStructure(
            total_length=len(html),
            paragraphs=html.count(PARAGRAPH_CLOSE),
            possible_title_positions=self.markers.keyword_positions(html, self.markers.title_keyword),
            possible_content_positions=self.markers.keyword_positions(html, self.markers.content_keyword),
        )

    def extract(self, html: str, log: DiagnosticLog) -> list[Article]:
        """
        Extract articles using the two-stage pattern pipeline.

        Errors raised while matching are logged and reported as no articles.

        Args:
            html: Markup text
            log: Run log

        Returns:
            Articles in document order, possibly empty
        """
        try:
            # Stage 1: multi-article pattern
            articles, main_report = self.extract_with_multi_pattern(html, log)
            if articles:
                return articles

            # Stage 2: single-article pattern, from the deferred block if there was one
            start = main_report.matches[0].start if main_report.matches else 0
            articles, single_report = self.extract_with_single_pattern(html, log, start)
            if articles:
                return articles

            # Both patterns failed
            log.record(
                "Pattern Matching Failed",
                False,
                "Both patterns failed to find any articles",
                html_preview=html,
                diagnostics=ExtractionFailure(
                    main_pattern_diagnostics=main_report.diagnostics,
                    single_pattern_diagnostics=single_report.diagnostics,
                    document_structure=self.document_structure(html),
                ),
            )
            return []
        except Exception as e:
            logger.exception("Article extraction failed", extra={"markup_length": len(html)})
            log.record(
                "Article Extraction Error",
                False,
                "Error during article extraction",
                error=f"{type(e).__name__}: {e}",
                html_preview=html,
                diagnostics=ErrorDetails.from_exception(e),
            )
            return []
