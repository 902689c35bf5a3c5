"""Markers and extraction patterns for the converted markup."""

import re
from dataclasses import dataclass

from .config import DEFAULT_CONTENT_KEYWORD, DEFAULT_TITLE_KEYWORD
from .diagnostics import MarkerCounts
from .exceptions import PatternEvaluationError

PARAGRAPH_OPEN = "<p>"
PARAGRAPH_CLOSE = "</p>"
BOLD_OPEN = "<strong>"

PARAGRAPH_BREAK_RE = re.compile(r"</p>\s*<p>")
CONSECUTIVE_BREAK_RE = re.compile(r"</p>\s*</p>")
BR_TAG_RE = re.compile(r"<br\s*/?>")
WHITESPACE_BLOCK_RE = re.compile(r"\s{2,}")

# Title paragraph, then the content keyword paragraph (or a line break), then the body.
_ARTICLE_HEAD = (
    r"<p>(?:<strong>)?{title}(?:</strong>)?:\s*(.*?)(?:</p>|<br />)\s*"
    r"(?:<p>(?:<strong>)?{content}(?:</strong>)?:\s*</p>|<br />)\s*"
)
_MULTI_BODY = r"([\s\S]*?)(?=<p>(?:<strong>)?{title}|\Z)"
_SINGLE_BODY = r"([\s\S]*)"


@dataclass(frozen=True)
class Probe:
    """A marker searched for during structure probing."""

    name: str
    regex: re.Pattern


@dataclass(frozen=True)
class ExtractionPattern:
    """A compiled article pattern; ``repeat`` patterns yield every match, others only the first."""

    name: str
    regex: re.Pattern
    repeat: bool

    @property
    def source(self) -> str:
        return self.regex.pattern


def _compile(source: str, flags: int = 0) -> re.Pattern:
    try:
        return re.compile(source, flags)
    except re.error as e:
        raise PatternEvaluationError(f"Invalid pattern {source!r}: {e}") from e


@dataclass(frozen=True)
class MarkerSet:
    """The structural markers and keyword markers of one document dialect."""

    title_keyword: str = DEFAULT_TITLE_KEYWORD
    content_keyword: str = DEFAULT_CONTENT_KEYWORD

    def probes(self) -> list[Probe]:
        return [
            Probe(f"Paragraphs {PARAGRAPH_OPEN}", _compile(re.escape(PARAGRAPH_OPEN))),
            Probe(f"Bold text {BOLD_OPEN}", _compile(re.escape(BOLD_OPEN))),
            Probe(f"'{self.title_keyword}' keyword", _compile(re.escape(self.title_keyword))),
            Probe(f"'{self.content_keyword}' keyword", _compile(re.escape(self.content_keyword))),
        ]

    def _head(self) -> str:
        return _ARTICLE_HEAD.format(title=re.escape(self.title_keyword), content=re.escape(self.content_keyword))

    def multi_article_pattern(self) -> ExtractionPattern:
        source = self._head() + _MULTI_BODY.format(title=re.escape(self.title_keyword))
        return ExtractionPattern("Main Pattern", _compile(source), repeat=True)

    def single_article_pattern(self) -> ExtractionPattern:
        source = self._head() + _SINGLE_BODY
        return ExtractionPattern("Single Pattern", _compile(source, re.DOTALL), repeat=False)

    def count(self, text: str) -> MarkerCounts:
        return MarkerCounts(
            paragraph_count=text.count(PARAGRAPH_OPEN),
            strong_tag_count=text.count(BOLD_OPEN),
            title_keyword_count=text.count(self.title_keyword),
            content_keyword_count=text.count(self.content_keyword),
        )

    def keyword_positions(self, text: str, keyword: str) -> list[int]:
        """Offsets of every non-overlapping occurrence of ``keyword``."""
        return [m.start() for m in re.finditer(re.escape(keyword), text)]
