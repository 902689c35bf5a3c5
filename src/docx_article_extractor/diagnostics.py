"""Typed diagnostic payloads attached to log entries.

Each processing stage attaches exactly one of the payloads below. ``to_dict``
renders a payload with camelCase keys, the shape consumed by the HTTP
clients and the console renderer.
"""

import traceback
from dataclasses import dataclass, field, fields


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _serialize(value):
    if isinstance(value, Diagnostics):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


class Diagnostics:
    """Base class for diagnostic payloads."""

    def to_dict(self) -> dict:
        return {_camel(f.name): _serialize(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class LineBreakAnalysis(Diagnostics):
    paragraph_breaks: int
    consecutive_breaks: int
    br_tags: int
    whitespace_blocks: int


@dataclass(frozen=True)
class StructureOverview(Diagnostics):
    """Document-wide statistics gathered before pattern checks."""

    document_length: int
    line_break_analysis: LineBreakAnalysis
    html_preview: str


@dataclass(frozen=True)
class OccurrenceContext(Diagnostics):
    position: int
    context: str
    before_match: str
    after_match: str


@dataclass(frozen=True)
class PatternCheck(Diagnostics):
    """Where a single marker occurs in the markup."""

    pattern: str
    match_count: int
    match_positions: list[int]
    surrounding_context: list[OccurrenceContext]


@dataclass(frozen=True)
class MarkerCounts(Diagnostics):
    paragraph_count: int
    strong_tag_count: int
    title_keyword_count: int
    content_keyword_count: int


@dataclass(frozen=True)
class MatchContext(Diagnostics):
    position: int
    matched_text: str
    title_group: str
    content_group: str
    before_match: str
    after_match: str
    full_context: str


@dataclass(frozen=True)
class PatternParts(Diagnostics):
    title_part: str
    content_part: str | None


@dataclass(frozen=True)
class MatchDiagnostics(Diagnostics):
    """Outcome of running one extraction pattern over the markup."""

    pattern_name: str
    pattern: str
    match_count: int
    match_positions: list[int]
    match_contexts: list[MatchContext]
    pattern_parts: PatternParts
    full_html_length: int
    html_structure: MarkerCounts


@dataclass(frozen=True)
class GroupBreakdown(Diagnostics):
    raw: str
    stripped: str
    length: int
    preview: str | None = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.preview is None:
            del data["preview"]
        return data


@dataclass(frozen=True)
class ArticleFound(Diagnostics):
    raw_match: str
    title_group: GroupBreakdown
    content_group: GroupBreakdown
    match_index: int
    full_match_length: int


@dataclass(frozen=True)
class BoundaryCheck(Diagnostics):
    """Why multi-article matches were deferred to the single-article pattern."""

    match_count: int
    bounded_by_title: int
    deferred_positions: list[int]


@dataclass(frozen=True)
class DocumentStructure(Diagnostics):
    total_length: int
    paragraphs: int
    possible_title_positions: list[int]
    possible_content_positions: list[int]


@dataclass(frozen=True)
class ExtractionFailure(Diagnostics):
    main_pattern_diagnostics: MatchDiagnostics
    single_pattern_diagnostics: MatchDiagnostics
    document_structure: DocumentStructure


@dataclass(frozen=True)
class ConversionMessages(Diagnostics):
    message_types: list[str]
    messages_by_type: dict[str, list[dict]] = field(default_factory=dict)


@dataclass(frozen=True)
class ErrorDetails(Diagnostics):
    name: str
    message: str
    stack: str

    @classmethod
    def from_exception(cls, error: BaseException) -> "ErrorDetails":
        stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        return cls(
            name=type(error).__name__ or "Unknown Error",
            message=str(error) or "No error message available",
            stack=stack.strip() or "No stack trace available",
        )

    def to_dict(self) -> dict:
        return {"errorDetails": super().to_dict()}
