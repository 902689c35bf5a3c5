"""Data models for DOCX article extractor."""

from dataclasses import dataclass, field

from .diagnostics import Diagnostics


@dataclass(frozen=True)
class Article:
    """An extracted title/content pair."""

    title: str
    content: str

    def to_dict(self) -> dict:
        return {"title": self.title, "content": self.content}


@dataclass(frozen=True)
class LogEntry:
    """One stage record in the processing trail."""

    stage: str
    success: bool
    details: str
    error: str | None = None
    html_preview: str | None = None
    diagnostics: Diagnostics | None = None

    def to_dict(self) -> dict:
        data = {"stage": self.stage, "success": self.success, "details": self.details}
        if self.error is not None:
            data["error"] = self.error
        if self.html_preview is not None:
            data["htmlPreview"] = self.html_preview
        if self.diagnostics is not None:
            data["diagnostics"] = self.diagnostics.to_dict()
        return data


@dataclass(frozen=True)
class PatternMatch:
    """A single match of an extraction pattern."""

    matched_text: str
    title: str | None
    content: str | None
    start: int
    length: int
    bounded_by_title: bool = False

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class ProcessingResult:
    """Result of processing one document."""

    success: bool
    message: str
    articles: list[Article] = field(default_factory=list)
    logs: list[LogEntry] = field(default_factory=list)

    @classmethod
    def create_error(cls, message: str, logs: list[LogEntry] | None = None) -> "ProcessingResult":
        return cls(success=False, message=message, articles=[], logs=list(logs or []))

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "articles": [a.to_dict() for a in self.articles],
            "logs": [entry.to_dict() for entry in self.logs],
        }
