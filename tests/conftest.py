"""Shared fixtures: sample markup and a deterministic converter."""

import logging

import pytest

from docx_article_extractor.logger import LOGGER_NAME
from docx_article_extractor.processor import DocumentProcessor
from docx_article_extractor.providers import BaseConverter, ConversionResult, ConversionWarning

TWO_ARTICLES = (
    "<p><strong>Заголовок</strong>: Title One</p>"
    "<p><strong>Содержимое</strong>:</p>Body One"
    "<p><strong>Заголовок</strong>: Title Two</p>"
    "<p><strong>Содержимое</strong>:</p>Body Two"
)

SINGLE_ARTICLE = (
    "<p><strong>Заголовок</strong>: Only Title</p>"
    "<p><strong>Содержимое</strong>:</p>"
    "<p>First line</p>\n<p>Second line</p>"
)

TITLE_WITHOUT_CONTENT = "<p><strong>Заголовок</strong>: Lonely</p><p>Some text without a content marker</p>"

NO_MARKERS = "Plain text with no markup and no keywords at all"


class FakeConverter(BaseConverter):
    """Return fixed markup regardless of the input bytes."""

    def __init__(self, markup: str = "", warnings=None, error: Exception | None = None):
        self.markup = markup
        self.warnings = list(warnings or [])
        self.error = error
        self.calls: list[bytes] = []

    def convert(self, data: bytes) -> ConversionResult:
        self.calls.append(data)
        if self.error is not None:
            raise self.error
        return ConversionResult(markup=self.markup, warnings=self.warnings)


@pytest.fixture
def make_processor():
    """Build a DocumentProcessor around a FakeConverter."""

    def _make(markup: str = "", warnings=None, error: Exception | None = None) -> DocumentProcessor:
        return DocumentProcessor(converter=FakeConverter(markup, warnings=warnings, error=error))

    return _make


@pytest.fixture
def sample_warnings():
    return [
        ConversionWarning(type="warning", message="Unrecognised paragraph style: Heading 7"),
        ConversionWarning(type="warning", message="Unrecognised run style: Emphasis"),
        ConversionWarning(type="error", message="Image could not be read"),
    ]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging so captured streams are not reused."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
