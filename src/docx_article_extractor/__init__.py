"""DOCX Article Extractor - Extract title/content articles from DOCX documents with a diagnostic trail."""

__version__ = "0.1.0"
__license__ = "MIT"

from .extractor import ArticleExtractor
from .models import Article, LogEntry, ProcessingResult
from .processor import DocumentProcessor

__all__ = ["Article", "ArticleExtractor", "DocumentProcessor", "LogEntry", "ProcessingResult"]
