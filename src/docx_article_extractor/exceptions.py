"""Exception hierarchy for the DOCX article extractor."""


class DocxArticleExtractorError(Exception):
    """Base class for all extractor errors."""


class ConfigurationError(DocxArticleExtractorError):
    """Raised when configuration values are missing or invalid."""


class ConversionError(DocxArticleExtractorError):
    """Raised when a document cannot be converted to markup."""


class PatternEvaluationError(DocxArticleExtractorError):
    """Raised when an extraction pattern cannot be compiled or evaluated."""
