"""Document processing pipeline: conversion, structure probing, extraction."""

from pathlib import Path

from .providers import BaseConverter, ConversionResult, MammothConverter
from .diagnostics import ConversionMessages, ErrorDetails
from .extractor import ArticleExtractor
from .logger import get_logger
from .markers import MarkerSet
from .models import ProcessingResult
from .prober import StructureProber
from .trail import DiagnosticLog

logger = get_logger("processor")


class DocumentProcessor:
    """
    Turn a DOCX document into articles plus a full diagnostic trail.

    The processor keeps no per-run state; each call to :meth:`process` owns a
    fresh :class:`DiagnosticLog`.
    """

    def __init__(
        self,
        converter: BaseConverter | None = None,
        markers: MarkerSet | None = None,
    ):
        """
        Initialize document processor.

        Args:
            converter: DOCX to HTML converter. If None, uses mammoth.
            markers: Keyword markers. If None, uses the defaults.
        """
        self.converter = converter or MammothConverter()
        self.markers = markers or MarkerSet()
        self.prober = StructureProber(self.markers)
        self.extractor = ArticleExtractor(self.markers)

    def process(self, data: bytes, name: str = "document") -> ProcessingResult:
        """
        Process a DOCX byte buffer.

        Args:
            data: Raw document bytes
            name: Document name used in messages

        Returns:
            ProcessingResult; never raises
        """
        log = DiagnosticLog()
        log.record("File Reading", True, f"Reading file: {name}")
        return self._run(lambda: data, name, log)

    def process_file(self, path: str | Path, name: str | None = None) -> ProcessingResult:
        """
        Read and process a DOCX file.

        Read failures are reported in the result like any other failure.

        Args:
            path: File to read
            name: Document name used in messages. Defaults to the path.
        """
        path = Path(path)
        name = name or str(path)
        log = DiagnosticLog()
        log.record("File Reading", True, f"Reading file: {name}")
        return self._run(path.read_bytes, name, log)

    def _log_conversion_messages(self, conversion: ConversionResult, log: DiagnosticLog) -> None:
        by_type: dict[str, list[dict]] = {}
        for warning in conversion.warnings:
            by_type.setdefault(warning.type, []).append(warning.to_dict())

        log.record(
            "Conversion Messages",
            True,
            "Conversion completed with messages",
            error="; ".join(f"{w.type}: {w.message}" for w in conversion.warnings),
            diagnostics=ConversionMessages(
                message_types=[w.type for w in conversion.warnings],
                messages_by_type=by_type,
            ),
        )

    def _run(self, read, name: str, log: DiagnosticLog) -> ProcessingResult:
        try:
            data = read()

            log.record("DOCX Conversion", True, "Converting DOCX to HTML")
            conversion = self.converter.convert(data)
            html = conversion.markup

            if conversion.warnings:
                self._log_conversion_messages(conversion, log)

            self.prober.probe(html, log)
            articles = self.extractor.extract(html, log)

            if not articles:
                logger.warning("No articles found", extra={"document": name})
                return ProcessingResult.create_error(
                    f"File {name} processed with errors. Articles not found", log.entries
                )

            logger.info("Extraction successful", extra={"document": name, "articles": len(articles)})
            return ProcessingResult(
                success=True,
                message=f"Successfully extracted {len(articles)} articles from {name}",
                articles=articles,
                logs=log.entries,
            )
        except Exception as e:
            logger.exception("Document processing failed", extra={"document": name})
            log.record(
                "Process Error",
                False,
                "Critical error during document processing",
                error=f"{type(e).__name__}: {e}",
                diagnostics=ErrorDetails.from_exception(e),
            )
            return ProcessingResult.create_error(
                f"Error processing file: {str(e) or 'Unknown error'}", log.entries
            )
