"""Local conversion with the mammoth library."""

import io

import mammoth

from ..exceptions import ConversionError
from ..logger import get_logger
from .base import BaseConverter, ConversionResult, ConversionWarning

logger = get_logger("providers.local")


class MammothConverter(BaseConverter):
    """Convert DOCX bytes to HTML with mammoth."""

    def convert(self, data: bytes) -> ConversionResult:
        try:
            result = mammoth.convert_to_html(io.BytesIO(data))
        except Exception as e:
            raise ConversionError(f"Unable to convert document: {e}") from e

        warnings = [ConversionWarning(type=m.type, message=m.message) for m in result.messages]
        logger.debug(
            "Document converted", extra={"markup_length": len(result.value), "warnings": len(warnings)}
        )
        return ConversionResult(markup=result.value, warnings=warnings)
