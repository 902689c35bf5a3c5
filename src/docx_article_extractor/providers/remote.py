"""Conversion through an HTTP conversion service."""

import requests

from ..exceptions import ConversionError
from ..logger import get_logger
from .base import BaseConverter, ConversionResult, ConversionWarning

logger = get_logger("providers.remote")

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class RemoteConverter(BaseConverter):
    """Post DOCX bytes to a conversion service and read back markup."""

    def __init__(self, url: str, timeout: float = 30):
        """
        Initialize remote converter.

        Args:
            url: Endpoint accepting the raw document as the request body
            timeout: Request timeout in seconds
        """
        self.url = url
        self.timeout = timeout

    def convert(self, data: bytes) -> ConversionResult:
        """
        Post the document and parse the service's JSON answer.

        The service replies with ``{"markup": str, "warnings": [{"type", "message"}]}``.

        Raises:
            ConversionError: On transport errors or a malformed reply
        """
        try:
            response = requests.post(
                self.url, data=data, timeout=self.timeout, headers={"Content-Type": DOCX_MIME}
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Remote conversion failed", extra={"url": self.url, "error": str(e)})
            raise ConversionError(f"Conversion service error: {e}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("markup"), str):
            raise ConversionError("Conversion service returned no markup")

        warnings = [
            ConversionWarning(type=str(w.get("type", "unknown")), message=str(w.get("message", "")))
            for w in payload.get("warnings") or []
            if isinstance(w, dict)
        ]
        return ConversionResult(markup=payload["markup"], warnings=warnings)
