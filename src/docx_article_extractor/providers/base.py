"""Base class and result types for markup converters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConversionWarning:
    """A message reported by the converter alongside the markup."""

    type: str
    message: str

    def to_dict(self) -> dict:
        return {"type": self.type, "message": self.message}


@dataclass(frozen=True)
class ConversionResult:
    """Markup produced from a document plus any conversion warnings."""

    markup: str
    warnings: list[ConversionWarning] = field(default_factory=list)


class BaseConverter(ABC):
    """Convert raw DOCX bytes to HTML markup."""

    @abstractmethod
    def convert(self, data: bytes) -> ConversionResult:
        """
        Convert a document.

        Args:
            data: Raw DOCX bytes

        Returns:
            ConversionResult with markup and warnings

        Raises:
            ConversionError: If the document cannot be converted
        """
