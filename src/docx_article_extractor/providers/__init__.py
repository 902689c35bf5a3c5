"""Markup converter implementations for DOCX article extraction."""

from .base import BaseConverter, ConversionResult, ConversionWarning
from .local import MammothConverter
from .remote import RemoteConverter

__all__ = ["BaseConverter", "ConversionResult", "ConversionWarning", "MammothConverter", "RemoteConverter"]
