"""Configuration loaded from the environment."""

import os
import tempfile
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .providers import BaseConverter, MammothConverter, RemoteConverter

ENV_PREFIX = "DOCX_EXTRACTOR_"

DEFAULT_TITLE_KEYWORD = "Заголовок"
DEFAULT_CONTENT_KEYWORD = "Содержимое"

_CONVERTERS = ("mammoth", "remote")
_LOG_FORMATS = ("json", "standard")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Runtime settings for extraction, conversion and logging."""

    title_keyword: str = DEFAULT_TITLE_KEYWORD
    content_keyword: str = DEFAULT_CONTENT_KEYWORD
    converter: str = "mammoth"
    converter_url: str | None = None
    converter_timeout: float = 30.0
    log_level: str = "INFO"
    log_format: str = "json"
    upload_dir: str = field(default_factory=tempfile.gettempdir)
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self):
        if not self.title_keyword or not self.content_keyword:
            raise ConfigurationError("Title and content keywords must not be empty")
        if self.converter not in _CONVERTERS:
            raise ConfigurationError(f"Unknown converter '{self.converter}', expected one of {_CONVERTERS}")
        if self.converter == "remote" and not self.converter_url:
            raise ConfigurationError("Remote converter requires a converter URL")
        if self.converter_timeout <= 0:
            raise ConfigurationError("Converter timeout must be positive")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{self.log_level}', expected one of {_LOG_LEVELS}")
        if self.log_format not in _LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format '{self.log_format}', expected one of {_LOG_FORMATS}")

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Config":
        """
        Build configuration from ``DOCX_EXTRACTOR_*`` environment variables.

        Args:
            dotenv: Load a ``.env`` file first (existing variables win)

        Returns:
            Config instance

        Raises:
            ConfigurationError: If a value is invalid
        """
        if dotenv:
            load_dotenv()

        def env(name: str, default=None):
            return os.environ.get(ENV_PREFIX + name, default)

        timeout = env("CONVERTER_TIMEOUT", "30")
        try:
            converter_timeout = float(timeout)
        except ValueError as e:
            raise ConfigurationError(f"Invalid converter timeout: {timeout!r}") from e

        port = env("PORT", "8000")
        try:
            port_number = int(port)
        except ValueError as e:
            raise ConfigurationError(f"Invalid port: {port!r}") from e

        return cls(
            title_keyword=env("TITLE_KEYWORD", DEFAULT_TITLE_KEYWORD),
            content_keyword=env("CONTENT_KEYWORD", DEFAULT_CONTENT_KEYWORD),
            converter=env("CONVERTER", "mammoth").lower(),
            converter_url=env("CONVERTER_URL"),
            converter_timeout=converter_timeout,
            log_level=env("LOG_LEVEL", "INFO").upper(),
            log_format=env("LOG_FORMAT", "json").lower(),
            upload_dir=env("UPLOAD_DIR") or tempfile.gettempdir(),
            host=env("HOST", "127.0.0.1"),
            port=port_number,
        )

    def build_converter(self) -> BaseConverter:
        if self.converter == "remote":
            return RemoteConverter(self.converter_url, timeout=self.converter_timeout)
        return MammothConverter()
