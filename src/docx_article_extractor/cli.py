"""Command-line interface for DOCX article extraction."""

import argparse
import json
import sys

from .config import Config
from .exceptions import ConfigurationError
from .logger import configure_logging, get_logger
from .markers import MarkerSet
from .processor import DocumentProcessor
from .render import export_articles, render_result

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docx-article-extractor",
        description="Extract title/content articles from a DOCX document.",
    )
    parser.add_argument("file", help="DOCX file to process")
    parser.add_argument("--csv", metavar="OUT", help="Write extracted articles to a CSV file")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Returns:
        0 when articles were extracted, 1 when none were found, 2 on configuration errors
    """
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging("DEBUG" if args.verbose else config.log_level, config.log_format)

    processor = DocumentProcessor(
        converter=config.build_converter(),
        markers=MarkerSet(config.title_keyword, config.content_keyword),
    )
    logger.info("Processing file", extra={"path": args.file, "converter": config.converter})
    result = processor.process_file(args.file)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(render_result(result))

    if args.csv and result.articles:
        export_articles(result.articles, args.csv)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
