"""Console rendering and CSV export of processing results."""

import json
from pathlib import Path

import pandas as pd

from .logger import get_logger
from .models import Article, ProcessingResult

logger = get_logger("render")

CONTENT_PREVIEW = 100


def articles_frame(articles: list[Article]) -> pd.DataFrame:
    return pd.DataFrame([a.to_dict() for a in articles], columns=["title", "content"])


def render_result(result: ProcessingResult) -> str:
    """
    Render a result as text: message, article table, then every log entry.

    Args:
        result: Processing result

    Returns:
        Multi-line string
    """
    lines = [("OK" if result.success else "FAILED") + f": {result.message}", ""]

    if result.articles:
        table = articles_frame(result.articles)
        table["content"] = table["content"].str.slice(0, CONTENT_PREVIEW)
        table.index = range(1, len(table) + 1)
        lines += [f"Articles ({len(result.articles)}):", table.to_string(), ""]

    lines.append(f"Processing log ({len(result.logs)} entries):")
    for number, entry in enumerate(result.logs, start=1):
        mark = "+" if entry.success else "-"
        lines.append(f"[{mark}] {number}. {entry.stage}: {entry.details}")
        if entry.error:
            lines.append(f"    error: {entry.error}")
        if entry.html_preview:
            lines.append("    html preview:")
            lines += [f"      {line}" for line in entry.html_preview.splitlines()]
        if entry.diagnostics is not None:
            dump = json.dumps(entry.diagnostics.to_dict(), ensure_ascii=False, indent=2)
            lines.append("    diagnostics:")
            lines += [f"      {line}" for line in dump.splitlines()]

    return "\n".join(lines)


def export_articles(articles: list[Article], output_csv: str | Path) -> None:
    """
    Write articles to a CSV file with ``title`` and ``content`` columns.

    Args:
        articles: Extracted articles
        output_csv: Path to output CSV file
    """
    output_df = articles_frame(articles)
    output_df.to_csv(output_csv, index=False)
    logger.info("CSV export complete", extra={"output": str(output_csv), "total": len(articles)})
