"""End-to-end tests for the document processor with a deterministic converter."""

import re

import pytest
from conftest import NO_MARKERS, SINGLE_ARTICLE, TITLE_WITHOUT_CONTENT, TWO_ARTICLES

from docx_article_extractor.exceptions import ConversionError
from docx_article_extractor.models import Article, ProcessingResult

MARKUPS = [TWO_ARTICLES, SINGLE_ARTICLE, TITLE_WITHOUT_CONTENT, NO_MARKERS, "", "<p><<<>>></p>"]


def stages(result):
    return [entry.stage for entry in result.logs]


class TestScenarios:
    def test_two_articles(self, make_processor):
        result = make_processor(TWO_ARTICLES).process(b"docx-bytes", name="two.docx")

        assert result.success is True
        assert result.message == "Successfully extracted 2 articles from two.docx"
        assert result.articles == [Article("Title One", "Body One"), Article("Title Two", "Body Two")]

    def test_title_without_content_keyword(self, make_processor):
        result = make_processor(TITLE_WITHOUT_CONTENT).process(b"docx-bytes", name="b.docx")

        assert result.success is False
        assert "Articles not found" in result.message
        assert result.articles == []
        assert "Main Pattern Analysis" in stages(result)
        assert "Single Pattern Analysis" in stages(result)

    def test_no_keywords_at_all(self, make_processor):
        result = make_processor(NO_MARKERS).process(b"docx-bytes")
        checks = [e for e in result.logs if e.stage == "Pattern Check"]

        assert result.success is False
        assert len(checks) == 4
        assert all(not c.success for c in checks)
        assert result.logs[-1].stage == "Pattern Matching Failed"

    def test_single_article(self, make_processor):
        result = make_processor(SINGLE_ARTICLE).process(b"docx-bytes")

        assert result.success is True
        assert result.articles == [Article("Only Title", "<p>First line</p>\n<p>Second line</p>")]
        assert "Article Found (Single Pattern)" in stages(result)
        assert "Article Found (Main Pattern)" not in stages(result)

    def test_inline_markup_in_title(self, make_processor):
        html = "<p>Заголовок: <em>Title</em></p><p>Содержимое:</p>Body"
        result = make_processor(html).process(b"docx-bytes")
        assert [a.title for a in result.articles] == ["Title"]


class TestInvariants:
    @pytest.mark.parametrize("markup", MARKUPS)
    def test_success_iff_articles(self, make_processor, markup):
        result = make_processor(markup).process(b"docx-bytes")
        assert isinstance(result, ProcessingResult)
        assert result.success == (len(result.articles) > 0)

    @pytest.mark.parametrize("markup", MARKUPS)
    def test_log_order(self, make_processor, markup):
        names = stages(make_processor(markup).process(b"docx-bytes"))

        assert names[0] == "File Reading"
        overview = names.index("HTML Structure Analysis")
        checks = [i for i, name in enumerate(names) if name == "Pattern Check"]
        assert len(checks) == 4
        assert all(i > overview for i in checks)
        extraction = names.index("Main Pattern Analysis")
        assert extraction > max(checks)

    @pytest.mark.parametrize("markup", MARKUPS)
    def test_titles_have_no_tags(self, make_processor, markup):
        for article in make_processor(markup).process(b"docx-bytes").articles:
            assert not re.search(r"<[^>]*>", article.title)

    def test_runs_are_reproducible(self, make_processor):
        processor = make_processor(TWO_ARTICLES)
        first = processor.process(b"docx-bytes")
        second = processor.process(b"docx-bytes")

        assert first.articles == second.articles
        assert first.to_dict() == second.to_dict()

    def test_runs_do_not_share_logs(self, make_processor):
        processor = make_processor(TWO_ARTICLES)
        first = processor.process(b"docx-bytes")
        second = processor.process(b"docx-bytes")
        assert len(first.logs) == len(second.logs)


class TestConversion:
    def test_converter_receives_bytes(self, make_processor):
        processor = make_processor(TWO_ARTICLES)
        processor.process(b"raw document")
        assert processor.converter.calls == [b"raw document"]

    def test_warnings_grouped_by_type(self, make_processor, sample_warnings):
        result = make_processor(TWO_ARTICLES, warnings=sample_warnings).process(b"docx-bytes")
        names = stages(result)
        entry = result.logs[names.index("Conversion Messages")]

        assert names.index("DOCX Conversion") < names.index("Conversion Messages") < names.index(
            "HTML Structure Analysis"
        )
        assert entry.success is True
        assert entry.diagnostics.message_types == ["warning", "warning", "error"]
        assert sorted(entry.diagnostics.messages_by_type) == ["error", "warning"]
        assert len(entry.diagnostics.messages_by_type["warning"]) == 2
        assert entry.diagnostics.messages_by_type["error"][0]["message"] == "Image could not be read"

    def test_no_warnings_no_entry(self, make_processor):
        result = make_processor(TWO_ARTICLES).process(b"docx-bytes")
        assert "Conversion Messages" not in stages(result)


class TestFailures:
    def test_conversion_error(self, make_processor):
        result = make_processor(error=ConversionError("corrupt archive")).process(b"docx-bytes")

        assert result.success is False
        assert result.articles == []
        assert result.message == "Error processing file: corrupt archive"
        error = result.logs[-1]
        assert error.stage == "Process Error"
        assert error.error == "ConversionError: corrupt archive"
        assert error.diagnostics.name == "ConversionError"
        assert error.diagnostics.to_dict()["errorDetails"]["message"] == "corrupt archive"

    def test_unexpected_converter_exception(self, make_processor):
        result = make_processor(error=KeyError("boom")).process(b"docx-bytes")
        assert result.success is False
        assert result.message.startswith("Error processing file:")
        assert stages(result)[0] == "File Reading"

    def test_missing_file(self, make_processor, tmp_path):
        result = make_processor(TWO_ARTICLES).process_file(tmp_path / "missing.docx")

        assert result.success is False
        assert stages(result) == ["File Reading", "Process Error"]
        assert result.logs[-1].diagnostics.name == "FileNotFoundError"

    def test_extraction_error_degrades_to_not_found(self, make_processor, monkeypatch):
        processor = make_processor(TWO_ARTICLES)

        def explode(pattern, html):
            raise RuntimeError("bad pattern")

        monkeypatch.setattr(processor.extractor.matcher, "match_all", explode)
        result = processor.process(b"docx-bytes")

        assert result.success is False
        assert result.articles == []
        assert "Articles not found" in result.message
        assert stages(result)[-1] == "Article Extraction Error"


def test_process_file_reads_from_disk(make_processor, tmp_path):
    path = tmp_path / "articles.docx"
    path.write_bytes(b"docx on disk")
    processor = make_processor(TWO_ARTICLES)

    result = processor.process_file(path, name="articles.docx")

    assert processor.converter.calls == [b"docx on disk"]
    assert result.success is True
    assert result.message.endswith("from articles.docx")


def test_serialized_envelope(make_processor):
    data = make_processor(TWO_ARTICLES).process(b"docx-bytes").to_dict()

    assert data["success"] is True
    assert data["articles"][0] == {"title": "Title One", "content": "Body One"}
    first_log = data["logs"][0]
    assert first_log == {"stage": "File Reading", "success": True, "details": "Reading file: document"}
    overview = data["logs"][2]
    assert overview["htmlPreview"].endswith("...")
    assert overview["diagnostics"]["lineBreakAnalysis"]["paragraphBreaks"] == 2
