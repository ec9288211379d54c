"""Tests for file extractors."""

import pytest
from pathlib import Path

from rtfplain.converter.pipeline import Strategy
from rtfplain.extractors.base import ExtractionError, read_text
from rtfplain.extractors.registry import ExtractorRegistry
from rtfplain.extractors.rtf import RtfExtractor
from rtfplain.extractors.text import TextExtractor


class TestReadText:
    def test_utf8(self, tmp_path):
        path = tmp_path / "a.rtf"
        path.write_text("{\\rtf1 café}", encoding="utf-8")

        assert read_text(path) == "{\\rtf1 café}"

    def test_utf8_bom_removed(self, tmp_path):
        path = tmp_path / "a.rtf"
        path.write_bytes(b"\xef\xbb\xbf{\\rtf1 x}")

        assert read_text(path) == "{\\rtf1 x}"

    def test_windows_1252_fallback(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"5 \xb5g \x96 ok")

        assert read_text(path) == "5 µg – ok"

    def test_latin1_last_resort(self, tmp_path):
        path = tmp_path / "a.txt"
        # 0x81 is undefined in cp1252
        path.write_bytes(b"x\x81y")

        assert read_text(path) == "x\x81y"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ExtractionError):
            read_text(tmp_path / "missing.rtf")


class TestRtfExtractor:
    @pytest.fixture
    def extractor(self):
        return RtfExtractor()

    def test_can_handle_rtf(self, extractor):
        assert extractor.can_handle(Path("letter.rtf"))
        assert extractor.can_handle(Path("LETTER.RTF"))

    def test_cannot_handle_pdf(self, extractor):
        assert not extractor.can_handle(Path("letter.pdf"))

    def test_extract(self, extractor, tmp_path):
        path = tmp_path / "letter.rtf"
        path.write_text("{\\rtf1{\\fonttbl{\\f0 Arial;}}Dear Dr Patel,\\par Thanks}")

        assert extractor.extract(path) == "Dear Dr Patel,\nThanks"

    def test_extract_with_details(self, extractor, tmp_path):
        path = tmp_path / "letter.rtf"
        path.write_text("{\\rtf1 Hi}")

        result = extractor.extract_with_details(path)

        assert result.text == "Hi"
        assert result.strategy == Strategy.STRUCTURED

    def test_plain_text_with_rtf_extension(self, extractor, tmp_path):
        path = tmp_path / "misnamed.rtf"
        path.write_text("Just text")

        result = extractor.extract_with_details(path)

        assert result.text == "Just text"
        assert result.strategy == Strategy.PASSTHROUGH

    def test_extract_nonexistent_file(self, extractor, tmp_path):
        with pytest.raises(ExtractionError):
            extractor.extract(tmp_path / "nonexistent.rtf")


class TestTextExtractor:
    @pytest.fixture
    def extractor(self):
        return TextExtractor()

    def test_extensions(self, extractor):
        assert ".txt" in extractor.extensions
        assert ".rtf" not in extractor.extensions

    def test_plain_text_unchanged(self, extractor, tmp_path):
        path = tmp_path / "note.txt"
        path.write_text("Seen in clinic.\n  Review in 6 weeks.  ")

        assert extractor.extract(path) == "Seen in clinic.\n  Review in 6 weeks.  "

    def test_rtf_content_converted(self, extractor, tmp_path):
        path = tmp_path / "exported.txt"
        path.write_text("{\\rtf1 Converted\\par anyway}")

        assert extractor.extract(path) == "Converted\nanyway"


class TestExtractorRegistry:
    @pytest.fixture
    def registry(self):
        return ExtractorRegistry()

    def test_can_extract_rtf(self, registry):
        assert registry.can_extract(Path("test.rtf"))

    def test_can_extract_txt(self, registry):
        assert registry.can_extract(Path("test.txt"))

    def test_cannot_extract_unknown(self, registry):
        assert not registry.can_extract(Path("test.pdf"))
        assert not registry.can_extract(Path("test.docx"))

    def test_extract_unknown_raises_error(self, registry, tmp_path):
        test_file = tmp_path / "test.xyz"
        test_file.write_text("test")

        with pytest.raises(ExtractionError) as exc_info:
            registry.extract(test_file)
        assert ".xyz" in str(exc_info.value)

    def test_extract_rtf_via_registry(self, registry, tmp_path):
        test_file = tmp_path / "letter.rtf"
        test_file.write_text("{\\rtf1 NHS 943 476 5919}")

        assert registry.extract(test_file) == "NHS 943 476 5919"

    def test_supported_extensions(self, registry):
        exts = registry.supported_extensions

        assert ".rtf" in exts
        assert ".txt" in exts
        assert exts == sorted(set(exts))

    def test_case_insensitive_extension(self, registry):
        assert registry.can_extract(Path("test.RTF"))
        assert registry.can_extract(Path("test.TxT"))
