import pytest

from doc2txt.exceptions import UnsupportedFormatError
from doc2txt.extraction.factory import ExtractorFactory
from doc2txt.extraction.fb2_adapter import Fb2Extractor
from doc2txt.extraction.formats import Format
from doc2txt.extraction.html_adapter import HtmlExtractor
from doc2txt.extraction.plain_text_adapter import PlainTextExtractor
from doc2txt.extraction.rtf_adapter import RtfExtractor
from doc2txt.extraction.zip_adapter import DocxExtractor, EpubExtractor


class TestExtractorFactory:
    @pytest.mark.parametrize(
        ("fmt", "adapter_cls"),
        [
            (Format.EPUB, EpubExtractor),
            (Format.DOCX, DocxExtractor),
            (Format.FB2, Fb2Extractor),
            (Format.RTF, RtfExtractor),
            (Format.HTML, HtmlExtractor),
            (Format.PLAIN_TEXT, PlainTextExtractor),
        ],
    )
    def test_creates_adapter(self, fmt: Format, adapter_cls: type) -> None:
        assert isinstance(ExtractorFactory.create(fmt), adapter_cls)

    def test_every_supported_format_has_an_adapter(self) -> None:
        supported = {fmt for fmt in Format if fmt is not Format.UNSUPPORTED}
        assert set(ExtractorFactory.ADAPTERS) == supported

    def test_raises_for_unsupported(self) -> None:
        with pytest.raises(UnsupportedFormatError, match="Unsupported format"):
            ExtractorFactory.create(Format.UNSUPPORTED)
