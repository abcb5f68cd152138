from typing import ClassVar

from doc2txt.exceptions import UnsupportedFormatError
from doc2txt.extraction.base import BaseTextExtractor
from doc2txt.extraction.fb2_adapter import Fb2Extractor
from doc2txt.extraction.formats import Format
from doc2txt.extraction.html_adapter import HtmlExtractor
from doc2txt.extraction.plain_text_adapter import PlainTextExtractor
from doc2txt.extraction.rtf_adapter import RtfExtractor
from doc2txt.extraction.zip_adapter import DocxExtractor, EpubExtractor


class ExtractorFactory:
    """Creates the extractor adapter for a format; one adapter per Format member."""

    ADAPTERS: ClassVar[dict[Format, type[BaseTextExtractor]]] = {
        Format.EPUB: EpubExtractor,
        Format.DOCX: DocxExtractor,
        Format.FB2: Fb2Extractor,
        Format.RTF: RtfExtractor,
        Format.HTML: HtmlExtractor,
        Format.PLAIN_TEXT: PlainTextExtractor,
    }

    @classmethod
    def create(cls, fmt: Format) -> BaseTextExtractor:
        adapter_cls = cls.ADAPTERS.get(fmt)
        if adapter_cls is None:
            raise UnsupportedFormatError(
                f"Unsupported format '{fmt.value}'. "
                f"Choose from: {[f.value for f in cls.ADAPTERS]}"
            )
        return adapter_cls()
