from doc2txt.exceptions import ExtractionError
from doc2txt.extraction.factory import ExtractorFactory
from doc2txt.extraction.formats import Format
from doc2txt.logging.logger import Log


class FormatDispatcher:
    """Routes one document buffer to the extractor for its format.

    Holds no state between calls; every call builds a fresh adapter.
    """

    def extract(self, identifier: str, raw_bytes: bytes, fmt: Format) -> str:
        """Extract text from one document.

        Args:
            identifier: Name used in log messages, usually the source path.
            raw_bytes: Whole file content.
            fmt: Format chosen by the caller, usually from the file extension.

        Returns:
            Extracted text, possibly empty.

        Raises:
            UnsupportedFormatError: for Format.UNSUPPORTED.
            ArchiveError, ParseError, DecodeError: from the format pipeline.
        """
        extractor = ExtractorFactory.create(fmt)
        Log.debug(f"Extracting {identifier} as {fmt.value} ({len(raw_bytes)} bytes)")
        try:
            text = extractor.extract(raw_bytes)
        except ExtractionError as exc:
            Log.debug(f"{type(exc).__name__} while extracting {identifier}: {exc}")
            raise
        Log.debug(f"Extracted {len(text)} chars from {identifier}")
        return text
