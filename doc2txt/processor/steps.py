from doc2txt.exceptions import FileWriteError, UnsupportedFormatError
from doc2txt.extraction.dispatcher import FormatDispatcher
from doc2txt.extraction.formats import Format
from doc2txt.logging.logger import Log
from doc2txt.processor.file_loader import FileLoader
from doc2txt.processor.pipeline import PipelineContext, PipelineStep


class DetectFormatStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.format = Format.from_path(context.source_path)
        if context.format is Format.UNSUPPORTED:
            raise UnsupportedFormatError(
                f"unsupported extension '{context.source_path.suffix}'"
            )
        return context


class LoadFileStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._file_loader.load(context.source_path)
        Log.debug(f"Loaded {len(context.raw_bytes)} bytes from {context.source_path}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, dispatcher: FormatDispatcher) -> None:
        self._dispatcher = dispatcher

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._dispatcher.extract(
            str(context.source_path), context.raw_bytes, context.format
        )
        # Buffers are scoped to one file; drop the source bytes once extracted.
        context.raw_bytes = b""
        return context


class WriteOutputStep(PipelineStep):
    """Writes trimmed non-empty text next to the source; empty text writes nothing."""

    def __init__(self, output_suffix: str = ".txt") -> None:
        self._output_suffix = output_suffix

    def run(self, context: PipelineContext) -> PipelineContext:
        text = context.extracted_text.strip()
        context.extracted_text = text
        if not text:
            Log.warning(f"No text extracted from {context.source_path}, nothing written")
            return context
        out = context.source_path.with_suffix(self._output_suffix)
        try:
            out.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise FileWriteError(f"Cannot write {out}: {exc}") from exc
        context.output_path = out
        Log.info(f"-> {out}")
        return context


class RemoveSourceStep(PipelineStep):
    """Deletes a converted source; plain-text sources and empty results are kept."""

    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled

    def run(self, context: PipelineContext) -> PipelineContext:
        if not self._enabled or context.output_path is None:
            return context
        if context.format is Format.PLAIN_TEXT or context.output_path == context.source_path:
            return context
        try:
            context.source_path.unlink()
        except OSError as exc:
            raise FileWriteError(f"Cannot remove {context.source_path}: {exc}") from exc
        context.source_removed = True
        Log.info(f"Removed source {context.source_path}")
        return context


class ReportFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(f"xxx {context.source_path} - {context.error_message}")
        return context
