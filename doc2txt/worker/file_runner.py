from pathlib import Path

from doc2txt.logging.logger import Log
from doc2txt.processor.models import ExtractionOutcome
from doc2txt.processor.processor import Processor


class FileRunner:
    """Run one file through the processor and turn any failure into an outcome."""

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def run(self, source_path: Path) -> ExtractionOutcome:
        try:
            context = self._processor.process(source_path)
        except Exception as exc:
            Log.debug(f"{source_path} failed with {type(exc).__name__}")
            return ExtractionOutcome(source=source_path, error=exc)
        return ExtractionOutcome(
            source=source_path,
            text=context.extracted_text,
            output=context.output_path,
            source_removed=context.source_removed,
        )
