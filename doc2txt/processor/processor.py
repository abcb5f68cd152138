from pathlib import Path

from doc2txt.config.settings import Settings
from doc2txt.extraction.dispatcher import FormatDispatcher
from doc2txt.logging.logger import Log
from doc2txt.processor.file_loader import FileLoader
from doc2txt.processor.pipeline import PipelineContext, PipelineStep
from doc2txt.processor.steps import (
    DetectFormatStep,
    ExtractTextStep,
    LoadFileStep,
    RemoveSourceStep,
    ReportFailureStep,
    WriteOutputStep,
)


class Processor:
    """Runs one source file through the conversion steps.

    Pipeline: detect format -> load -> extract -> write .txt -> remove source.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, source_path: Path) -> PipelineContext:
        """Run every step in order; on failure report it and re-raise."""
        context = PipelineContext(source_path=source_path)
        Log.debug(f"Processing {source_path}")
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        return context


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the default steps for the given settings."""
    steps: list[PipelineStep] = [
        DetectFormatStep(),
        LoadFileStep(file_loader=FileLoader()),
        ExtractTextStep(dispatcher=FormatDispatcher()),
        WriteOutputStep(output_suffix=settings.output_suffix),
        RemoveSourceStep(enabled=settings.remove_converted),
    ]
    return Processor(steps=steps, failed_step=ReportFailureStep())
