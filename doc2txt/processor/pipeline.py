from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from doc2txt.extraction.formats import Format


@dataclass(slots=True)
class PipelineContext:
    source_path: Path
    format: Format = Format.UNSUPPORTED
    raw_bytes: bytes = b""
    extracted_text: str = ""
    output_path: Path | None = None
    source_removed: bool = False
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
