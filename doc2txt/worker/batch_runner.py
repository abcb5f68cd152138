from pathlib import Path

from doc2txt.config.settings import Settings
from doc2txt.exceptions import FileReadError, FileWriteError
from doc2txt.extraction.formats import Format
from doc2txt.logging.logger import Log
from doc2txt.processor.models import BatchReport, ExtractionOutcome
from doc2txt.worker.cleanup import EmptyEntrySweeper
from doc2txt.worker.file_runner import FileRunner


class BatchRunner:
    """Walk a directory: convert -> remove trash -> sweep empty entries."""

    def __init__(
        self,
        file_runner: FileRunner,
        sweeper: EmptyEntrySweeper,
        settings: Settings,
    ) -> None:
        self._file_runner = file_runner
        self._sweeper = sweeper
        self._settings = settings

    def run(self, root: Path) -> BatchReport:
        """Process every file below root, one at a time.

        Failures of one file are reported and the walk continues, unless
        fail_fast is set. The file list is taken before any output is
        written, so freshly written .txt files are not converted again.

        Raises:
            FileReadError: if root is not a directory.
        """
        if not root.is_dir():
            raise FileReadError(f"Not a directory: {root}")
        Log.info(f"Converting files under {root}")
        report = BatchReport()
        try:
            for path in self._collect_files(root):
                outcome = self._handle(path, report)
                if outcome is not None and not outcome.ok and self._settings.fail_fast:
                    Log.error(f"Stopping after first failure: {path}")
                    report.aborted = True
                    break
            if self._settings.cleanup_empty and not report.aborted:
                self._sweep(root, report)
        except KeyboardInterrupt:
            Log.info("Interrupted, stopping batch")
            report.aborted = True
        Log.info(f"Batch finished: {report.summary()}")
        return report

    def _collect_files(self, root: Path) -> list[Path]:
        return sorted(p for p in root.rglob("*") if p.is_file())

    def _handle(self, path: Path, report: BatchReport) -> ExtractionOutcome | None:
        if Format.from_path(path) is not Format.UNSUPPORTED:
            outcome = self._file_runner.run(path)
            report.record(outcome)
            return outcome
        if self._settings.remove_trash and self._is_trash(path):
            return self._remove_trash(path, report)
        return None

    def _is_trash(self, path: Path) -> bool:
        return path.suffix.lower().lstrip(".") in self._settings.trash_extensions

    def _remove_trash(self, path: Path, report: BatchReport) -> ExtractionOutcome:
        try:
            _unlink(path)
        except FileWriteError as error:
            Log.error(f"xxx {path} - {error}")
            outcome = ExtractionOutcome(source=path, error=error)
            report.record(outcome)
            return outcome
        Log.info(f"Removed trash {path}")
        report.removed_trash.append(path)
        return ExtractionOutcome(source=path)

    def _sweep(self, root: Path, report: BatchReport) -> None:
        result = self._sweeper.sweep(root)
        report.swept.extend(result.removed)
        for outcome in result.failed:
            report.record(outcome)


def _unlink(path: Path) -> None:
    try:
        path.unlink()
    except OSError as exc:
        raise FileWriteError(f"Cannot remove {path}: {exc}") from exc
