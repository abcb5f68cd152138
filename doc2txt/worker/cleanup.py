import os
from collections.abc import Callable
from pathlib import Path

from doc2txt.exceptions import FileWriteError
from doc2txt.logging.logger import Log
from doc2txt.processor.models import ExtractionOutcome, SweepResult


class EmptyEntrySweeper:
    """Deletes zero-byte files, then directories left empty, below a root.

    Independent of extraction: it only looks at what is on disk when it runs.
    """

    def sweep(self, root: Path) -> SweepResult:
        """Sweep root bottom-up; root itself is never removed.

        An entry that cannot be removed is logged and recorded as a failure,
        and the sweep goes on with the rest.
        """
        result = SweepResult()
        for dirpath, _dirnames, filenames in os.walk(root, topdown=False):
            current = Path(dirpath)
            for name in sorted(filenames):
                path = current / name
                if not path.is_symlink() and path.stat().st_size == 0:
                    self._try_remove(path, path.unlink, result)
            if current != root and not any(current.iterdir()):
                self._try_remove(current, current.rmdir, result)
        return result

    def _try_remove(self, path: Path, remover: Callable[[], None], result: SweepResult) -> None:
        try:
            _remove(path, remover)
        except FileWriteError as error:
            Log.error(f"xxx {path} - {error}")
            result.failed.append(ExtractionOutcome(source=path, error=error))
            return
        Log.info(f"Removed empty {path}")
        result.removed.append(path)


def _remove(path: Path, remover: Callable[[], None]) -> None:
    try:
        remover()
    except OSError as exc:
        raise FileWriteError(f"Cannot remove {path}: {exc}") from exc
