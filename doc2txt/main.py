import argparse
from collections.abc import Sequence

from pydantic import ValidationError

from doc2txt.config.settings import Settings
from doc2txt.exceptions import FileReadError
from doc2txt.logging.logger import Log
from doc2txt.processor.processor import build_processor
from doc2txt.worker.batch_runner import BatchRunner
from doc2txt.worker.cleanup import EmptyEntrySweeper
from doc2txt.worker.file_runner import FileRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doc2txt",
        description="Convert epub/fb2/docx/rtf/html/txt files under a folder into UTF-8 .txt files.",
    )
    parser.add_argument("source_dir", nargs="?", help="folder to convert (or DOC2TXT_SOURCE_DIR)")
    parser.add_argument(
        "-r",
        "--remove-converted",
        dest="remove_converted",
        action="store_true",
        default=None,
        help="delete each source once its .txt was written (never .txt sources)",
    )
    parser.add_argument(
        "-rt",
        "--remove-trash",
        dest="remove_trash",
        action="store_true",
        default=None,
        help="delete files with non-convertible extensions (djvu, doc, jpg, zip, ...)",
    )
    parser.add_argument(
        "--cleanup",
        dest="cleanup_empty",
        action="store_true",
        default=None,
        help="after converting, delete empty files and empty folders",
    )
    parser.add_argument(
        "--fail-fast",
        dest="fail_fast",
        action="store_true",
        default=None,
        help="stop at the first file that fails",
    )
    parser.add_argument(
        "--log-level", dest="log_level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL"
    )
    return parser


def load_settings(argv: Sequence[str] | None = None) -> Settings:
    """Environment settings overridden by whatever flags were given on the command line."""
    args = build_parser().parse_args(argv)
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    return Settings(**overrides)


def build_batch_runner(settings: Settings) -> BatchRunner:
    file_runner = FileRunner(build_processor(settings))
    return BatchRunner(file_runner, EmptyEntrySweeper(), settings)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> batch run. Returns the process exit status."""
    try:
        settings = load_settings(argv)
    except ValidationError as exc:
        Log.configure("INFO")
        Log.error(f"Invalid settings: {exc}")
        return 2
    Log.configure(settings.log_level)
    if settings.source_dir is None:
        Log.error("No source folder given (argument or DOC2TXT_SOURCE_DIR)")
        return 2
    try:
        report = build_batch_runner(settings).run(settings.source_dir)
    except FileReadError as exc:
        Log.error(str(exc))
        return 2
    return 1 if report.has_failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
