from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of converting one file: extracted text, or the typed failure."""

    source: Path
    text: str | None = None
    output: Path | None = None
    source_removed: bool = False
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    """Accumulates per-file outcomes and filesystem side effects of one batch run."""

    converted: list[Path] = field(default_factory=list)
    empty: list[Path] = field(default_factory=list)
    failed: list[ExtractionOutcome] = field(default_factory=list)
    removed_sources: list[Path] = field(default_factory=list)
    removed_trash: list[Path] = field(default_factory=list)
    swept: list[Path] = field(default_factory=list)
    aborted: bool = False

    def record(self, outcome: ExtractionOutcome) -> None:
        if not outcome.ok:
            self.failed.append(outcome)
            return
        if outcome.output is None:
            self.empty.append(outcome.source)
        else:
            self.converted.append(outcome.source)
        if outcome.source_removed:
            self.removed_sources.append(outcome.source)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)

    def summary(self) -> str:
        return (
            f"{len(self.converted)} converted, {len(self.empty)} empty, "
            f"{len(self.failed)} failed, {len(self.removed_sources)} sources removed, "
            f"{len(self.removed_trash)} trash removed, {len(self.swept)} empty entries swept"
        )


@dataclass
class SweepResult:
    """Entries the empty-entry sweep removed, and the ones it could not remove."""

    removed: list[Path] = field(default_factory=list)
    failed: list[ExtractionOutcome] = field(default_factory=list)
