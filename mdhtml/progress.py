"""progress and output handling for batch conversions."""

from typing import Any, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class ProgressHandler:
    """
    tracks a batch run: one bar step per source file, grown by job files.

    Every job is recorded as converted or failed; a source file that can't
    be read at all counts as one failed document. The bar shows the running
    failure count and the summary reports how many job files expanded into
    several documents.
    """

    def __init__(self, quiet: bool = False, show_progress: bool = False) -> None:
        self.quiet = quiet
        self.show_progress = show_progress
        self.converted = 0
        self.failed = 0
        self.sources = 0
        self.expanded_sources = 0
        self._source_jobs = 0
        self._console = Console(stderr=True)
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None
        self._total = 0

    def __enter__(self) -> "ProgressHandler":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self._stop_bar()

    def _stop_bar(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task_id = None

    def _start_bar(
        self, *columns: ProgressColumn, description: str, **task: Any
    ) -> None:
        self._stop_bar()
        self._progress = Progress(*columns, console=self._console, transient=True)
        self._progress.start()
        self._task_id = self._progress.add_task(description, **task)

    def _bar_update(self, **fields: Any) -> None:
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, **fields)

    @property
    def documents(self) -> int:
        return self.converted + self.failed

    def start_discovery(self) -> None:
        """shows a spinner while sources are discovered."""
        if not self.show_progress:
            return

        self._start_bar(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            description="Discovering markdown sources...",
            total=None,
        )

    def start_conversion(self, source_count: int) -> None:
        """replaces the spinner with a bar sized to the discovered sources."""
        self._total = source_count
        if not self.show_progress:
            return

        self._start_bar(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn("[red]{task.fields[failed]} failed[/red]"),
            TextColumn("- {task.fields[name]}"),
            description="Converting",
            total=source_count,
            failed=0,
            name="",
        )

    def start_source(self, source_name: str) -> None:
        """begins counting the jobs of one source file."""
        self.sources += 1
        self._source_jobs = 0
        self._bar_update(name=source_name)

    def record(self, name: str, ok: bool) -> None:
        """records one converted or failed job and advances the bar."""
        self._source_jobs += 1
        if self._source_jobs == 2:
            self.expanded_sources += 1
        if self._source_jobs > 1:
            # the source's first job used its own bar step
            self._total += 1
            self._bar_update(total=self._total)

        if ok:
            self.converted += 1
        else:
            self.failed += 1
        self._bar_update(advance=1, name=name, failed=self.failed)

    def fail_source(self, message: str) -> None:
        """records a source that stopped before or between its jobs."""
        self.log_error(message)
        self.failed += 1
        if self._source_jobs == 0:
            self._bar_update(advance=1, failed=self.failed)
        else:
            self._total += 1
            self._bar_update(total=self._total, advance=1, failed=self.failed)

    def log_error(self, message: str) -> None:
        """prints error message (always shown, even in quiet mode)."""
        self._console.print(f"[red]ERROR:[/red] {message}")

    def log_info(self, message: str) -> None:
        """prints info message (only when not quiet and progress disabled)."""
        if self.quiet or self.show_progress:
            return

        self._console.print(message)

    def finish(self) -> None:
        """stops the bar and prints the run summary unless quiet."""
        self._stop_bar()

        if self.quiet:
            return

        summary = (
            f"Processed {self.documents} document(s) from {self.sources} "
            f"source(s): {self.converted} converted, {self.failed} failed"
        )
        if self.expanded_sources:
            summary += (
                f" ({self.expanded_sources} job file(s) held several documents)"
            )
        self._console.print(summary)
