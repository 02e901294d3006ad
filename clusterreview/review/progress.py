"""Progress reporting and cancellation for tagging runs."""

from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn


class CancellationToken:
    """Poll-able flag used to request that a tagging run stops."""

    def __init__(self) -> None:
        self._requested = False

    def cancel(self) -> None:
        self._requested = True

    def is_set(self) -> bool:
        return self._requested


class ProgressReporter:
    """Receives progress updates from the tagger. Every method is a no-op here."""

    def main_status(self, message: str) -> None:
        pass

    def main_progress(self, current: int, total: Optional[int] = None) -> None:
        pass

    def sub_status(self, message: str) -> None:
        pass

    def sub_progress(self, current: int, total: Optional[int] = None) -> None:
        pass

    def log(self, message: str) -> None:
        pass

    def completed(self) -> None:
        pass

    def aborted(self, completed: int, total: int) -> None:
        pass


class ConsoleProgressReporter(ProgressReporter):
    """Reports progress to the terminal with rich."""

    def __init__(self, console: Optional[Console] = None, timestamps: bool = True) -> None:
        """
        Initialize console reporter.

        Args:
            console: Console to write to (a new one by default)
            timestamps: Prefix log lines with the time
        """
        self.console = console or Console()
        self.timestamps = timestamps
        self.progress: Optional[Progress] = None
        self._main_task = None
        self._sub_task = None

    def __enter__(self) -> "ConsoleProgressReporter":
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )
        self.progress.start()
        self._main_task = self.progress.add_task("Tagging", total=None)
        self._sub_task = self.progress.add_task("", total=None)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.progress is not None:
            self.progress.stop()
            self.progress = None

    def _write(self, message: str) -> None:
        if self.timestamps:
            self.console.log(message, markup=False)
        else:
            self.console.print(message, markup=False)

    def main_status(self, message: str) -> None:
        self._write(message)
        if self.progress is not None:
            self.progress.update(self._main_task, description=message)

    def main_progress(self, current: int, total: Optional[int] = None) -> None:
        if self.progress is not None:
            if total is not None:
                self.progress.update(self._main_task, total=total)
            self.progress.update(self._main_task, completed=current)

    def sub_status(self, message: str) -> None:
        self._write(f"  {message}")
        if self.progress is not None:
            self.progress.update(self._sub_task, description=f"  {message}")

    def sub_progress(self, current: int, total: Optional[int] = None) -> None:
        if self.progress is not None:
            if total is not None:
                self.progress.update(self._sub_task, total=total)
            self.progress.update(self._sub_task, completed=current)

    def log(self, message: str) -> None:
        self._write(f"    {message}")

    def completed(self) -> None:
        self.console.print("[green]✅ Tagging completed[/green]")

    def aborted(self, completed: int, total: int) -> None:
        self.console.print(f"[yellow]Aborted after {completed} of {total} clusters[/yellow]")
