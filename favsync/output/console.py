# FavSync Console Output
# Rich-based rendering of favorites, reports and journals

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from favsync.sync.models import (
    ExportArtifact,
    FavoriteRef,
    ImportReport,
    OutcomeStatus,
    RollbackJournal,
    RollbackReport,
)


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for export, import and rollback runs.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(force_terminal=colored if colored else None, no_color=not colored)

    @property
    def rich(self) -> RichConsole:
        """Underlying rich console, shared with the logging sink."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]")

    def print_favorites(self, favorites: list[FavoriteRef], *, title: str = "Favorites") -> None:
        """Print the live favorites as a numbered table."""
        if not favorites:
            self._console.print("[dim]No favorites[/dim]")
            return

        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Path")

        for position, ref in enumerate(favorites, start=1):
            table.add_row(str(position), escape(ref.name), escape(ref.path))

        self._console.print(table)

    def print_export_result(self, artifact: ExportArtifact, path: str) -> None:
        """Print where an export was written and what it holds."""
        self._console.print(
            Panel(
                f"[green]Export completed[/green]\n"
                f"File: {escape(path)}\n"
                f"Host: {escape(artifact.host_id)} ({escape(artifact.host_version)})\n"
                f"User: {escape(artifact.user_id)}\n"
                f"Favorites: {artifact.count}",
                title="Export",
                border_style="green",
            )
        )

    def print_import_report(self, report: ImportReport) -> None:
        """
        Print an import report.

        Entries are listed in artifact order. The summary panel is yellow
        when entries failed or the journal was not written.
        """
        added_label = "Would add" if report.dry_run else "Added"

        if self.verbose or report.total:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Status")
            table.add_column("Name", style="cyan")
            table.add_column("Path")
            table.add_column("Detail", style="dim")

            status_labels = {
                OutcomeStatus.ADDED: f"[green]{added_label}[/green]",
                OutcomeStatus.SKIPPED: "[dim]Skipped[/dim]",
                OutcomeStatus.FAILED: "[red]Failed[/red]",
            }
            for outcome in report.outcomes:
                table.add_row(
                    status_labels[outcome.status], escape(outcome.name), escape(outcome.path), escape(outcome.detail)
                )

            self._console.print(table)

        lines = [
            "[yellow]Dry run completed[/yellow]" if report.dry_run else "[green]Import completed[/green]",
            f"Source: {escape(report.source_path or '-')}",
            f"{added_label}: {report.added_count}, Skipped: {report.skipped_count}, Failed: {report.failed_count}",
        ]
        if report.journal_error:
            lines.append(f"[yellow]Rollback journal not written:[/yellow] {escape(report.journal_error)}")
        elif report.journal_written:
            lines.append("Run 'favsync rollback' to undo this import.")

        degraded = report.has_failures or report.journal_error is not None
        self._console.print(Panel("\n".join(lines), title="Import", border_style="yellow" if degraded else "green"))

    def print_rollback_report(self, report: RollbackReport) -> None:
        """Print a rollback report."""
        if self.verbose or report.not_found:
            for entry in report.removed:
                self._console.print(f"    [green]✓[/green] {escape(entry.name)} [dim]({escape(entry.path)})[/dim]")
            for entry in report.not_found:
                self._console.print(
                    f"    [yellow]○[/yellow] {escape(entry.name)} [dim]({escape(entry.path)}) not found[/dim]"
                )

        lines = [
            "[green]Rollback completed[/green]",
            f"Removed: {report.removed_count}, NotFound: {report.not_found_count}",
        ]
        if report.journal_error:
            lines.append(f"[yellow]Rollback journal not deleted:[/yellow] {escape(report.journal_error)}")

        self._console.print(
            Panel(
                "\n".join(lines),
                title="Rollback",
                border_style="yellow" if report.journal_error else "green",
            )
        )

    def print_journal(self, journal: RollbackJournal, path: str) -> None:
        """Print the pending rollback journal."""
        self._console.print(
            Panel(
                f"Journal: {escape(path)}\n"
                f"Imported: {escape(journal.import_date)}\n"
                f"Source: {escape(journal.source_artifact_path or '-')}\n"
                f"Host: {escape(journal.host_id)}\n"
                f"Entries to remove on rollback: {len(journal.added_entries)}",
                title="Rollback Journal",
                border_style="blue",
            )
        )

        if journal.added_entries:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Name", style="cyan")
            table.add_column("Path")
            table.add_column("Imported At", style="dim")
            for entry in journal.added_entries:
                table.add_row(escape(entry.name), escape(entry.path), escape(entry.imported_at))
            self._console.print(table)

    def print_config_summary(self, config_path: str, store_path: str, journal_path: str) -> None:
        """Print configuration summary."""
        self._console.print(
            Panel(
                f"Config: {escape(config_path)}\n"
                f"Host store: {escape(store_path)}\n"
                f"Journal: {escape(journal_path)}",
                title="FavSync Configuration",
                border_style="blue",
            )
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        """
        Ask for confirmation.

        Args:
            message: Confirmation message.
            default: Default value if user just presses enter.

        Returns:
            True if confirmed.
        """
        suffix = " [Y/n]" if default else " [y/N]"
        response = self._console.input(f"{escape(message + suffix)}: ").strip().lower()

        if not response:
            return default

        return response in ("y", "yes")


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
