# FavSync Importer
# Merge an export artifact into the host's favorites and journal the additions

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.console import Console

from favsync.errors import ConnectorUnavailableError, EntryError
from favsync.logger import SyncLogger
from favsync.sync.artifact import read_artifact
from favsync.sync.models import ExportArtifact, FailedEntry, ImportReport, JournalEntry, RollbackJournal
from favsync.utils.platform import get_host_id

if TYPE_CHECKING:
    from favsync.connector.base import HostConnector
    from favsync.sync.journal import JournalStore


def import_favorites(
    artifact: ExportArtifact,
    connector: HostConnector,
    journal_store: JournalStore,
    *,
    source_path: str = "",
    dry_run: bool = False,
    host_id: Optional[str] = None,
    clock: Optional[Callable[[], datetime]] = None,
    logger: Optional[SyncLogger] = None,
) -> ImportReport:
    """
    Import an artifact's favorites into the host.

    Duplicate detection uses a snapshot of the host's favorite paths taken
    once before the first entry. The snapshot is not updated as entries are
    added, so a later entry repeating the path of an entry added in this
    run is attempted again and gets whatever outcome the connector gives a
    duplicate add.

    Args:
        artifact: Artifact to import.
        connector: Host connector to add favorites through.
        journal_store: Where the rollback journal is written.
        source_path: Artifact location, recorded in the journal.
        dry_run: If True, classify entries without adding or journaling.
        host_id: Host identity recorded in the journal. Defaults to this machine.
        clock: Returns timestamps. Defaults to UTC now.
        logger: Optional event sink.

    Returns:
        ImportReport with Added, Skipped and Failed entries in artifact order.

    Raises:
        ConnectorUnavailableError: If the host cannot be read before processing.
    """
    clock = clock or (lambda: datetime.now(timezone.utc))
    logger = logger or SyncLogger(Console(quiet=True))
    report = ImportReport(source_path=source_path, dry_run=dry_run)

    if not artifact.count_matches:
        logger.warning(
            f"Artifact count {artifact.count} does not match {len(artifact.entries)} entries; importing the entries"
        )

    snapshot = connector.favorite_paths()
    logger.info(f"Importing {len(artifact.entries)} favorites ({len(snapshot)} already present)")

    for entry in artifact.entries:
        if entry.path in snapshot:
            report.record_skipped(entry)
            logger.info(f"Skipped (already a favorite): {entry.name} ({entry.path})")
            continue

        try:
            handle = connector.resolve_path(entry.path)
            if not dry_run:
                connector.add_favorite(handle)
        except (EntryError, ConnectorUnavailableError) as e:
            # A host dropping out mid-run fails the entry, so the journal
            # still records everything added before it.
            report.record_failed(FailedEntry(name=entry.name, path=entry.path, error=str(e)))
            logger.error(f"Failed: {entry.name} ({entry.path}): {e}")
            continue

        report.record_added(JournalEntry(name=entry.name, path=entry.path, imported_at=clock().isoformat()))
        verb = "Would add" if dry_run else "Added"
        logger.success(f"{verb}: {entry.name} ({entry.path})")

    if not dry_run:
        journal = RollbackJournal(
            import_date=clock().isoformat(),
            source_artifact_path=source_path,
            host_id=host_id or get_host_id(),
            added_entries=list(report.added),
        )
        try:
            journal_store.save(journal)
            report.journal_written = True
        except OSError as e:
            report.journal_error = str(e)
            logger.warning(f"Could not write rollback journal {journal_store.journal_path}: {e}")

    logger.info(
        f"Import summary: Added {report.added_count}, Skipped {report.skipped_count}, Failed {report.failed_count}"
    )
    return report


def import_from_file(
    artifact_path: Path,
    connector: HostConnector,
    journal_store: JournalStore,
    **kwargs,
) -> ImportReport:
    """
    Read an artifact file and import it.

    Raises:
        ArtifactNotFoundError: If the artifact file does not exist.
        ArtifactCorruptError: If it cannot be parsed.
        ConnectorUnavailableError: If the host cannot be read.
    """
    artifact = read_artifact(artifact_path)
    return import_favorites(artifact, connector, journal_store, source_path=str(artifact_path), **kwargs)
