# FavSync Rollback Engine
# Undo the favorites added by the most recent import

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.console import Console

from favsync.logger import SyncLogger
from favsync.sync.models import RollbackReport

if TYPE_CHECKING:
    from favsync.connector.base import HostConnector
    from favsync.sync.journal import JournalStore


def rollback_last_import(
    connector: HostConnector,
    journal_store: JournalStore,
    *,
    logger: Optional[SyncLogger] = None,
) -> RollbackReport:
    """
    Remove every favorite recorded in the rollback journal, then delete it.

    Each journaled path is looked up in the host's current favorites and
    one matching favorite is removed. Paths no longer present (for example
    removed by hand since the import) are reported as not found. With two
    live favorites sharing a path, which one goes is up to the connector.

    Args:
        connector: Host connector to remove favorites through.
        journal_store: Journal written by the last import.
        logger: Optional event sink.

    Returns:
        RollbackReport with removed and not-found entries in journal order.

    Raises:
        NoJournalError: If there is no journal.
        ArtifactCorruptError: If the journal cannot be parsed.
        ConnectorUnavailableError: If the host cannot be read.
    """
    logger = logger or SyncLogger(Console(quiet=True))

    journal = journal_store.load()
    # Fail before touching anything if the host is unreachable
    connector.list_favorites()

    report = RollbackReport()
    if not journal.added_entries:
        logger.info("Last import added no favorites; nothing to roll back")

    for entry in journal.added_entries:
        present = entry.path in connector.favorite_paths()
        if present and connector.remove_favorite(entry.path):
            report.removed.append(entry)
            logger.success(f"Removed: {entry.name} ({entry.path})")
        else:
            report.not_found.append(entry)
            logger.warning(f"Not found (already removed?): {entry.name} ({entry.path})")

    try:
        journal_store.delete()
        report.journal_deleted = True
    except OSError as e:
        report.journal_error = str(e)
        logger.warning(f"Could not delete rollback journal {journal_store.journal_path}: {e}")

    logger.info(f"Rollback summary: Removed {report.removed_count}, NotFound {report.not_found_count}")
    return report
