# FavSync Rollback Journal
# Persistence for the single journal describing the last import

from pathlib import Path
from typing import Optional

from favsync.errors import ArtifactCorruptError, NoJournalError
from favsync.sync.artifact import dump_document, load_document
from favsync.sync.models import RollbackJournal
from favsync.utils.paths import atomic_write, safe_delete


class JournalStore:
    """
    Manages the rollback journal file.

    Only one journal exists at a time. Saving overwrites it, so only the
    most recent import can be rolled back. No locking is done: two
    processes importing or rolling back against the same journal path at
    once is unsupported.
    """

    def __init__(self, journal_path: Optional[Path] = None):
        """
        Initialize journal store.

        Args:
            journal_path: Path to journal file. Defaults to ~/.config/favsync/rollback_journal.json
        """
        if journal_path is None:
            journal_path = Path.home() / ".config" / "favsync" / "rollback_journal.json"
        self.journal_path = journal_path

    def exists(self) -> bool:
        """Check if a journal is present."""
        return self.journal_path.is_file()

    def load(self) -> RollbackJournal:
        """
        Load the journal.

        Raises:
            NoJournalError: If there is no journal.
            ArtifactCorruptError: If the journal cannot be parsed.
        """
        if not self.exists():
            raise NoJournalError(f"No rollback journal found at {self.journal_path}")
        try:
            return RollbackJournal.from_dict(load_document(self.journal_path))
        except ArtifactCorruptError as e:
            raise ArtifactCorruptError(f"Rollback journal {self.journal_path} is corrupt: {e}") from e

    def save(self, journal: RollbackJournal) -> Path:
        """Write the journal, replacing any previous one."""
        atomic_write(self.journal_path, dump_document(journal.to_dict(), self.journal_path))
        return self.journal_path

    def delete(self) -> bool:
        """
        Delete the journal.

        Returns:
            True if a journal was deleted, False if none existed.
        """
        return safe_delete(self.journal_path, missing_ok=True)
