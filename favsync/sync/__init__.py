# FavSync Sync Module
# Export, import and rollback of host favorites

from favsync.sync.artifact import default_export_path, read_artifact, write_artifact
from favsync.sync.exporter import export_favorites
from favsync.sync.importer import import_favorites, import_from_file
from favsync.sync.journal import JournalStore
from favsync.sync.models import (
    ExportArtifact,
    FailedEntry,
    FavoriteEntry,
    EntryOutcome,
    FavoriteRef,
    ImportReport,
    JournalEntry,
    OutcomeStatus,
    RollbackJournal,
    RollbackReport,
)
from favsync.sync.rollback import rollback_last_import

__all__ = [
    # Models
    "FavoriteRef",
    "FavoriteEntry",
    "ExportArtifact",
    "JournalEntry",
    "RollbackJournal",
    "FailedEntry",
    "ImportReport",
    "EntryOutcome",
    "OutcomeStatus",
    "RollbackReport",
    # Artifacts
    "read_artifact",
    "write_artifact",
    "default_export_path",
    # Journal
    "JournalStore",
    # Engines
    "export_favorites",
    "import_favorites",
    "import_from_file",
    "rollback_last_import",
]
