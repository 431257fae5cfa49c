"""FavSync - export, import and roll back host application favorites.

Captures the favorites of a host application's navigation pane into a
portable artifact, merges an artifact into another host without
duplicating existing favorites, and undoes the most recent import from
its rollback journal.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "export_favorites",
    "import_favorites",
    "import_from_file",
    "rollback_last_import",
    "ExportArtifact",
    "FavoriteEntry",
    "RollbackJournal",
    "ImportReport",
    "RollbackReport",
    "JournalStore",
    "HostConnector",
    "MemoryConnector",
    "StoreConnector",
]

_SYNC_NAMES = (
    "export_favorites",
    "import_favorites",
    "import_from_file",
    "rollback_last_import",
    "ExportArtifact",
    "FavoriteEntry",
    "RollbackJournal",
    "ImportReport",
    "RollbackReport",
    "JournalStore",
)


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in _SYNC_NAMES:
        from favsync import sync

        return getattr(sync, name)
    if name in ("HostConnector", "MemoryConnector", "StoreConnector"):
        from favsync import connector

        return getattr(connector, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
