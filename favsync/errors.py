# FavSync Errors
# Exception hierarchy for export, import and rollback runs


class FavSyncError(Exception):
    """Base class for all favsync errors."""

    pass


class PreconditionError(FavSyncError):
    """A run cannot start. Raised before anything is modified."""

    pass


class ConnectorUnavailableError(PreconditionError):
    """The host cannot be reached or the navigation group is missing."""

    pass


class EmptyFavoritesError(PreconditionError):
    """The host has no favorites to export."""

    pass


class ArtifactNotFoundError(PreconditionError):
    """The export artifact to import does not exist."""

    pass


class ArtifactCorruptError(PreconditionError):
    """An artifact or journal cannot be parsed or misses required fields."""

    pass


class NoJournalError(PreconditionError):
    """There is no rollback journal, so there is no import to undo."""

    pass


class EntryError(FavSyncError):
    """Failure for a single favorite. Recorded in the report, never fatal."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class PathNotResolvableError(EntryError):
    """The path does not resolve to a folder on this host."""

    pass


class AddRejectedError(EntryError):
    """The host refused to add the folder as a favorite."""

    pass
