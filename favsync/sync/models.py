# FavSync Data Model
# Favorite entries, export artifacts and rollback journals

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from favsync.errors import ArtifactCorruptError

FORMAT_VERSION = "1.0"


def _require(data: dict[str, Any], key: str, kind: type | tuple[type, ...], where: str) -> Any:
    """Fetch a required key, raising ArtifactCorruptError if absent or mistyped."""
    if key not in data:
        raise ArtifactCorruptError(f"{where}: missing required field '{key}'")
    value = data[key]
    # bool is an int subclass; never accept it for counts or positions
    if isinstance(value, bool) and kind is int:
        raise ArtifactCorruptError(f"{where}: field '{key}' must be int, got bool")
    if not isinstance(value, kind):
        expected = kind.__name__ if isinstance(kind, type) else "/".join(k.__name__ for k in kind)
        raise ArtifactCorruptError(f"{where}: field '{key}' must be {expected}, got {type(value).__name__}")
    return value


def _require_mapping(data: Any, where: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ArtifactCorruptError(f"{where}: expected an object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class FavoriteRef:
    """A live favorite as reported by a host connector."""

    name: str
    path: str


@dataclass
class FavoriteEntry:
    """A favorite captured in an export, with its 1-based read position."""

    name: str
    path: str
    position: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "path": self.path, "position": self.position}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FavoriteEntry":
        """Create from dictionary."""
        data = _require_mapping(data, "entry")
        position = _require(data, "position", int, "entry")
        if position < 1:
            raise ArtifactCorruptError(f"entry: position must be >= 1, got {position}")
        return cls(
            name=_require(data, "name", str, "entry"),
            path=_require(data, "path", str, "entry"),
            position=position,
        )


@dataclass
class ExportArtifact:
    """
    Snapshot of a host's favorites plus provenance metadata.

    ``count`` is stored as written. It is not derived from ``entries`` so a
    reader can detect a mismatch.
    """

    export_date: str
    host_id: str
    user_id: str
    host_version: str
    count: int
    entries: list[FavoriteEntry] = field(default_factory=list)
    version: str = FORMAT_VERSION

    @property
    def count_matches(self) -> bool:
        """Check that the stored count equals the number of entries."""
        return self.count == len(self.entries)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "version": self.version,
            "exportDate": self.export_date,
            "hostId": self.host_id,
            "userId": self.user_id,
            "hostVersion": self.host_version,
            "count": self.count,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ExportArtifact":
        """
        Create from dictionary.

        Raises:
            ArtifactCorruptError: If a required field is absent or mistyped.
        """
        data = _require_mapping(data, "artifact")
        raw_entries = _require(data, "entries", list, "artifact")
        return cls(
            version=str(data.get("version", FORMAT_VERSION)),
            export_date=_require(data, "exportDate", str, "artifact"),
            host_id=_require(data, "hostId", str, "artifact"),
            user_id=_require(data, "userId", str, "artifact"),
            host_version=_require(data, "hostVersion", str, "artifact"),
            count=_require(data, "count", int, "artifact"),
            entries=[FavoriteEntry.from_dict(item) for item in raw_entries],
        )


@dataclass
class JournalEntry:
    """A favorite added by an import."""

    name: str
    path: str
    imported_at: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "path": self.path, "importedAt": self.imported_at}

    @classmethod
    def from_dict(cls, data: Any) -> "JournalEntry":
        """Create from dictionary."""
        data = _require_mapping(data, "journal entry")
        return cls(
            name=_require(data, "name", str, "journal entry"),
            path=_require(data, "path", str, "journal entry"),
            imported_at=_require(data, "importedAt", str, "journal entry"),
        )


@dataclass
class RollbackJournal:
    """Record of exactly which favorites the most recent import added."""

    import_date: str
    source_artifact_path: str
    host_id: str
    added_entries: list[JournalEntry] = field(default_factory=list)
    version: str = FORMAT_VERSION

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "version": self.version,
            "importDate": self.import_date,
            "sourceArtifactPath": self.source_artifact_path,
            "hostId": self.host_id,
            "addedEntries": [entry.to_dict() for entry in self.added_entries],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "RollbackJournal":
        """
        Create from dictionary.

        Raises:
            ArtifactCorruptError: If a required field is absent or mistyped.
        """
        data = _require_mapping(data, "journal")
        raw_entries = _require(data, "addedEntries", list, "journal")
        return cls(
            version=str(data.get("version", FORMAT_VERSION)),
            import_date=_require(data, "importDate", str, "journal"),
            source_artifact_path=_require(data, "sourceArtifactPath", str, "journal"),
            host_id=_require(data, "hostId", str, "journal"),
            added_entries=[JournalEntry.from_dict(item) for item in raw_entries],
        )


@dataclass
class FailedEntry:
    """An artifact entry that could not be imported."""

    name: str
    path: str
    error: str


class OutcomeStatus(str, Enum):
    """Classification of one artifact entry during import."""

    ADDED = "added"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class EntryOutcome:
    """One processed artifact entry, in artifact order."""

    status: OutcomeStatus
    name: str
    path: str
    detail: str = ""


@dataclass
class ImportReport:
    """
    Result of an import run.

    ``added``, ``skipped`` and ``failed`` group the entries by verdict;
    ``outcomes`` keeps every entry in the order it was processed. Use the
    ``record_*`` methods so both stay in step.
    """

    source_path: str
    added: list[JournalEntry] = field(default_factory=list)
    skipped: list[FavoriteEntry] = field(default_factory=list)
    failed: list[FailedEntry] = field(default_factory=list)
    outcomes: list[EntryOutcome] = field(default_factory=list)
    dry_run: bool = False
    journal_written: bool = False
    journal_error: Optional[str] = None

    def record_added(self, entry: JournalEntry) -> None:
        self.added.append(entry)
        self.outcomes.append(EntryOutcome(OutcomeStatus.ADDED, entry.name, entry.path))

    def record_skipped(self, entry: FavoriteEntry) -> None:
        self.skipped.append(entry)
        self.outcomes.append(EntryOutcome(OutcomeStatus.SKIPPED, entry.name, entry.path, "already a favorite"))

    def record_failed(self, failed: FailedEntry) -> None:
        self.failed.append(failed)
        self.outcomes.append(EntryOutcome(OutcomeStatus.FAILED, failed.name, failed.path, failed.error))

    @property
    def added_count(self) -> int:
        return len(self.added)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def total(self) -> int:
        """Number of artifact entries processed."""
        return self.added_count + self.skipped_count + self.failed_count

    @property
    def has_failures(self) -> bool:
        return self.failed_count > 0


@dataclass
class RollbackReport:
    """Result of a rollback run."""

    removed: list[JournalEntry] = field(default_factory=list)
    not_found: list[JournalEntry] = field(default_factory=list)
    journal_deleted: bool = False
    journal_error: Optional[str] = None

    @property
    def removed_count(self) -> int:
        return len(self.removed)

    @property
    def not_found_count(self) -> int:
        return len(self.not_found)
