# FavSync Test Fixtures
# Pytest fixtures for FavSync tests

import tempfile
from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from io import StringIO
from pathlib import Path

import pytest
import yaml
from rich.console import Console as RichConsole

from favsync.connector import MemoryConnector
from favsync.logger import SyncLogger
from favsync.sync.journal import JournalStore
from favsync.sync.models import ExportArtifact, FavoriteEntry, FavoriteRef

INBOX = "\\\\Mailbox\\Inbox"
PROJECTS = "\\\\Mailbox\\Projects"
ARCHIVE = "\\\\Mailbox\\Archive"
REPORTS = "\\\\Mailbox\\Inbox\\Reports"

FOLDERS = {
    INBOX: "Inbox",
    PROJECTS: "Projects",
    ARCHIVE: "Archive",
    REPORTS: "Reports",
}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("FAVSYNC_CONFIG", raising=False)
    return home


@pytest.fixture
def clock():
    """Deterministic clock advancing one second per call."""
    start = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    ticks = iter(range(10_000))
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def source_host() -> MemoryConnector:
    """Host with three favorites to export."""
    return MemoryConnector(
        FOLDERS,
        favorites=[
            FavoriteRef("Inbox", INBOX),
            FavoriteRef("Projects", PROJECTS),
            FavoriteRef("Reports", REPORTS),
        ],
        version="16.0.5000",
    )


@pytest.fixture
def empty_host() -> MemoryConnector:
    """Host with the same folders and no favorites."""
    return MemoryConnector(FOLDERS, version="16.0.5000")


@pytest.fixture
def artifact() -> ExportArtifact:
    """Artifact with three unique entries."""
    entries = [
        FavoriteEntry("Inbox", INBOX, 1),
        FavoriteEntry("Projects", PROJECTS, 2),
        FavoriteEntry("Reports", REPORTS, 3),
    ]
    return ExportArtifact(
        export_date="2024-04-30T18:00:00+00:00",
        host_id="WS-01",
        user_id="jdoe",
        host_version="16.0.5000",
        count=len(entries),
        entries=entries,
    )


@pytest.fixture
def journal_store(temp_dir: Path) -> JournalStore:
    """Journal store in a temporary directory."""
    return JournalStore(temp_dir / "state" / "rollback_journal.json")


@pytest.fixture
def captured_logger() -> SyncLogger:
    """Logger writing into a StringIO buffer."""
    return SyncLogger(RichConsole(file=StringIO(), no_color=True, width=200))


@pytest.fixture
def store_file(temp_dir: Path) -> Path:
    """YAML host store with folders and two favorites."""
    store = temp_dir / "host_store.yaml"
    data = {
        "host_version": "16.0.5000",
        "folders": [
            {"path": INBOX, "name": "Inbox"},
            {"path": PROJECTS, "name": "Projects"},
            ARCHIVE,
            {"path": REPORTS},
        ],
        "navigation_groups": {
            "Favorites": [
                {"name": "Inbox", "path": INBOX},
                {"name": "Projects", "path": PROJECTS},
            ],
            "Mail": [],
        },
    }
    with open(store, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    return store


@pytest.fixture
def config_file(temp_home: Path, temp_dir: Path, store_file: Path) -> Path:
    """Configuration file pointing at the temporary store and journal."""
    config_path = temp_home / ".config" / "favsync" / "config.yaml"
    config_path.parent.mkdir(parents=True)
    data = {
        "host": {"store_path": str(store_file), "host_id": "WS-TEST", "user_id": "tester"},
        "journal": {"path": str(temp_dir / "journal.json")},
        "export": {"directory": str(temp_dir / "exports"), "format": "json"},
        "output": {"verbose": False, "colored": False, "log_file": str(temp_dir / "favsync.log")},
    }
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False)
    return config_path
