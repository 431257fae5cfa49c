# Tests for favsync.cli
# CLI commands using Click testing

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from conftest import ARCHIVE, INBOX, PROJECTS, REPORTS
from favsync.cli import cli
from favsync.sync.artifact import write_artifact
from favsync.sync.models import ExportArtifact, FavoriteEntry


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, config_file: Path, *args: str):
    return runner.invoke(cli, ["--no-color", "--config", str(config_file), *args])


def _store_favorites(store_file: Path) -> list[str]:
    data = yaml.safe_load(store_file.read_text(encoding="utf-8"))
    return [item["path"] for item in data["navigation_groups"]["Favorites"]]


@pytest.fixture
def artifact_file(temp_dir: Path) -> Path:
    """Artifact exported from another host: one duplicate, two new favorites."""
    entries = [
        FavoriteEntry("Inbox", INBOX, 1),
        FavoriteEntry("Archive", ARCHIVE, 2),
        FavoriteEntry("Reports", REPORTS, 3),
    ]
    artifact = ExportArtifact(
        export_date="2024-04-30T18:00:00+00:00",
        host_id="WS-01",
        user_id="jdoe",
        host_version="16.0.5000",
        count=3,
        entries=entries,
    )
    return write_artifact(artifact, temp_dir / "incoming.json")


class TestCliGroup:
    """Tests for main CLI group."""

    def test_help(self, runner: CliRunner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "FavSync" in result.output
        assert "rollback" in result.output

    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "favsync" in result.output

    @patch("favsync.cli.load_config", side_effect=FileNotFoundError("No config"))
    def test_missing_config(self, mock_load, runner: CliRunner):
        result = runner.invoke(cli, ["--no-color", "list"])
        assert result.exit_code == 1
        assert "No config" in result.output

    def test_invalid_config(self, runner: CliRunner, temp_dir: Path):
        config_path = temp_dir / "config.yaml"
        config_path.write_text("export:\n  format: xml\n", encoding="utf-8")

        result = _invoke(runner, config_path, "list")

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_config_root_is_list(self, runner: CliRunner, temp_dir: Path):
        config_path = temp_dir / "config.yaml"
        config_path.write_text("- just\n- a list\n", encoding="utf-8")

        result = _invoke(runner, config_path, "list")

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "must be a mapping" in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_config_broken_yaml(self, runner: CliRunner, temp_dir: Path):
        config_path = temp_dir / "config.yaml"
        config_path.write_text("host: [unclosed\n", encoding="utf-8")

        result = _invoke(runner, config_path, "list")

        assert result.exit_code == 1
        assert "Cannot read configuration" in result.output
        assert isinstance(result.exception, SystemExit)


class TestListCommand:
    """Tests for list command."""

    def test_list(self, runner: CliRunner, config_file: Path):
        result = _invoke(runner, config_file, "list")
        assert result.exit_code == 0
        assert "Inbox" in result.output
        assert "Projects" in result.output

    def test_store_override(self, runner: CliRunner, config_file: Path, temp_dir: Path):
        result = _invoke(runner, config_file, "--store", str(temp_dir / "missing.yaml"), "list")
        assert result.exit_code == 1
        assert "Host store not found" in result.output


class TestExportCommand:
    """Tests for export command."""

    def test_export_to_file(self, runner: CliRunner, config_file: Path, temp_dir: Path):
        output = temp_dir / "out.json"

        result = _invoke(runner, config_file, "export", "-o", str(output))

        assert result.exit_code == 0
        assert "Export completed" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["hostId"] == "WS-TEST"
        assert data["userId"] == "tester"
        assert [entry["path"] for entry in data["entries"]] == [INBOX, PROJECTS]

    def test_export_default_location(self, runner: CliRunner, config_file: Path, temp_dir: Path):
        result = _invoke(runner, config_file, "export", "--format", "yaml")

        assert result.exit_code == 0
        exported = list((temp_dir / "exports").glob("favorites_WS-TEST_*.yaml"))
        assert len(exported) == 1
        assert yaml.safe_load(exported[0].read_text(encoding="utf-8"))["count"] == 2

    def test_export_empty_host(self, runner: CliRunner, config_file: Path, store_file: Path):
        data = yaml.safe_load(store_file.read_text(encoding="utf-8"))
        data["navigation_groups"]["Favorites"] = []
        store_file.write_text(yaml.dump(data), encoding="utf-8")

        result = _invoke(runner, config_file, "export", "-o", "unused.json")

        assert result.exit_code == 1
        assert "No favorites found" in result.output

    def test_export_write_failure_is_warning(self, runner: CliRunner, config_file: Path, temp_dir: Path):
        with patch("favsync.cli.write_artifact", side_effect=PermissionError("read-only")):
            result = _invoke(runner, config_file, "export", "-o", str(temp_dir / "x.json"))

        assert result.exit_code == 0
        assert "Warning:" in result.output
        assert "Cannot write export artifact" in result.output
        assert "Export completed" not in result.output
        log_text = (temp_dir / "favsync.log").read_text(encoding="utf-8")
        assert "[WARNING] Cannot write export artifact" in log_text


class TestImportRollbackCommands:
    """Tests for import, journal and rollback commands."""

    def test_import_then_rollback(self, runner: CliRunner, config_file: Path, store_file: Path, artifact_file: Path):
        result = _invoke(runner, config_file, "import", str(artifact_file), "--yes")
        assert result.exit_code == 0
        assert "Added: 2, Skipped: 1, Failed: 0" in result.output
        assert _store_favorites(store_file) == [INBOX, PROJECTS, ARCHIVE, REPORTS]

        result = _invoke(runner, config_file, "journal")
        assert result.exit_code == 0
        assert "Entries to remove on rollback: 2" in result.output

        result = _invoke(runner, config_file, "rollback", "--yes")
        assert result.exit_code == 0
        assert "Removed: 2, NotFound: 0" in result.output
        assert _store_favorites(store_file) == [INBOX, PROJECTS]

        result = _invoke(runner, config_file, "journal")
        assert "No rollback journal" in result.output

    def test_dry_run(self, runner: CliRunner, config_file: Path, store_file: Path, artifact_file: Path, temp_dir):
        result = _invoke(runner, config_file, "import", str(artifact_file), "--dry-run")

        assert result.exit_code == 0
        assert "Would add: 2, Skipped: 1, Failed: 0" in result.output
        assert _store_favorites(store_file) == [INBOX, PROJECTS]
        assert not (temp_dir / "journal.json").exists()

    def test_import_missing_artifact(self, runner: CliRunner, config_file: Path, temp_dir: Path):
        result = _invoke(runner, config_file, "import", str(temp_dir / "missing.json"), "--yes")
        assert result.exit_code == 1
        assert "Export artifact not found" in result.output

    def test_import_confirm_declined(self, runner: CliRunner, config_file: Path, store_file: Path, artifact_file):
        _invoke(runner, config_file, "import", str(artifact_file), "--yes")
        _invoke(runner, config_file, "rollback", "--yes")
        _invoke(runner, config_file, "import", str(artifact_file), "--yes")

        with patch("favsync.output.console.Console.confirm", return_value=False):
            result = _invoke(runner, config_file, "import", str(artifact_file))

        assert result.exit_code == 0
        assert "Import cancelled" in result.output

    def test_rollback_without_journal(self, runner: CliRunner, config_file: Path):
        result = _invoke(runner, config_file, "rollback", "--yes")
        assert result.exit_code == 1
        assert "No rollback journal found" in result.output
        assert result.output.count("No rollback journal found") == 1

    def test_fatal_error_recorded_in_log_file(self, runner: CliRunner, config_file: Path, temp_dir: Path):
        _invoke(runner, config_file, "rollback", "--yes")

        log_text = (temp_dir / "favsync.log").read_text(encoding="utf-8")
        assert "[ERROR] NoJournalError: No rollback journal found" in log_text

    def test_events_written_to_log_file(self, runner: CliRunner, config_file: Path, artifact_file, temp_dir):
        _invoke(runner, config_file, "import", str(artifact_file), "--yes")

        log_text = (temp_dir / "favsync.log").read_text(encoding="utf-8")
        assert "[SUCCESS] Added: Archive" in log_text
        assert "[INFO] Import summary: Added 2, Skipped 1, Failed 0" in log_text


class TestConfigCommands:
    """Tests for config subcommands."""

    def test_config_init(self, runner: CliRunner, temp_dir: Path):
        config_path = temp_dir / "new" / "config.yaml"

        result = runner.invoke(cli, ["--no-color", "--config", str(config_path), "config", "init"])
        assert result.exit_code == 0
        assert "Created configuration" in result.output
        assert config_path.exists()

        result = runner.invoke(cli, ["--no-color", "--config", str(config_path), "config", "init"])
        assert "already exists" in result.output

    def test_config_check_valid(self, runner: CliRunner, config_file: Path):
        result = _invoke(runner, config_file, "config", "check")
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_config_check_invalid(self, runner: CliRunner, temp_dir: Path):
        config_path = temp_dir / "config.yaml"
        config_path.write_text("export:\n  format: xml\n", encoding="utf-8")

        result = _invoke(runner, config_path, "config", "check")

        assert result.exit_code == 1
        assert "export -> format" in result.output

    def test_config_check_partial_config(self, runner: CliRunner, temp_dir: Path, store_file: Path):
        """config check accepts what the other commands load."""
        config_path = temp_dir / "config.yaml"
        config_path.write_text("output:\n  verbose: true\n", encoding="utf-8")

        result = _invoke(runner, config_path, "config", "check")

        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_config_path(self, runner: CliRunner, config_file: Path):
        result = _invoke(runner, config_file, "config", "path")
        assert result.exit_code == 0
        assert result.output.strip() == str(config_file)

    def test_config_show(self, runner: CliRunner, config_file: Path):
        result = _invoke(runner, config_file, "config", "show")
        assert result.exit_code == 0
        assert "FavSync Configuration" in result.output
