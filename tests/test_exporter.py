# FavSync Exporter Tests

from unittest.mock import patch

import pytest

from conftest import INBOX, PROJECTS, REPORTS
from favsync.connector import MemoryConnector
from favsync.errors import ConnectorUnavailableError, EmptyFavoritesError
from favsync.sync.exporter import export_favorites
from favsync.sync.models import FavoriteRef


class TestExportFavorites:
    """Tests for export_favorites()."""

    def test_entries_in_connector_order(self, source_host: MemoryConnector):
        artifact = export_favorites(source_host, host_id="WS-01", user_id="jdoe")

        assert [e.path for e in artifact.entries] == [INBOX, PROJECTS, REPORTS]
        assert [e.position for e in artifact.entries] == [1, 2, 3]
        assert artifact.count == 3

    def test_metadata(self, source_host: MemoryConnector, clock):
        artifact = export_favorites(source_host, host_id="WS-01", user_id="jdoe", clock=clock)

        assert artifact.export_date == "2024-05-01T09:30:00+00:00"
        assert artifact.host_id == "WS-01"
        assert artifact.user_id == "jdoe"
        assert artifact.host_version == "16.0.5000"

    @patch("favsync.sync.exporter.get_user_id", return_value="login-user")
    @patch("favsync.sync.exporter.get_host_id", return_value="machine")
    def test_identity_defaults(self, mock_host, mock_user, source_host: MemoryConnector):
        artifact = export_favorites(source_host)
        assert artifact.host_id == "machine"
        assert artifact.user_id == "login-user"

    def test_does_not_modify_host(self, source_host: MemoryConnector):
        before = list(source_host.favorites)
        export_favorites(source_host, host_id="WS-01", user_id="jdoe")
        assert source_host.favorites == before

    def test_idempotent_entries(self, source_host: MemoryConnector, clock):
        first = export_favorites(source_host, host_id="WS-01", user_id="jdoe", clock=clock)
        second = export_favorites(source_host, host_id="WS-01", user_id="jdoe", clock=clock)

        assert first.entries == second.entries
        assert first.export_date != second.export_date

    def test_repeated_names_kept(self):
        host = MemoryConnector(
            favorites=[FavoriteRef("Inbox", INBOX), FavoriteRef("Inbox", REPORTS)],
        )
        artifact = export_favorites(host, host_id="h", user_id="u")
        assert [e.name for e in artifact.entries] == ["Inbox", "Inbox"]

    def test_empty_favorites(self, empty_host: MemoryConnector):
        with pytest.raises(EmptyFavoritesError):
            export_favorites(empty_host, host_id="h", user_id="u")

    def test_connector_unavailable(self, source_host: MemoryConnector):
        source_host.available = False
        with pytest.raises(ConnectorUnavailableError):
            export_favorites(source_host, host_id="h", user_id="u")

    def test_empty_is_distinct_from_unavailable(self):
        assert not issubclass(EmptyFavoritesError, ConnectorUnavailableError)
