# FavSync Exporter
# Capture the host's favorites as an export artifact

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from rich.console import Console

from favsync.errors import EmptyFavoritesError
from favsync.logger import SyncLogger
from favsync.sync.models import ExportArtifact, FavoriteEntry
from favsync.utils.platform import get_host_id, get_user_id

if TYPE_CHECKING:
    from favsync.connector.base import HostConnector


def export_favorites(
    connector: HostConnector,
    *,
    host_id: Optional[str] = None,
    user_id: Optional[str] = None,
    clock: Optional[Callable[[], datetime]] = None,
    logger: Optional[SyncLogger] = None,
) -> ExportArtifact:
    """
    Read the current favorites and build an export artifact.

    The connector is only read, never modified. Positions are the 1-based
    order in which the connector returned the favorites.

    Args:
        connector: Host connector to read from.
        host_id: Host identity to stamp. Defaults to this machine's name.
        user_id: User identity to stamp. Defaults to the login name.
        clock: Returns the capture time. Defaults to UTC now.
        logger: Optional event sink.

    Returns:
        The export artifact. Writing it is up to the caller.

    Raises:
        ConnectorUnavailableError: If the host cannot be read.
        EmptyFavoritesError: If the host has no favorites.
    """
    clock = clock or (lambda: datetime.now(timezone.utc))
    logger = logger or SyncLogger(Console(quiet=True))

    refs = connector.list_favorites()
    if not refs:
        raise EmptyFavoritesError("No favorites found to export")

    entries = [FavoriteEntry(name=ref.name, path=ref.path, position=index) for index, ref in enumerate(refs, start=1)]

    artifact = ExportArtifact(
        export_date=clock().isoformat(),
        host_id=host_id or get_host_id(),
        user_id=user_id or get_user_id(),
        host_version=connector.host_version,
        count=len(entries),
        entries=entries,
    )

    for entry in entries:
        logger.debug(f"#{entry.position} {entry.name} ({entry.path})")
    logger.success(f"Exported {artifact.count} favorites from {artifact.host_id}")

    return artifact
