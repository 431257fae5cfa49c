# FavSync In-Memory Connector
# Host connector holding folders and favorites in process memory

from collections.abc import Iterable
from typing import Optional

from favsync.connector.base import FolderHandle, HostConnector
from favsync.errors import AddRejectedError, ConnectorUnavailableError, PathNotResolvableError
from favsync.sync.models import FavoriteRef


def folder_name(path: str) -> str:
    """Display name for a folder path: its last non-empty segment."""
    parts = [part for part in path.replace("\\", "/").split("/") if part]
    return parts[-1] if parts else path


class MemoryConnector(HostConnector):
    """
    Host connector backed by plain lists.

    ``folders`` maps resolvable paths to display names. Adding a path that
    is already a favorite is rejected, and removing deletes the first match.
    """

    def __init__(
        self,
        folders: Optional[dict[str, str] | Iterable[str]] = None,
        favorites: Optional[Iterable[FavoriteRef]] = None,
        *,
        version: str = "1.0",
        available: bool = True,
    ):
        if folders is None:
            folders = {}
        if not isinstance(folders, dict):
            folders = {path: folder_name(path) for path in folders}
        self.folders: dict[str, str] = dict(folders)
        self.favorites: list[FavoriteRef] = list(favorites or [])
        self.version = version
        self.available = available

    @property
    def host_version(self) -> str:
        return self.version

    def _check_available(self) -> None:
        if not self.available:
            raise ConnectorUnavailableError("In-memory host is marked unavailable")

    def list_favorites(self) -> list[FavoriteRef]:
        self._check_available()
        return list(self.favorites)

    def resolve_path(self, path: str) -> FolderHandle:
        self._check_available()
        if path not in self.folders:
            raise PathNotResolvableError(path, f"Folder not found: {path}")
        return FolderHandle(name=self.folders[path], path=path)

    def add_favorite(self, handle: FolderHandle) -> None:
        self._check_available()
        if any(ref.path == handle.path for ref in self.favorites):
            raise AddRejectedError(handle.path, f"Already a favorite: {handle.path}")
        self.favorites.append(FavoriteRef(name=handle.name, path=handle.path))

    def remove_favorite(self, path: str) -> bool:
        self._check_available()
        for index, ref in enumerate(self.favorites):
            if ref.path == path:
                del self.favorites[index]
                return True
        return False
