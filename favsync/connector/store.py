# FavSync Store Connector
# Host connector backed by a YAML store file describing folders and favorites

from pathlib import Path
from typing import Any, Optional

import yaml

from favsync.connector.base import FolderHandle, HostConnector
from favsync.connector.memory import folder_name
from favsync.errors import AddRejectedError, ConnectorUnavailableError, PathNotResolvableError
from favsync.sync.models import FavoriteRef
from favsync.utils.paths import atomic_write

DEFAULT_NAVIGATION_GROUP = "Favorites"


def _item_path(item: Any) -> Optional[str]:
    """Path of a store mapping entry as a string; YAML may load unquoted paths as numbers."""
    if not isinstance(item, dict) or item.get("path") is None:
        return None
    return str(item["path"])


class StoreConnector(HostConnector):
    """
    Host connector reading and writing a YAML store file.

    Store layout::

        host_version: "16.0"
        folders:
          - path: \\\\Mailbox\\Inbox
            name: Inbox
          - \\\\Mailbox\\Archive          # name derived from the path
        navigation_groups:
          Favorites:
            - name: Inbox
              path: \\\\Mailbox\\Inbox

    The file is re-read on every call so external edits are seen, and every
    mutation is written back atomically.
    """

    def __init__(self, store_path: Path, navigation_group: str = DEFAULT_NAVIGATION_GROUP):
        """
        Initialize store connector.

        Args:
            store_path: Path to the YAML store file.
            navigation_group: Name of the navigation group holding favorites.
        """
        self.store_path = store_path
        self.navigation_group = navigation_group

    def _load(self) -> dict[str, Any]:
        """Load the store, raising ConnectorUnavailableError on any problem."""
        if not self.store_path.is_file():
            raise ConnectorUnavailableError(f"Host store not found: {self.store_path}")

        try:
            with open(self.store_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConnectorUnavailableError(f"Cannot read host store {self.store_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConnectorUnavailableError(f"Host store {self.store_path} is not a mapping")

        groups = data.get("navigation_groups")
        if not isinstance(groups, dict) or not isinstance(groups.get(self.navigation_group), list):
            raise ConnectorUnavailableError(
                f"Navigation group '{self.navigation_group}' not found in {self.store_path}"
            )
        return data

    def _save(self, data: dict[str, Any]) -> None:
        atomic_write(self.store_path, yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))

    def _group(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        return data["navigation_groups"][self.navigation_group]

    def _folders(self, data: dict[str, Any]) -> dict[str, str]:
        folders: dict[str, str] = {}
        for item in data.get("folders") or []:
            if isinstance(item, str):
                folders[item] = folder_name(item)
            elif (path := _item_path(item)) is not None:
                folders[path] = str(item.get("name") or folder_name(path))
        return folders

    @property
    def host_version(self) -> str:
        return str(self._load().get("host_version", "unknown"))

    def list_favorites(self) -> list[FavoriteRef]:
        favorites = []
        for item in self._group(self._load()):
            path = _item_path(item)
            if path is None:
                continue
            favorites.append(FavoriteRef(name=str(item.get("name") or folder_name(path)), path=path))
        return favorites

    def resolve_path(self, path: str) -> FolderHandle:
        folders = self._folders(self._load())
        if path not in folders:
            raise PathNotResolvableError(path, f"Folder not found: {path}")
        return FolderHandle(name=folders[path], path=path)

    def add_favorite(self, handle: FolderHandle) -> None:
        data = self._load()
        group = self._group(data)
        if any(_item_path(item) == handle.path for item in group):
            raise AddRejectedError(handle.path, f"Already a favorite: {handle.path}")
        group.append({"name": handle.name, "path": handle.path})
        try:
            self._save(data)
        except OSError as e:
            raise AddRejectedError(handle.path, f"Cannot write host store: {e}") from e

    def remove_favorite(self, path: str) -> bool:
        data = self._load()
        group = self._group(data)
        for index, item in enumerate(group):
            if _item_path(item) == path:
                del group[index]
                self._save(data)
                return True
        return False
