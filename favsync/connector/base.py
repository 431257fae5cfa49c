# FavSync Host Connector
# Capability set the engine uses to read and change a host's favorites

from abc import ABC, abstractmethod
from dataclasses import dataclass

from favsync.sync.models import FavoriteRef


@dataclass(frozen=True)
class FolderHandle:
    """A folder on the host, resolved from a path and ready to be favorited."""

    name: str
    path: str


class HostConnector(ABC):
    """
    Access to the favorites group of a host application.

    Implementations decide how the host is reached. The engine only relies
    on the four operations below and on ``host_version``.
    """

    @property
    @abstractmethod
    def host_version(self) -> str:
        """Version string of the host application."""

    @abstractmethod
    def list_favorites(self) -> list[FavoriteRef]:
        """
        List current favorites in the host's native order.

        Raises:
            ConnectorUnavailableError: If the host or navigation group is unavailable.
        """

    @abstractmethod
    def resolve_path(self, path: str) -> FolderHandle:
        """
        Resolve a path to a folder.

        Raises:
            PathNotResolvableError: If no folder exists at ``path``.
        """

    @abstractmethod
    def add_favorite(self, handle: FolderHandle) -> None:
        """
        Add a folder to the favorites.

        Raises:
            AddRejectedError: If the host refuses the add.
        """

    @abstractmethod
    def remove_favorite(self, path: str) -> bool:
        """
        Remove the favorite with ``path``.

        Returns:
            True if a favorite was removed, False if none matched.
        """

    def favorite_paths(self) -> set[str]:
        """Set of paths currently in the favorites."""
        return {ref.path for ref in self.list_favorites()}
