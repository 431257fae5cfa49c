# FavSync Connector Module
# Host connectors that read and change the live favorites set

from favsync.connector.base import FolderHandle, HostConnector
from favsync.connector.memory import MemoryConnector, folder_name
from favsync.connector.store import DEFAULT_NAVIGATION_GROUP, StoreConnector

__all__ = [
    "HostConnector",
    "FolderHandle",
    "MemoryConnector",
    "StoreConnector",
    "DEFAULT_NAVIGATION_GROUP",
    "folder_name",
]
