# FavSync Utilities Module
# Helper functions for path handling and host identity

from favsync.utils.paths import (
    atomic_write,
    ensure_dir,
    safe_delete,
)
from favsync.utils.platform import (
    get_host_id,
    get_user_id,
)

__all__ = [
    # Paths
    "ensure_dir",
    "safe_delete",
    "atomic_write",
    # Host identity
    "get_host_id",
    "get_user_id",
]
