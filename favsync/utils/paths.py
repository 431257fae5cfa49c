# FavSync Path Utilities
# Directory creation, atomic writes and safe deletes for artifacts and stores

import os
import tempfile
from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists, creating if necessary.

    Args:
        path: Directory path.

    Returns:
        The path that was ensured.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def safe_delete(path: Path, *, missing_ok: bool = False) -> bool:
    """
    Delete a single file.

    Args:
        path: File to delete.
        missing_ok: If True, don't raise error if path doesn't exist.

    Returns:
        True if the file was deleted, False if it didn't exist.

    Raises:
        FileNotFoundError: If path doesn't exist and missing_ok is False.
    """
    if not path.exists():
        if missing_ok:
            return False
        raise FileNotFoundError(f"Path does not exist: {path}")

    path.unlink()
    return True


def atomic_write(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """
    Atomically write text to a file.

    Writes a temporary file next to the target, then renames it over the
    target so readers never see a half-written artifact.

    Args:
        path: Target file path.
        content: Text to write.
        encoding: Text encoding (default utf-8).
    """
    ensure_dir(path.parent)

    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(content)
        os.replace(temp_path, path)
    except Exception:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise
