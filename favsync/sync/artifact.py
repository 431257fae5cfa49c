# FavSync Artifact Codec
# Read and write export artifacts as JSON or YAML

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from favsync.errors import ArtifactCorruptError, ArtifactNotFoundError
from favsync.sync.models import ExportArtifact
from favsync.utils.paths import atomic_write

YAML_SUFFIXES = (".yaml", ".yml")


def is_yaml_path(path: Path) -> bool:
    """Check if a path should be encoded as YAML rather than JSON."""
    return path.suffix.lower() in YAML_SUFFIXES


def dump_document(data: dict[str, Any], path: Path) -> str:
    """
    Serialize a document for the given target path.

    JSON is indented and YAML is block style, so nested entries are always
    fully expanded and key order is preserved.
    """
    if is_yaml_path(path):
        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def load_document(path: Path) -> Any:
    """
    Parse a JSON or YAML document.

    Raises:
        ArtifactCorruptError: If the file cannot be decoded or parsed.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ArtifactCorruptError(f"{path} is not valid UTF-8: {e}") from e

    try:
        if is_yaml_path(path):
            return yaml.safe_load(raw)
        return json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ArtifactCorruptError(f"Cannot parse {path}: {e}") from e


def write_artifact(artifact: ExportArtifact, path: Path) -> Path:
    """
    Write an export artifact to disk.

    Args:
        artifact: Artifact to write.
        path: Target file. ``.yaml``/``.yml`` selects YAML, anything else JSON.

    Returns:
        The path written.
    """
    atomic_write(path, dump_document(artifact.to_dict(), path))
    return path


def read_artifact(path: Path) -> ExportArtifact:
    """
    Read an export artifact from disk.

    Raises:
        ArtifactNotFoundError: If the file does not exist.
        ArtifactCorruptError: If it cannot be parsed or misses required fields.
    """
    if not path.is_file():
        raise ArtifactNotFoundError(f"Export artifact not found: {path}")
    return ExportArtifact.from_dict(load_document(path))


def default_export_path(
    directory: Path,
    host_id: str,
    *,
    fmt: str = "json",
    prefix: str = "favorites",
    when: Optional[datetime] = None,
) -> Path:
    """
    Build the default export file path.

    Args:
        directory: Export directory.
        host_id: Host the favorites were exported from.
        fmt: "json" or "yaml".
        prefix: File name prefix.
        when: Export time. Defaults to local now.

    Returns:
        Path like ``<directory>/<prefix>_<host>_<YYYYmmdd_HHMMSS>.json``.
    """
    when = when or datetime.now()
    safe_host = "".join(c if c.isalnum() or c in "-_." else "_" for c in host_id) or "host"
    suffix = ".yaml" if fmt == "yaml" else ".json"
    return directory / f"{prefix}_{safe_host}_{when.strftime('%Y%m%d_%H%M%S')}{suffix}"
