# FavSync Default Configuration
# Full default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "host": {
        "store_path": "~/.config/favsync/host_store.yaml",
        "navigation_group": "Favorites",
    },
    "journal": {
        "path": "~/.config/favsync/rollback_journal.json",
    },
    "export": {
        "directory": ".",
        "format": "json",
        "filename_prefix": "favorites",
    },
    "output": {
        "verbose": False,
        "colored": True,
        "log_file": "~/.config/favsync/favsync.log",
    },
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# FavSync Configuration
# Version: 1.0
#
# host.store_path        YAML file describing the host's folders and favorites
# host.navigation_group  Navigation group whose entries are the favorites
# journal.path           Rollback journal; every import overwrites it
# export.format          json or yaml
#
# Optional overrides:
#   host.host_id / host.user_id  identity stamped into exports

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
