# FavSync Host Identity Utilities
# Host and user identification stamped into export artifacts

import getpass
import os
import platform

# Environment variables checked before asking the OS
_HOST_ENV_VARS = ("COMPUTERNAME", "HOSTNAME")
_USER_ENV_VARS = ("USERNAME", "USER", "LOGNAME")


def get_host_id() -> str:
    """
    Get an identifier for the current machine.

    Returns:
        Host name, or "unknown-host" if none can be determined.
    """
    for var in _HOST_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return value
    return platform.node() or "unknown-host"


def get_user_id() -> str:
    """
    Get the login name of the current user.

    Returns:
        User name, or "unknown-user" if none can be determined.
    """
    for var in _USER_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return value
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown-user"
