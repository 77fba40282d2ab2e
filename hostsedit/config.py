#!/usr/bin/env python3
"""Runtime settings for hostsedit.

Everything here is either a constant or a small accessor that reads the
environment at call time, so tests can monkeypatch the variables.
"""

import os
import logging
import platform


# ---------- Constants ----------

BLOCK_ADDRESS = "127.0.0.1"

EMPTY_NOTICE = "Hosts file is empty."
NO_CHANGES_NOTICE = "No changes detected."

HOSTS_FILE_ENV = "HOSTSEDIT_HOSTS_FILE"
LOG_LEVEL_ENV = "HOSTSEDIT_LOG_LEVEL"
LOG_FILE_ENV = "HOSTSEDIT_LOG_FILE"

# Settings handed to an elevated relaunch; the path ones are made absolute first
FORWARDED_ENV = (HOSTS_FILE_ENV, LOG_LEVEL_ENV, LOG_FILE_ENV)
PATH_ENV = (HOSTS_FILE_ENV, LOG_FILE_ENV)

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

POSIX_HOSTS_FILE = "/etc/hosts"


# ---------- Accessors ----------

def default_hosts_path():
    """Return the well-known hosts file location for this platform"""
    if platform.system() == "Windows":
        system_root = os.environ.get("SystemRoot", r"C:\Windows")
        return os.path.join(system_root, "System32", "drivers", "etc", "hosts")
    return POSIX_HOSTS_FILE


def hosts_path():
    return os.environ.get(HOSTS_FILE_ENV) or default_hosts_path()


def log_level():
    """Resolve the log level name from the environment, falling back to WARNING"""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


def log_file():
    return os.environ.get(LOG_FILE_ENV) or None
