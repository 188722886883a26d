from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


PERSONAL_UNI_DIR_ENV = "PERSONAL_UNI_DIR"
XDG_CONFIG_HOME_ENV = "XDG_CONFIG_HOME"
TEST_ARCHIVE_DIR_ENV = "TEST_ARCHIVE_DIR"

UNI_DIR_NAME = "uni"
ARCHIVE_DIR_NAME = "conversation-archive"
INDEX_DIR_NAME = "conversation-index"
DB_FILE_NAME = "db.sqlite"
EXCLUDE_FILE_NAME = "exclude.txt"


def _env(name: str) -> str | None:
    # Empty values count as unset.
    value = os.environ.get(name)
    return value or None


def get_uni_dir() -> str:
    """Personal uni directory.

    Precedence:
    1. PERSONAL_UNI_DIR (verbatim)
    2. $XDG_CONFIG_HOME/uni
    3. ~/.config/uni
    """
    personal = _env(PERSONAL_UNI_DIR_ENV)
    if personal:
        return personal

    xdg = _env(XDG_CONFIG_HOME_ENV)
    if xdg:
        return os.path.join(xdg, UNI_DIR_NAME)

    # Path.home() raises when the home directory cannot be determined.
    return os.path.join(str(Path.home()), ".config", UNI_DIR_NAME)


def get_archive_dir() -> str:
    """conversation-archive/ under the uni dir, or TEST_ARCHIVE_DIR when set."""
    override = _env(TEST_ARCHIVE_DIR_ENV)
    if override:
        return override
    return os.path.join(get_uni_dir(), ARCHIVE_DIR_NAME)


def get_index_dir() -> str:
    """conversation-index/ under the uni dir."""
    return os.path.join(get_uni_dir(), INDEX_DIR_NAME)


def get_db_path() -> str:
    """SQLite database inside the index dir."""
    return os.path.join(get_index_dir(), DB_FILE_NAME)


def get_exclude_config_path() -> str:
    """Exclude list inside the index dir."""
    return os.path.join(get_index_dir(), EXCLUDE_FILE_NAME)


@dataclass(frozen=True)
class UniPaths:
    uni_dir: str
    archive_dir: str
    index_dir: str
    db_path: str
    exclude_config_path: str

    def as_dict(self) -> dict[str, str]:
        return {
            "uni_dir": self.uni_dir,
            "archive_dir": self.archive_dir,
            "index_dir": self.index_dir,
            "db_path": self.db_path,
            "exclude_config_path": self.exclude_config_path,
        }


def resolve_layout() -> UniPaths:
    # Fresh snapshot of the current environment; nothing is cached.
    return UniPaths(
        uni_dir=get_uni_dir(),
        archive_dir=get_archive_dir(),
        index_dir=get_index_dir(),
        db_path=get_db_path(),
        exclude_config_path=get_exclude_config_path(),
    )
