"""Mount directory validation."""

import logging
import os
from pathlib import Path

from gfxlaunch.errors import DirectoryError

log = logging.getLogger(__name__)


def home_directory() -> Path:
    """Return the canonical form of the invoking user's home directory."""
    home = os.environ.get("HOME") or str(Path.home())
    return Path(home).resolve()


def validate_mount_dir(raw: str | os.PathLike[str], home: Path | None = None) -> Path:
    """Return the canonical mount directory, or raise DirectoryError.

    The home-directory check is made on the symlink-resolved absolute path so
    that relative paths and links to $HOME are rejected too.
    """
    candidate = Path(raw).expanduser()
    if not candidate.is_dir():
        raise DirectoryError(f"No directory exists: {raw}")

    try:
        mount_dir = candidate.resolve(strict=True)
    except OSError as e:
        raise DirectoryError(f"No directory exists: {raw}") from e

    home_dir = home.resolve() if home is not None else home_directory()
    log.debug("mount_dir=%s home=%s", mount_dir, home_dir)
    if mount_dir == home_dir:
        raise DirectoryError(
            f"Refusing to mount your home directory ({home_dir}). "
            f"Use a subdirectory instead, for example {home_dir / 'work'}"
        )
    return mount_dir
