"""Private X authority file for the container.

The current display's cookies are extracted with ``xauth nlist``, the address
family of every entry is rewritten to FamilyWild (``ffff``) so the cookie
matches whatever hostname the container reports, and the result is merged
into a fresh file inside the mount directory. The file has to live there
because it is bind-mounted into the container at the same path.
"""

import logging
import os
import shutil
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from gfxlaunch.errors import XAuthError
from gfxlaunch.models import XAuthSetup

log = logging.getLogger(__name__)

XAUTH_PREFIX = ".gfxlaunch.xauth."
FAMILY_WILD = "ffff"


def wildcard_entries(nlist_output: str) -> str:
    """Replace the 4-hex-digit family field of each nlist entry with ffff."""
    lines = []
    for line in nlist_output.splitlines():
        if len(line) < 4:
            continue
        lines.append(FAMILY_WILD + line[4:])
    return "".join(f"{line}\n" for line in lines)


def _list_entries(display: str) -> str:
    result = subprocess.run(
        ["xauth", "nlist", display],
        capture_output=True,
        text=True,
    )
    log.debug("xauth nlist %s returned rc=%d", display, result.returncode)
    entries = wildcard_entries(result.stdout) if result.returncode == 0 else ""
    if not entries:
        detail = result.stderr.strip()
        raise XAuthError(
            f"No X authority entries found for display {display}"
            + (f": {detail}" if detail else "")
        )
    return entries


def _merge_entries(path: Path, entries: str) -> None:
    result = subprocess.run(
        ["xauth", "-f", str(path), "nmerge", "-"],
        input=entries,
        capture_output=True,
        text=True,
    )
    log.debug("xauth nmerge into %s returned rc=%d", path, result.returncode)
    if result.returncode != 0:
        raise XAuthError(f"xauth could not write {path}: {result.stderr.strip()}")


def _remove(path: Path) -> None:
    try:
        os.unlink(path)
        log.debug("removed %s", path)
    except FileNotFoundError:
        pass
    except OSError as e:
        log.warning("could not remove X authority file %s: %s", path, e)


def xauth_docker_options(path: Path) -> list[str]:
    """Mount the authority file at the same path and point XAUTHORITY at it."""
    return ["-v", f"{path}:{path}", "-e", f"XAUTHORITY={path}", "--net", "host"]


@contextmanager
def placeholder_xauth(mount_dir: Path) -> Iterator[XAuthSetup]:
    """Describe the authority file without creating it, for dry runs."""
    path = mount_dir / f"{XAUTH_PREFIX}XXXXXXXX"
    yield XAuthSetup(path=path, docker_options=xauth_docker_options(path))


@contextmanager
def prepare_xauth(mount_dir: Path, display: str | None = None) -> Iterator[XAuthSetup]:
    """Create the authority file for the duration of the block, then remove it."""
    if display is None:
        display = os.environ.get("DISPLAY", "")
    if not display:
        raise XAuthError("DISPLAY is not set; start an X server before using -xhost")
    if shutil.which("xauth") is None:
        raise XAuthError("xauth not found; install xauth (or XQuartz) to use -xhost")

    fd, name = tempfile.mkstemp(prefix=XAUTH_PREFIX, dir=mount_dir)
    os.close(fd)
    path = Path(name)
    log.debug("created X authority file %s", path)
    try:
        _merge_entries(path, _list_entries(display))
        yield XAuthSetup(path=path, docker_options=xauth_docker_options(path))
    finally:
        _remove(path)
