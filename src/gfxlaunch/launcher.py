"""Assemble and run the docker invocation."""

import logging
import os
import shlex
import subprocess
import sys
from contextlib import nullcontext
from typing import TextIO

from gfxlaunch.config import Settings
from gfxlaunch.errors import LaunchError
from gfxlaunch.models import DockerInvocation, LaunchConfig
from gfxlaunch.network import discover_address
from gfxlaunch.xauth import placeholder_xauth, prepare_xauth

log = logging.getLogger(__name__)

DISPLAY_NUMBER = 0


def user_ids() -> tuple[int, int]:
    """Return the invoking user's numeric (uid, gid)."""
    if not hasattr(os, "getuid") or not hasattr(os, "getgid"):
        raise LaunchError("Unable to determine the user ID on this platform")
    return os.getuid(), os.getgid()


def build_invocation(
    config: LaunchConfig,
    address: str,
    uid: int,
    gid: int,
    settings: Settings,
) -> DockerInvocation:
    """Build the foreground `docker run` command for a launch."""
    home = settings.container_home
    image = config.image_name
    argv = [
        settings.docker,
        "run",
        "-it",
        "--rm",
        "--user",
        f"{uid}:{gid}",
        "-v",
        f"{config.mount_dir}:{home}",
        "-w",
        home,
        "-e",
        f"HOME={home}",
        "-e",
        f"DISPLAY={address}:{DISPLAY_NUMBER}",
        *config.docker_options,
        image,
    ]
    return DockerInvocation(argv=argv, image=image)


def pull_image(image: str, settings: Settings) -> None:
    """Update the local copy of image. Failures are reported, not fatal."""
    log.debug("pulling %s", image)
    try:
        result = subprocess.run([settings.docker, "pull", image], check=False)
    except OSError as e:
        log.warning("could not run %s pull: %s", settings.docker, e)
        return
    if result.returncode != 0:
        log.warning("%s pull %s exited with %d", settings.docker, image, result.returncode)


def allow_display_access(address: str) -> None:
    """Let clients from address connect to the host display via xhost."""
    try:
        result = subprocess.run(
            ["xhost", f"+{address}"],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        log.warning("xhost not found; the container may be refused by the X server")
        return
    if result.returncode != 0:
        log.warning("xhost +%s failed: %s", address, result.stderr.strip())
    else:
        log.debug("xhost +%s", address)


def exit_status(returncode: int) -> int:
    """Convert a subprocess return code into a shell-style exit status."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_invocation(invocation: DockerInvocation) -> int:
    """Run docker attached to the terminal and return its exit status."""
    log.debug("running %s", shlex.join(invocation.argv))
    try:
        result = subprocess.run(invocation.argv, check=False)
    except FileNotFoundError as e:
        raise LaunchError(
            f"{invocation.argv[0]} not found; install Docker or set GFXLAUNCH_DOCKER"
        ) from e
    return exit_status(result.returncode)


def launch(
    config: LaunchConfig,
    settings: Settings,
    *,
    dry_run: bool = False,
    stream: TextIO | None = None,
) -> int:
    """Prepare X access, discover the address, and run the container."""
    if not config.custom_xauth:
        xauth = nullcontext()
    elif dry_run:
        xauth = placeholder_xauth(config.mount_dir)
    else:
        xauth = prepare_xauth(config.mount_dir)
    with xauth as setup:
        if setup is not None:
            config.docker_options = list(setup.docker_options)

        address = discover_address(settings.interface_pattern)
        uid, gid = user_ids()
        invocation = build_invocation(config, address, uid, gid, settings)

        if dry_run:
            print(shlex.join(invocation.argv), file=stream or sys.stdout)
            return 0

        if config.upgrade:
            pull_image(invocation.image, settings)
        if not config.custom_xauth:
            allow_display_access(address)
        return run_invocation(invocation)
