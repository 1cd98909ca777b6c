"""Command-line interface for gfxlaunch."""

import logging
import os
import sys

from gfxlaunch.config import load_settings
from gfxlaunch.directory import validate_mount_dir
from gfxlaunch.errors import GfxLaunchError
from gfxlaunch.launcher import launch
from gfxlaunch.models import LaunchConfig
from gfxlaunch.options import parse_args

log = logging.getLogger("gfxlaunch")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        settings = load_settings()
        mount_dir = validate_mount_dir(args.dir if args.dir is not None else os.getcwd())
        config = LaunchConfig(
            mount_dir=mount_dir,
            paraview_version=args.paraview,
            upgrade=args.upgrade,
            custom_xauth=args.xhost,
            image_base=settings.image,
        )
        log.debug("config=%s", config)
        return launch(config, settings, dry_run=args.dry_run)
    except GfxLaunchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


def entrypoint() -> None:
    raise SystemExit(main())
