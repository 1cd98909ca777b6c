"""Model package for gfxlaunch."""

from gfxlaunch.models.docker_invocation import DockerInvocation
from gfxlaunch.models.launch_config import PARAVIEW_VERSIONS, LaunchConfig
from gfxlaunch.models.xauth_setup import XAuthSetup

__all__ = [
    "DockerInvocation",
    "LaunchConfig",
    "PARAVIEW_VERSIONS",
    "XAuthSetup",
]
