"""Launch configuration model for gfxlaunch."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from gfxlaunch.image import DEFAULT_IMAGE, resolve_image_name

PARAVIEW_VERSIONS = ("56", "510")


class LaunchConfig(BaseModel):
    """Validated options for one container launch."""

    mount_dir: Path
    paraview_version: Literal["56", "510"] | None = None
    upgrade: bool = False
    custom_xauth: bool = False
    image_base: str = DEFAULT_IMAGE
    docker_options: list[str] = Field(default_factory=list)

    @property
    def image_name(self) -> str:
        return resolve_image_name(self.paraview_version, self.image_base)
