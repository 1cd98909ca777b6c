"""Configuration for gfxlaunch."""

import os
import re

from pydantic import BaseModel, ValidationError, field_validator

from gfxlaunch.errors import GfxLaunchError
from gfxlaunch.image import DEFAULT_IMAGE

DEFAULT_DOCKER = "docker"
DEFAULT_CONTAINER_HOME = "/home/user"
# Physical host interfaces (en0, en1, ...). Excludes lo0, bridge*, utun*, vboxnet*.
DEFAULT_INTERFACE_PATTERN = r"^en\d+$"

ENV_VARS = {
    "image": "GFXLAUNCH_IMAGE",
    "docker": "GFXLAUNCH_DOCKER",
    "container_home": "GFXLAUNCH_HOME",
    "interface_pattern": "GFXLAUNCH_INTERFACE",
}


class Settings(BaseModel):
    """Environment-driven settings for a launch."""

    image: str = DEFAULT_IMAGE
    docker: str = DEFAULT_DOCKER
    container_home: str = DEFAULT_CONTAINER_HOME
    interface_pattern: str = DEFAULT_INTERFACE_PATTERN

    @field_validator("image", "docker", "container_home", "interface_pattern")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("container_home")
    @classmethod
    def _absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("must be an absolute path")
        return value

    @field_validator("interface_pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        return value


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from GFXLAUNCH_* environment variables."""
    env = os.environ if environ is None else environ
    values = {field: env[var] for field, var in ENV_VARS.items() if var in env}
    try:
        return Settings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{ENV_VARS[str(err['loc'][0])]}: {err['msg']}" for err in e.errors()
        )
        raise GfxLaunchError(f"Invalid configuration: {problems}") from e
