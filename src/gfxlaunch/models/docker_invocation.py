"""Docker command model."""

from dataclasses import dataclass


@dataclass
class DockerInvocation:
    """A fully assembled `docker run` command line."""

    argv: list[str]
    image: str
