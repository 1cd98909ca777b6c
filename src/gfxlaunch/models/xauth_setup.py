"""X authority file model."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class XAuthSetup:
    """A temporary authority file and the docker options that expose it."""

    path: Path
    docker_options: list[str] = field(default_factory=list)
