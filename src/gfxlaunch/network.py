"""Host interface address discovery for display forwarding."""

import logging
import re
import subprocess

from gfxlaunch.config import DEFAULT_INTERFACE_PATTERN
from gfxlaunch.errors import NetworkError

log = logging.getLogger(__name__)

# Interface header line: "en0: flags=..." (BSD, new net-tools) or "eth0   Link encap" (old net-tools).
HEADER_RE = re.compile(r"^(\S+?):?\s")
INET_RE = re.compile(r"^\s+inet\s+(?:addr:)?(\d{1,3}(?:\.\d{1,3}){3})")

REMEDIATION = (
    "Connect to a network so the host has an address the container can reach, "
    "or set GFXLAUNCH_INTERFACE to a regular expression matching your interface "
    "name (see `ifconfig`)."
)


def parse_ifconfig(text: str) -> dict[str, str | None]:
    """Map interface names to their first IPv4 address, in output order."""
    interfaces: dict[str, str | None] = {}
    current: str | None = None
    for line in text.splitlines():
        if not line.strip():
            continue
        header = HEADER_RE.match(line)
        if header:
            current = header.group(1)
            interfaces.setdefault(current, None)
            continue
        inet = INET_RE.match(line)
        if inet and current is not None and interfaces[current] is None:
            interfaces[current] = inet.group(1)
    return interfaces


def list_interfaces() -> dict[str, str | None]:
    """Run ifconfig and return its interfaces."""
    try:
        result = subprocess.run(["ifconfig"], capture_output=True, text=True)
    except FileNotFoundError as e:
        raise NetworkError(
            f"ifconfig not found; install net-tools to discover the host address. {REMEDIATION}"
        ) from e
    if result.returncode != 0:
        raise NetworkError(f"ifconfig failed: {result.stderr.strip()}")
    interfaces = parse_ifconfig(result.stdout)
    log.debug("ifconfig interfaces: %s", interfaces)
    return interfaces


def discover_address(pattern: str = DEFAULT_INTERFACE_PATTERN) -> str:
    """Return the IPv4 address of the first host interface matching pattern."""
    name_re = re.compile(pattern)
    matching = {
        name: address for name, address in list_interfaces().items() if name_re.search(name)
    }
    if not matching:
        raise NetworkError(f"No network interfaces matching {pattern!r} found. {REMEDIATION}")

    for name, address in matching.items():
        if address:
            log.debug("using %s address %s", name, address)
            return address

    names = ", ".join(matching)
    raise NetworkError(f"No IPv4 address assigned to {names}. {REMEDIATION}")
