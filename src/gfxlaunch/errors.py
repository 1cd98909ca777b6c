"""Exceptions raised while preparing a container launch."""


class GfxLaunchError(Exception):
    """Base class for errors that abort a launch before docker runs."""


class DirectoryError(GfxLaunchError):
    """The mount directory is missing or not allowed."""


class XAuthError(GfxLaunchError):
    """The X authority file could not be prepared."""


class NetworkError(GfxLaunchError):
    """No usable host interface address was found."""


class LaunchError(GfxLaunchError):
    """The docker invocation could not be assembled."""
