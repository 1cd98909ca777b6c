"""Container image naming."""

DEFAULT_IMAGE = "graphical-apps"


def resolve_image_name(paraview_version: str | None, base: str = DEFAULT_IMAGE) -> str:
    """Return the image to run for an optional ParaView version."""
    if paraview_version is None:
        return base
    return f"{base}-paraview-{paraview_version}"
