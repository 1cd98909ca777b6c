"""gfxlaunch: run the graphical-apps container with X11 display forwarding."""

__version__ = "0.3.0"
