"""Back up ZennoLab product configuration files and point their endpoints at a chosen server."""

__version__ = "1.0.0"