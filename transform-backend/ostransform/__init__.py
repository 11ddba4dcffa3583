"""OS Transform API: British National Grid <-> WGS84 and grid references."""

__version__ = "0.5.0"

SERVICE_NAME = "OS Transform API"
