"""Todd release-train automation package."""

from importlib import metadata

__all__ = ["cli", "core"]

try:
    __version__ = metadata.version("todd")
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
