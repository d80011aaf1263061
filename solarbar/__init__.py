"""solarbar — daylight progress for the macOS menu bar"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("solarbar")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "solarbar"
