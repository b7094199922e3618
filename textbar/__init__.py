"""textbar — single-line text progress bars"""

from importlib.metadata import version, PackageNotFoundError

from textbar.bar import Bar
from textbar.errors import BarError, OutOfRangeError

try:
    __version__ = version("textbar")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "textbar"

__all__ = ["Bar", "BarError", "OutOfRangeError", "__version__"]
