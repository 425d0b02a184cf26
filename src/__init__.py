"""CastMedia: media descriptors and typed metadata views for streaming receivers."""

from importlib.metadata import PackageNotFoundError, version

from .utils.logging import Logger, get_logger

__author__ = "Elias Benbourenane <eliasbenbourenane@gmail.com>"
__credits__ = ["eliasbenb"]
__license__ = "MIT"
__maintainer__ = "eliasbenb"
__email__ = "eliasbenbourenane@gmail.com"

try:
    __version__ = version("CastMedia")
except PackageNotFoundError:
    __version__ = "unknown"

log: Logger = get_logger()
