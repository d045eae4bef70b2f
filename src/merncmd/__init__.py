"""mern-cmd: boilerplate generator for MERN projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mern-cmd")
except PackageNotFoundError:
    __version__ = "0.0.0"
