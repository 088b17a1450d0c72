"""srpcgen: example project generator for workflow-based protocol services."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("srpcgen")
except PackageNotFoundError:
    __version__ = "0.0.0"
