"""package-analyser: 100ft view of a Go package."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("package-analyser")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
