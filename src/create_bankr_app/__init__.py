"""create-bankr-app: scaffolding tool for Bankr-powered applications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-bankr-app")
except PackageNotFoundError:
    __version__ = "0.0.0"
