"""Basecoat page-rendering framework"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("basecoat")
except PackageNotFoundError:
    __version__ = "dev"
