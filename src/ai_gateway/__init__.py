# AI Gateway - Main Package

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ai_gateway")
except PackageNotFoundError:
    __version__ = "dev"
