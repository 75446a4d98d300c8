"""Minimal version helper for the chartdraw package."""

from importlib import metadata

PACKAGE_NAME = "chartdraw"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number, ``0.0.0`` when running from an uninstalled tree.
    """
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
