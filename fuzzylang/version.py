"""
Version management for fuzzylang.

The version string lives in pyproject.toml; this module reads it so the
package and its metadata never disagree.
"""

from pathlib import Path

import tomli

_FALLBACK_VERSION = "0.0.0"


def _find_project_root() -> Path:
    """
    Find the directory holding pyproject.toml.

    Checks the directory above the package first, then the current working
    directory and up to three of its parents.

    Returns:
        Path: Directory containing pyproject.toml, or the package parent if none is found
    """
    package_parent = Path(__file__).resolve().parent.parent
    if (package_parent / "pyproject.toml").exists():
        return package_parent

    current = Path.cwd()
    for _ in range(4):
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    return package_parent


PROJECT_ROOT = _find_project_root()
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Returns:
        str: Version string, or a fallback when the file is missing or malformed
    """
    try:
        with open(PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomli.load(f)
        if pyproject_data["project"]["name"] != "fuzzylang":
            return _FALLBACK_VERSION
        return pyproject_data["project"]["version"]
    except FileNotFoundError:
        return _FALLBACK_VERSION
    except (KeyError, tomli.TOMLDecodeError):
        return _FALLBACK_VERSION


__version__ = get_version_from_pyproject()


def get_version() -> str:
    """Return the installed fuzzylang version."""
    return __version__
