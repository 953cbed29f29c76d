"""Locating park files shipped with the editor, including PyInstaller bundles."""

import sys
from pathlib import Path

PARKS_DIR = "parks"
DEMO_PARK = "demo_park.json"


def get_resource_path(relative_path: str) -> Path:
    """Absolute path of a file shipped next to the packages.

    Bundled executables unpack into sys._MEIPASS; otherwise the project
    root is the parent of vehicle_editor/.
    """
    base_path = getattr(sys, "_MEIPASS", None)
    if base_path is None:
        return Path(__file__).parent.parent / relative_path
    return Path(base_path) / relative_path


def resolve_park_path(path: str) -> Path:
    """
    Resolve a park argument to a file.

    A bare file name that does not exist in the working directory is looked
    up in the bundled parks folder, so `demo_park.json` works from anywhere.

    Args:
        path: Park file path or bundled park name

    Returns:
        Path to the park file (not guaranteed to exist)
    """
    candidate = Path(path)
    if candidate.exists() or candidate.parent != Path("."):
        return candidate
    bundled = get_resource_path(PARKS_DIR) / candidate.name
    return bundled if bundled.exists() else candidate
