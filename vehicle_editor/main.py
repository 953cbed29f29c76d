"""
Ride Vehicle Editor - Editor Main

Command-line entry point for the editor application.

Usage:
    ride-vehicle-editor [park.json] [--multiplayer]

Defaults to parks/demo_park.json if no park file is specified.
"""

import logging
import sys
from pathlib import Path

from .application import EditorApplication
from .resources import DEMO_PARK, PARKS_DIR, get_resource_path, resolve_park_path


def parse_arguments(args: list[str]) -> tuple[str, bool]:
    """
    Parse command-line arguments with defaults.

    Returns:
        tuple[str, bool]: (park_json, multiplayer)

    Usage patterns:
        ride-vehicle-editor                          # demo park
        ride-vehicle-editor park.json                # custom park
        ride-vehicle-editor park.json --multiplayer  # with a replicated client
    """
    multiplayer = "--multiplayer" in args
    positional = [arg for arg in args if arg != "--multiplayer"]

    unknown = [arg for arg in positional if arg.startswith("-")]
    if unknown:
        print(f"Error: Unknown option {unknown[0]}")
        print("")
        show_usage()
        sys.exit(1)

    if len(positional) == 0:
        return str(get_resource_path(f"{PARKS_DIR}/{DEMO_PARK}")), multiplayer

    if len(positional) == 1:
        if not positional[0].endswith(".json"):
            print("Error: Park file must be a JSON file")
            print("")
            show_usage()
            sys.exit(1)
        return str(resolve_park_path(positional[0])), multiplayer

    print(f"Error: Too many arguments ({len(positional)} provided)")
    print("")
    show_usage()
    sys.exit(1)


def show_usage():
    """Display usage information."""
    print("Usage: ride-vehicle-editor [park.json] [--multiplayer]")
    print("")
    print("Arguments:")
    print("  park.json      Park file to open (default: parks/demo_park.json)")
    print("  --multiplayer  Replicate drags to a second in-process participant")
    print("")
    print("Controls:")
    print("  Click          Select a car / place the dragged car")
    print("  D              Start or stop dragging the selected car")
    print("  Esc            Cancel dragging and put the car back")
    print("  G              Toggle grid")
    print("  Ctrl+S         Save park")


def validate_park_file(path: str):
    """Validate park file exists and is readable."""
    p = Path(path)
    if not p.exists():
        print(f"Error: Park file not found: {path}")
        sys.exit(1)

    if not p.is_file():
        print(f"Error: Park path is not a file: {path}")
        sys.exit(1)


def main():
    """Main entry point for the editor."""
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(message)s")

    park_json, multiplayer = parse_arguments(sys.argv[1:])
    validate_park_file(park_json)

    app = EditorApplication(park_json, multiplayer=multiplayer)
    app.run()


if __name__ == "__main__":
    main()
