"""
State directory layout.

    <NAMECRAFT_HOME>/            (default: ./.namecraft)
    ├── shortcuts.yaml           # Slot -> rule bindings
    └── logs/                    # Daily rotated server logs
"""

import os
from pathlib import Path

DEFAULT_HOME = Path(".namecraft")
SHORTCUTS_FILE = "shortcuts.yaml"


def get_namecraft_dir() -> Path:
    """State directory, from NAMECRAFT_HOME when set."""
    home = os.environ.get("NAMECRAFT_HOME")
    return Path(home) if home else DEFAULT_HOME


def get_shortcuts_path() -> Path:
    return get_namecraft_dir() / SHORTCUTS_FILE


def get_log_dir() -> Path:
    return get_namecraft_dir() / "logs"
