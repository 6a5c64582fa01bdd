"""Platform detection and default locations for spellscope"""

import os
import sys
from pathlib import Path

# Platform detection
IS_WINDOWS = sys.platform == "win32"
IS_MACOS = sys.platform == "darwin"


def default_config_dir() -> Path:
    """Folder holding the global configuration and dictionaries."""
    if IS_WINDOWS:
        base = os.environ.get("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
        return Path(base) / "EWSoftware" / "Visual Studio Spell Checker"
    if IS_MACOS:
        return Path.home() / "Library" / "Application Support" / "spellscope"
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "spellscope"

