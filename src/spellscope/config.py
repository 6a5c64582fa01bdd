"""Configuration for spellscope"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .platform_utils import default_config_dir

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class Config:
    """Process-wide settings read from the environment / .env"""

    # Folder with the global configuration file and dictionaries
    CONFIG_DIR = Path(os.getenv("SPELLSCOPE_CONFIG_DIR", "") or default_config_dir())

    GLOBAL_FILE = os.getenv("SPELLSCOPE_GLOBAL_FILE", "SpellChecker.vsspell")
    # Consulted when the global file does not exist yet
    LEGACY_FILE = os.getenv("SPELLSCOPE_LEGACY_FILE", "SpellChecker.config")

    DEBUG = _flag("SPELLSCOPE_DEBUG")

    @property
    def global_config_path(self) -> Path:
        return self.CONFIG_DIR / self.GLOBAL_FILE

    @property
    def legacy_config_path(self) -> Path:
        return self.CONFIG_DIR / self.LEGACY_FILE

    def create_dirs(self):
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)


config = Config()
