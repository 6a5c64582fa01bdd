"""File-based tier provider.

Maps a document to the global, solution and project configuration files
that govern it. The host registers the solution and project files; the
provider only picks the project whose folder contains the document.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from ..config import config
from ..core.document import DocumentIdentity
from ..core.tiers import ConfigurationTier, ConfigurationType
from .xml_store import XmlPropertyStore

logger = logging.getLogger(__name__)


class FileTierProvider:
    def __init__(
        self,
        global_path: Path | str | None = None,
        legacy_path: Path | str | None = None,
        solution_file: Path | str | None = None,
        project_files: dict | None = None,
    ):
        self._global_path = Path(global_path) if global_path else config.global_config_path
        self._legacy_path = Path(legacy_path) if legacy_path else config.legacy_config_path
        self._solution_file = Path(solution_file) if solution_file else None
        self._projects: dict[Path, Path] = {}
        self._stores: dict[Path, XmlPropertyStore] = {}
        self._lock = threading.Lock()

        for project_dir, config_file in (project_files or {}).items():
            self.add_project(project_dir, config_file)

    def add_project(self, project_dir: Path | str, config_file: Path | str) -> None:
        self._projects[Path(project_dir).resolve()] = Path(config_file)

    def store_for(self, path: Path | str) -> XmlPropertyStore:
        """Return the shared store for a configuration file."""
        key = Path(path).resolve()
        with self._lock:
            store = self._stores.get(key)
            if store is None:
                store = self._stores[key] = XmlPropertyStore(key)
            return store

    def global_store(self) -> XmlPropertyStore:
        if not self._global_path.exists() and self._legacy_path.exists():
            logger.info("Using legacy global configuration %s", self._legacy_path)
            return self.store_for(self._legacy_path)
        # A missing global file reads as empty, i.e. compiled defaults
        return self.store_for(self._global_path)

    def project_file_for(self, document: DocumentIdentity) -> Path | None:
        document_path = Path(document.path).resolve()
        matches = [folder for folder in self._projects if document_path.is_relative_to(folder)]
        if not matches:
            return None
        return self._projects[max(matches, key=lambda folder: len(folder.parts))]

    def tiers_for(self, document: DocumentIdentity) -> list[ConfigurationTier]:
        tiers = [ConfigurationTier(ConfigurationType.GLOBAL, self.global_store())]

        if self._solution_file is not None:
            tiers.append(
                ConfigurationTier(ConfigurationType.SOLUTION, self.store_for(self._solution_file))
            )

        project_file = self.project_file_for(document)
        if project_file is not None:
            tiers.append(ConfigurationTier(ConfigurationType.PROJECT, self.store_for(project_file)))

        return tiers
