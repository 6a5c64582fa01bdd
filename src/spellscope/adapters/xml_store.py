"""XML configuration file store.

One file per tier, laid out as::

    <SpellCheckerConfiguration Format="2015.2.1.0">
      <DefaultLanguage>en-GB</DefaultLanguage>
      <CSharpOptions>
        <IgnoreXmlDocComments>True</IgnoreXmlDocComments>
      </CSharpOptions>
      <IgnoredWords>
        <Ignore>tuple</Ignore>
      </IgnoredWords>
    </SpellCheckerConfiguration>

Dotted property names map to nested elements. A property element that is
present but empty is still defined; only a missing element is inherited.
"""

from __future__ import annotations

import logging
import threading
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable

from ..core.errors import MissingPropertyError, StoreUnavailableError
from ..core.ports import MISSING
from ..core.properties import SET_PROPERTIES
from ..core.values import to_stored_text

ROOT_TAG = "SpellCheckerConfiguration"
FORMAT_VERSION = "2015.2.1.0"

DEFAULT_ITEM_TAGS = {name: item_tag for name, item_tag, _ in SET_PROPERTIES}

logger = logging.getLogger(__name__)


class XmlPropertyStore:
    """Property store backed by one XML configuration file.

    The file is read lazily on first access and cached; writes change the
    cached document and are persisted by ``save()``.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.source = str(self.path)
        self._root: ET.Element | None = None
        self._lock = threading.RLock()

    @property
    def exists(self) -> bool:
        return self.path.exists()

    def has_property(self, name: str) -> bool:
        return self._find(name) is not None

    def read_scalar(self, name: str, default: object = MISSING) -> object:
        element = self._find(name)
        if element is None:
            if default is MISSING:
                raise MissingPropertyError(name)
            return default
        return (element.text or "").strip()

    def read_list(self, name: str, item_tag: str) -> list[str]:
        element = self._find(name)
        if element is None:
            return []
        items = (item.text.strip() for item in element.findall(item_tag) if item.text)
        return [item for item in items if item]

    def write_scalar(self, name: str, value: object | None) -> None:
        with self._lock:
            if value is None:
                self._remove(name)
                return
            element = self._ensure(name)
            for child in list(element):
                element.remove(child)
            element.text = to_stored_text(value)

    def write_list(
        self, name: str, items: Iterable[str] | None, item_tag: str | None = None
    ) -> None:
        with self._lock:
            if items is None:
                self._remove(name)
                return
            element = self._ensure(name)
            if item_tag is None:
                item_tag = element[0].tag if len(element) else DEFAULT_ITEM_TAGS.get(name, "Item")
            element.clear()
            for item in items:
                ET.SubElement(element, item_tag).text = item

    def save(self) -> None:
        with self._lock:
            root = self._load()
            ET.indent(root)
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                ET.ElementTree(root).write(self.path, encoding="utf-8", xml_declaration=True)
            except OSError as ex:
                raise StoreUnavailableError(self.source, str(ex)) from ex
        logger.debug("Saved configuration to %s", self.path)

    def reload(self) -> None:
        """Drop the cached document so the next access re-reads the file."""
        with self._lock:
            self._root = None

    def _load(self) -> ET.Element:
        with self._lock:
            if self._root is not None:
                return self._root

            if not self.path.exists():
                root = ET.Element(ROOT_TAG, {"Format": FORMAT_VERSION})
            else:
                try:
                    root = ET.parse(self.path).getroot()
                except (ET.ParseError, OSError, UnicodeDecodeError) as ex:
                    raise StoreUnavailableError(self.source, str(ex)) from ex
                if root.tag != ROOT_TAG:
                    raise StoreUnavailableError(self.source, f"unexpected root element <{root.tag}>")

            self._root = root
            return root

    def _find(self, name: str) -> ET.Element | None:
        with self._lock:
            return self._load().find("/".join(name.split(".")))

    def _ensure(self, name: str) -> ET.Element:
        element = self._load()
        for tag in name.split("."):
            child = element.find(tag)
            if child is None:
                child = ET.SubElement(element, tag)
            element = child
        return element

    def _remove(self, name: str) -> None:
        parts = name.split(".")
        parents = [self._load()]
        for tag in parts[:-1]:
            child = parents[-1].find(tag)
            if child is None:
                return
            parents.append(child)

        element = parents[-1].find(parts[-1])
        if element is None:
            return
        parents[-1].remove(element)

        # Drop group elements (e.g. CSharpOptions) left empty
        for parent, child in zip(reversed(parents[:-1]), reversed(parents[1:])):
            if len(child) or (child.text and child.text.strip()):
                break
            parent.remove(child)

    def __repr__(self) -> str:
        return f"XmlPropertyStore({self.source!r})"

