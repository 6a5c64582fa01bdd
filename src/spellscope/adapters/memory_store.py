"""In-memory property store."""

from __future__ import annotations

from typing import Iterable

from ..core.errors import MissingPropertyError
from ..core.ports import MISSING


class InMemoryPropertyStore:
    """Dictionary-backed store, used for editor scratch copies and tests.

    Absent keys are absent; there is no stored ``None``.
    """

    def __init__(self, values: dict | None = None, source: str = "memory"):
        self.source = source
        self._values: dict[str, object] = {}
        for name, value in (values or {}).items():
            if isinstance(value, (list, tuple, set, frozenset)):
                self.write_list(name, value)
            else:
                self.write_scalar(name, value)

    def has_property(self, name: str) -> bool:
        return name in self._values

    def read_scalar(self, name: str, default: object = MISSING) -> object:
        if name in self._values:
            return self._values[name]
        if default is MISSING:
            raise MissingPropertyError(name)
        return default

    def read_list(self, name: str, item_tag: str) -> list[str]:
        value = self._values.get(name)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)

    def write_scalar(self, name: str, value: object | None) -> None:
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value

    def write_list(
        self, name: str, items: Iterable[str] | None, item_tag: str | None = None
    ) -> None:
        if items is None:
            self._values.pop(name, None)
        else:
            self._values[name] = tuple(items)

    def __repr__(self) -> str:
        return f"InMemoryPropertyStore(source={self.source!r}, properties={sorted(self._values)})"
