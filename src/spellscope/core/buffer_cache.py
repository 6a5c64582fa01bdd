"""Per-document memoisation of effective configuration.

Each document identity is resolved at most once until it is invalidated.
Documents that turn out to be disabled (spell checking off or extension
excluded) keep only the verdict, so later checks cost a dictionary lookup.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from .cascade import ConfigurationCascade
from .config_model import EffectiveConfiguration
from .document import DocumentIdentity
from .ports import DictionaryFactory, PropertyStore, TierProvider
from .state_machine import BufferEvent, BufferState, BufferStateMachine

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _Entry:
    machine: BufferStateMachine = field(default_factory=BufferStateMachine)
    ready: threading.Event = field(default_factory=threading.Event)
    config: EffectiveConfiguration | None = None
    stores: tuple[PropertyStore, ...] = ()
    dictionary: object | None = None
    dictionary_lock: threading.Lock = field(default_factory=threading.Lock)

    @property
    def state(self) -> BufferState:
        return self.machine.state


class BufferConfigurationCache:
    """Caches the configuration verdict for each open document."""

    def __init__(self, cascade: ConfigurationCascade, tier_provider: TierProvider):
        self._cascade = cascade
        self._tier_provider = tier_provider
        self._entries: dict[DocumentIdentity, _Entry] = {}
        self._lock = threading.Lock()

    def get_configuration(self, document: DocumentIdentity) -> EffectiveConfiguration | None:
        """Return the active configuration, or None if the document is disabled.

        Concurrent first requests for the same document share one
        resolution; the callers that did not start it wait for its result.
        """
        while True:
            with self._lock:
                entry = self._entries.get(document)
                if entry is None:
                    entry = self._entries[document] = _Entry()

                if entry.state is BufferState.ACTIVE:
                    return entry.config
                if entry.state is BufferState.DISABLED:
                    return None
                if entry.state is BufferState.RESOLVING:
                    ready = entry.ready
                else:
                    entry.machine.transition(BufferEvent.REQUEST)
                    entry.ready = threading.Event()
                    break

            ready.wait()

        return self._resolve(document, entry)

    def get_state(self, document: DocumentIdentity) -> BufferState:
        with self._lock:
            entry = self._entries.get(document)
            return BufferState.UNRESOLVED if entry is None else entry.state

    def is_disabled(self, document: DocumentIdentity) -> bool:
        return self.get_configuration(document) is None

    def get_dictionary(self, document: DocumentIdentity, factory: DictionaryFactory) -> object | None:
        """Return the document's dictionary, built once from its configured culture."""
        config = self.get_configuration(document)
        if config is None:
            return None

        with self._lock:
            entry = self._entries.get(document)
        if entry is None:
            # Invalidated since the configuration was returned
            return factory(config.default_language)

        with entry.dictionary_lock:
            if entry.dictionary is None:
                entry.dictionary = factory(config.default_language)
            return entry.dictionary

    def invalidate(self, document: DocumentIdentity) -> bool:
        """Forget the verdict for one document. Returns True if one was cached."""
        with self._lock:
            entry = self._entries.pop(document, None)
            if entry is not None:
                entry.machine.transition(BufferEvent.INVALIDATE)
                entry.ready.set()
        return entry is not None

    def invalidate_tier(self, store: PropertyStore) -> list[DocumentIdentity]:
        """Forget every document whose resolution read from ``store``."""
        with self._lock:
            affected = [
                document
                for document, entry in self._entries.items()
                if any(candidate is store for candidate in entry.stores)
            ]
            for document in affected:
                entry = self._entries.pop(document)
                entry.machine.transition(BufferEvent.INVALIDATE)
                entry.ready.set()
        if affected:
            logger.debug("Invalidated %d document(s) governed by %s", len(affected), store)
        return affected

    def invalidate_all(self) -> None:
        with self._lock:
            entries = list(self._entries.values())
            self._entries.clear()
            for entry in entries:
                entry.machine.transition(BufferEvent.INVALIDATE)
                entry.ready.set()

    def _resolve(self, document: DocumentIdentity, entry: _Entry) -> EffectiveConfiguration | None:
        try:
            tiers = tuple(self._tier_provider.tiers_for(document))
            # Known before the walk starts so invalidate_tier can reach in-flight entries
            with self._lock:
                if self._entries.get(document) is entry:
                    entry.stores = tuple(tier.store for tier in tiers)
            config = self._cascade.resolve(tiers)
        except BaseException:
            with self._lock:
                if self._entries.get(document) is entry:
                    entry.machine.transition(BufferEvent.FAILED)
                entry.ready.set()
            raise

        disabled = not config.spell_check_as_you_type or config.is_extension_excluded(
            document.extension
        )

        with self._lock:
            if self._entries.get(document) is entry:
                if disabled:
                    entry.machine.transition(BufferEvent.DISABLED)
                else:
                    entry.machine.transition(BufferEvent.ENABLED)
                    entry.config = config
            entry.ready.set()

        if disabled:
            logger.debug("Spell checking disabled for %s", document.path)
            return None
        return config
