"""Thread-safe glossary shared by the scrape workers and the API.

One lock guards the map. Readers always get copies taken under the lock, so
callers can serialize results without holding it.
"""
from __future__ import annotations

import threading
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

Pairs = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class GlossaryStore:
    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._lock = threading.Lock()
        self._terms: Dict[str, str] = {}
        if initial:
            self.merge(initial)

    def merge(self, pairs: Pairs) -> int:
        """Merge term/definition pairs, keeping the longer definition per term.

        An existing entry is only replaced by a strictly longer definition, so
        the result does not depend on merge order. Returns how many entries were
        inserted or replaced.
        """
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        changed = 0
        with self._lock:
            for term, definition in items:
                existing = self._terms.get(term)
                if existing is None or len(definition) > len(existing):
                    self._terms[term] = definition
                    changed += 1
        return changed

    def get_all(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._terms)

    def get(self, term: str) -> Tuple[Optional[str], bool]:
        with self._lock:
            definition = self._terms.get(term)
        return definition, definition is not None

    def search(self, query: str) -> Dict[str, str]:
        q = (query or "").lower()
        with self._lock:
            snapshot = list(self._terms.items())
        return {t: d for t, d in snapshot if q in t.lower() or q in d.lower()}

    def __len__(self) -> int:
        with self._lock:
            return len(self._terms)
