# krawl/crawler/ledger.py
"""
Visit ledger: the set of URLs already claimed by one crawl.
"""
from __future__ import annotations

import threading
from typing import Iterator, Set


class VisitLedger:
    """
    Records every URL a crawl has started to process.

    URLs are stored exactly as discovered; no canonicalisation is applied,
    so ``/page`` and ``/page/`` are different entries. Entries are never
    removed while the ledger lives.
    """

    def __init__(self) -> None:
        self._seen: Set[str] = set()
        self._lock = threading.Lock()

    def try_claim(self, url: str) -> bool:
        """Record *url* and return True, or return False if it was already recorded."""
        with self._lock:
            if url in self._seen:
                return False
            self._seen.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(sorted(self._seen))
