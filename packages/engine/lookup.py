"""
Dictionary-lookup collaborators for the validity gate.

Both are async callables `(word) -> bool` and never raise:

  - DictionaryApiLookup: asks the free dictionaryapi.dev service. The HTTP
    call is blocking (requests), so it runs in a worker thread and the event
    loop stays responsive while it waits.
  - PoolLookup: answers from an in-memory word set (offline play, tests).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Optional
from urllib.parse import quote

import requests

log = logging.getLogger(__name__)

DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"
DEFAULT_TIMEOUT = 5.0  # seconds


class DictionaryApiLookup:
    """
    Recognize a word iff the API answers 2xx with a JSON array whose first
    entry has a `word` field equal to the query (case-insensitive).
    Network errors, non-2xx responses and malformed payloads all mean "no".
    """

    def __init__(self, url: str = DICTIONARY_API_URL, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None) -> None:
        self.url = url
        self.timeout = float(timeout)
        self.session = session or requests.Session()

    def fetch(self, word: str) -> bool:
        """Blocking lookup; safe to call from a worker thread."""
        url = self.url.format(word=quote(word, safe=""))
        try:
            r = self.session.get(url, timeout=self.timeout)
            if not r.ok:
                log.debug("lookup %r -> HTTP %s", word, r.status_code)
                return False
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            log.warning("lookup %r failed: %s", word, e)
            return False

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return False
        canonical = data[0].get("word")
        return isinstance(canonical, str) and canonical.lower() == word.lower()

    async def __call__(self, word: str) -> bool:
        return await asyncio.to_thread(self.fetch, word)


class PoolLookup:
    """Offline lookup backed by a fixed set of words (case-insensitive)."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words = frozenset(w.strip().upper() for w in words)

    async def __call__(self, word: str) -> bool:
        return word.strip().upper() in self._words
