"""
Word-source I/O.

- read_words:  load a newline-separated word list from disk.
- write_words: write a word list back out (one per line).
- fetch_words: download a plain-text word list over HTTP.

No filtering happens here; the Dictionary Index decides which words are
playable. These helpers only move raw tokens around.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import requests

log = logging.getLogger(__name__)


def read_words(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list, one token per line, skipping blank lines.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    words = [ln.strip() for ln in p.read_text(encoding="utf-8").splitlines()]
    return [w for w in words if w]


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write words to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)


def fetch_words(url: str, timeout: float = 30.0) -> List[str]:
    """
    Download a plain-text word list (one word per line).

    HTTP errors propagate as requests exceptions; this is a setup step,
    not part of gameplay.
    """
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    words = [ln.strip() for ln in r.text.splitlines() if ln.strip()]
    log.info("fetched %d words from %s", len(words), url)
    return words
