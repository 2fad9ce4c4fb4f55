"""
Word-source diagnostics for letterseq.

What this module does:
- Inspect a raw word list file before it is turned into a Dictionary Index.
- Count how many lines survive the pool's inclusion predicate and why the
  rest are dropped (blank, too short, non-alphabetic, excluded suffix).
- Detect duplicates (case-insensitive) and compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.lexicon import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/lexicon/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Sequence
import hashlib

from .index import EXCLUDED_SUFFIXES, MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class RejectionCounts:
    """Why raw lines were left out of the pool."""
    blank: int = 0
    too_short: int = 0
    non_alpha: int = 0
    suffix: int = 0


@dataclass
class WordlistReport:
    """Validation result for one raw word source."""
    path: str             # file path (as given)
    exists: bool          # did the file exist on disk?
    raw_lines: int        # lines read, blanks included
    sha256: str           # SHA-256 of raw file bytes (empty string if missing)
    accepted: int         # lines passing the inclusion predicate
    unique_accepted: int  # accepted words after case-insensitive dedupe
    rejected: RejectionCounts = field(default_factory=RejectionCounts)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _classify(token: str, min_length: int, suffixes: Sequence[str]) -> str:
    """Return '' for an accepted token, else the rejection reason."""
    if not token:
        return "blank"
    if len(token) < min_length:
        return "too_short"
    if not (token.isascii() and token.isalpha()):
        return "non_alpha"
    if token.upper().endswith(tuple(suffixes)):
        return "suffix"
    return ""


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, *, min_length: int = MIN_WORD_LENGTH,
                      suffixes: Sequence[str] = EXCLUDED_SUFFIXES) -> Dict:
    """
    Validate a raw word list against the Candidate Pool rules.

    Parameters
    ----------
    path : str
        Word list file (one token per line).
    min_length : int
        Shortest playable word.
    suffixes : sequence of str
        Uppercase suffixes that exclude a word.

    Returns
    -------
    Dict
        JSON-serializable WordlistReport. `passed` requires the file to exist
        and to yield at least one playable word; rejections alone are normal
        (most dictionaries are full of inflected forms).
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path=path, exists=False, raw_lines=0, sha256="",
                             accepted=0, unique_accepted=0,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    rejected = RejectionCounts()
    accepted: List[str] = []
    raw_lines = 0

    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            raw_lines += 1
            token = raw.strip()
            reason = _classify(token, min_length, suffixes)
            if reason:
                setattr(rejected, reason, getattr(rejected, reason) + 1)
            else:
                accepted.append(token.upper())

    unique = set(accepted)
    issues: List[str] = []
    if not accepted:
        issues.append("word list contains 0 playable words")
    if len(unique) != len(accepted):
        issues.append(f"{len(accepted) - len(unique)} duplicate word(s) after uppercasing")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        raw_lines=raw_lines,
        sha256=_sha256_file(p),
        accepted=len(accepted),
        unique_accepted=len(unique),
        rejected=rejected,
        passed=bool(accepted),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | raw=370105 | playable=131204 (uniq=131204, sha=abc123...) | dropped: short=... | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"{report['path']} | missing | {status}"
    r = report["rejected"]
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{Path(report['path']).name} | raw={report['raw_lines']} "
        f"| playable={report['accepted']} (uniq={report['unique_accepted']}, sha={sha}) "
        f"| dropped: blank={r['blank']} short={r['too_short']} "
        f"non_alpha={r['non_alpha']} suffix={r['suffix']} | {status}"
    )
