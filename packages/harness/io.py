"""
I/O utilities for generation runs.

Responsibilities:
- write_csv:      flatten per-round results into a tidy CSV (one row per round).
- write_manifest: dump a JSON manifest with config, word-list report and summary.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["round", "sequence", "tier", "attempts", "support", "fallback", "time_ms",
          "examples"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of generation results to CSV.

    Schema (columns):
      round, sequence, tier, attempts, support, fallback, time_ms, examples

    `support` is empty for fallback rounds; `examples` is space-separated.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "round": r.get("round", ""),
                "sequence": r["sequence"],
                "tier": r["tier"],
                "attempts": r["attempts"],
                "support": "" if r["support"] is None else r["support"],
                "fallback": r["fallback"],
                "time_ms": round(float(r["time_ms"]), 3),
                "examples": " ".join(r.get("examples", [])),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, rounds, seed, outdir)
      - wordlist: output of lexicon.validate_wordlist(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
