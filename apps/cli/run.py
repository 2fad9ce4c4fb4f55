# apps/cli/run.py
"""
CLI entry point for letter-sequence generation experiments.

This script:
  1) Validates the word list (prints counts, SHA, rejection reasons).
  2) Builds the Dictionary Index and a seeded Sequence Generator.
  3) Generates a batch of round sequences with a live progress indicator
     and writes:
       - CSV:  one row per round (sequence, tier, support, fallback, ...)
       - JSON: manifest with config, word-list report, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.generator import GeneratorPolicy, SequenceGenerator
from packages.generator.base import default_random
from packages.harness import run_batch, summarize
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.lexicon import DictionaryIndex, pretty_summary, read_words, validate_wordlist

DEFAULT_WORDS = "packages/lexicon/data/words.txt"


def main(argv=None):
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="letterseq: sequence generation experiments")
    ap.add_argument("--words", default=DEFAULT_WORDS,
                    help="path to the raw word list (one word per line)")
    ap.add_argument("--rounds", type=int, default=200, help="number of sequences to generate")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--hard-probability", type=float, default=0.75,
                    help="chance of picking the hard tier for a round")
    ap.add_argument("--max-attempts", type=int, default=1000,
                    help="candidate draws before falling back to random letters")
    ap.add_argument("--sample-size", type=int, default=10_000,
                    help="words sampled when estimating a sequence's support")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print("Fetch one first: python -m script.fetch_wordlist", file=sys.stderr)
        return 2

    # 2) Build index + generator
    index = DictionaryIndex.build(read_words(args.words))
    try:
        policy = GeneratorPolicy(hard_probability=args.hard_probability,
                                 max_attempts=args.max_attempts,
                                 sample_size=args.sample_size)
    except ValueError as e:
        ap.error(str(e))
    generator = SequenceGenerator(index, policy=policy, rng=default_random(args.seed))

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    total = args.rounds
    start = time.time()
    state = {"last_print": 0.0}
    bar = tqdm(total=total, ncols=80, desc="Generating", unit="round") if mode == "bar" else None

    def _progress(idx: int, _result) -> None:
        if bar is not None:
            bar.update(1)
            return
        if mode != "plain":
            return
        now = time.time()
        if (now - state["last_print"] >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            state["last_print"] = now

    # 4) Run batch with live progress
    results = run_batch(generator, total, on_case=_progress)
    if bar is not None:
        bar.close()
    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"gen_{run_id}.csv"
    manifest_path = outdir / f"gen_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "pool_size": len(index),
        "cache_size": len(generator.cache),
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"fallback rate {summary['fallback_rate']:.1%} | tiers {summary['tiers']} "
          f"| median support {summary['support_median']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
