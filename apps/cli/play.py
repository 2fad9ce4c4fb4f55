# apps/cli/play.py
"""
Play letterseq in the terminal.

Each round shows three letters. Type words that contain them in order
(not necessarily side by side): for L I N, PLAIN and LINK work, NAIL does not.
Longer words score more; answers within the first seconds earn a bonus.

Commands during a round:
  :end    stop the round now (unused guesses count as mistakes)
  :new    throw this round away and start another
  :stats  show statistics
  :clear  wipe statistics
  :quit   leave
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from packages.engine.lookup import DEFAULT_TIMEOUT, DictionaryApiLookup, PoolLookup
from packages.engine.scoring import TIME_BONUS_THRESHOLD
from packages.game import Round, RoundResult, Statistics, StatsStore
from packages.game.round import UNUSED_WORD
from packages.game.store import DEFAULT_STATS_PATH
from packages.generator import SequenceGenerator
from packages.generator.base import default_random
from packages.lexicon import DictionaryIndex, read_words

DEFAULT_WORDS = "packages/lexicon/data/words.txt"


def format_stats(stats: Statistics) -> str:
    lines = [
        f"Played {stats.games_played} | Win % {stats.win_rate:.0f} "
        f"| Streak {stats.current_streak} | Max streak {stats.max_streak}",
        "Top scores:    " + (", ".join(str(s) for s in stats.highest_scores) or "-"),
        "Mistakes 0-5:  " + " ".join(str(c) for c in stats.mistakes),
        "Longest words: " + (", ".join(f"{w['word']} ({w['length']})"
                                       for w in stats.longest_words) or "-"),
    ]
    return "\n".join(lines)


def format_result(result: RoundResult, index: DictionaryIndex) -> str:
    lines = [f"Round over: score {result.score}"]
    for g in result.guesses:
        if g.word == UNUSED_WORD:
            lines.append("  no guess (0)")
        elif g.valid:
            lines.append(f"  {g.word} ({g.length})" + (f" +{g.bonus}" if g.bonus else ""))
        else:
            lines.append(f"  {g.word} (x)")
    if result.first_answer_time is not None:
        lines.append(f"Fastest answer: {result.first_answer_time:.3f}s")
    if not result.valid_words:
        examples = index.find_example_answers(result.sequence)
        if examples:
            lines.append("You could have played: " + ", ".join(examples))
    return "\n".join(lines)


async def _ask(prompt: str) -> str:
    try:
        return await asyncio.to_thread(input, prompt)
    except EOFError:
        return ":quit"


async def play(args) -> int:
    try:
        raw = read_words(args.words)
    except FileNotFoundError:
        print(f"Word list not found: {args.words}", file=sys.stderr)
        print("Fetch one first: python -m script.fetch_wordlist", file=sys.stderr)
        return 2

    index = DictionaryIndex.build(raw)
    generator = SequenceGenerator(index, rng=default_random(args.seed))
    lookup = PoolLookup(raw) if args.offline else DictionaryApiLookup(timeout=args.timeout)
    store = StatsStore(args.stats)
    stats = store.load()

    while True:
        sequence = await generator.agenerate()
        rnd = Round(sequence, lookup=lookup)
        print(f"\nLetters: {' '.join(sequence)}  ({rnd.max_guesses} guesses, "
              f"+bonus within {TIME_BONUS_THRESHOLD:.0f}s)")
        cmd = (await _ask("Press Enter to begin (:quit to leave) ")).strip().lower()
        if cmd == ":quit":
            return 0
        rnd.begin()

        while not rnd.over:
            text = (await _ask(f"[{rnd.guesses_remaining} left, score {rnd.score}] > ")).strip()
            cmd = text.lower()
            if cmd == ":quit":
                if rnd.in_progress:
                    stats.abandon_round()
                    store.save(stats)
                return 0
            if cmd == ":new":
                stats.abandon_round()
                store.save(stats)
                break
            if cmd == ":stats":
                print(format_stats(stats))
                continue
            if cmd == ":clear":
                store.clear()
                stats = Statistics()
                print("Statistics cleared.")
                continue
            if cmd == ":end":
                rnd.end_early()
                break

            res = await rnd.submit(text)
            print(("  ✓ " if res.accepted else "  ✗ ") + res.message)

        if not rnd.over:
            continue  # abandoned with :new

        result = rnd.result()
        stats.record_round(result)
        store.save(stats)
        print(format_result(result, index))
        print(format_stats(stats))

        again = (await _ask("Play again? [Y/n] ")).strip().lower()
        if again in (":quit", "n", "no"):
            return 0


def main(argv=None):
    ap = argparse.ArgumentParser(description="letterseq: find words containing three letters in order")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="path to the raw word list")
    ap.add_argument("--stats", default=str(DEFAULT_STATS_PATH), help="statistics JSON file")
    ap.add_argument("--seed", type=int, help="RNG seed for sequence generation")
    ap.add_argument("--offline", action="store_true",
                    help="accept words from the local word list instead of the dictionary API")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                    help="dictionary API timeout in seconds")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="[%(levelname)s] %(message)s")
    return asyncio.run(play(args))


if __name__ == "__main__":
    sys.exit(main())
