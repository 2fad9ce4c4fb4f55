"""
Download an English word list and write it where the CLIs expect it.

What it does:
- Downloads a plain-text list (one word per line).
- De-duplicates case-insensitively while preserving source order.
- Writes the result and prints the validation summary for it.

Usage:
    python -m script.fetch_wordlist --out packages/lexicon/data/words.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --sort
"""

import argparse

from packages.lexicon import fetch_words, pretty_summary, validate_wordlist, write_words

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        k = w.lower()
        if k not in seen:
            seen.add(k)
            out.append(w)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Download the letterseq word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/lexicon/data/words.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args(argv)

    words = unique_preserve_order(fetch_words(args.url))
    if args.sort:
        words = sorted(words, key=str.lower)

    write_words(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")
    print(pretty_summary(validate_wordlist(args.out)))


if __name__ == "__main__":
    main()
