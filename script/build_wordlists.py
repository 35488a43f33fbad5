"""
Build wordlist_<language>_<N>.txt resources from a plain-text dictionary.

What it does:
- Reads a dictionary (one word per line) from a URL (streamed with a progress
  bar) or a local file.
- Keeps alphabetic words (accented letters allowed) of the requested lengths.
- Lowercases, de-duplicates while preserving input order, optionally sorts.
- Writes one file per length into the output directory.

Usage:
    python -m script.build_wordlists --language portuguese --url <dictionary-url>
    python -m script.build_wordlists --language english --in words.txt --lengths 6 7 8 --sort

Run `python -m apps.cli.check_wordlists` afterwards to verify the output.
"""

import argparse
from pathlib import Path

import requests
from tqdm import tqdm

from wordduel.datasets.io import read_lines, resource_name, write_lines
from wordduel.game.settings import DATA_DIR, WORD_LENGTHS, Language


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def download_lines(url: str) -> list[str]:
    r = requests.get(url, stream=True, timeout=30)
    r.raise_for_status()
    total = int(r.headers.get("content-length", 0)) or None
    chunks = []
    with tqdm(total=total, unit="B", unit_scale=True, desc="Downloading", ncols=80) as bar:
        for chunk in r.iter_content(chunk_size=64 * 1024):
            chunks.append(chunk)
            bar.update(len(chunk))
    text = b"".join(chunks).decode(r.encoding or "utf-8", errors="replace")
    return text.splitlines()


def select_words(lines: list[str], length: int) -> list[str]:
    words = [ln.strip().lower() for ln in lines]
    return unique_preserve_order(w for w in words if len(w) == length and w.isalpha())


def main():
    ap = argparse.ArgumentParser(description="Build wordduel word-list resources")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--url", help="plain-text dictionary URL (one word per line)")
    src.add_argument("--in", dest="inp", help="local dictionary file")
    ap.add_argument("--language", required=True, choices=[lang.value for lang in Language])
    ap.add_argument("--lengths", type=int, nargs="+", default=sorted(WORD_LENGTHS.values()),
                    help="word lengths to extract (default: 6 7 8)")
    ap.add_argument("--outdir", default=str(DATA_DIR))
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping input order")
    args = ap.parse_args()

    lines = download_lines(args.url) if args.url else read_lines(args.inp)

    for n in args.lengths:
        words = select_words(lines, n)
        if args.sort:
            words = sorted(words)
        out = Path(args.outdir) / resource_name(args.language, n)
        write_lines(words, out)
        print(f"Wrote {len(words)} words -> {out}")


if __name__ == "__main__":
    main()
