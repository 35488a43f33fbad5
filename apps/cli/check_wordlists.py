# apps/cli/check_wordlists.py
"""
Validate word-list resources and print one summary line per file.

    python -m apps.cli.check_wordlists                      # every bundled list
    python -m apps.cli.check_wordlists --language portuguese --difficulty hard
    python -m apps.cli.check_wordlists --json               # machine-readable

Exit status is 1 if any checked list fails.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from wordduel.datasets import pretty_summary, resource_name, validate_wordlist
from wordduel.game.settings import DATA_DIR, Difficulty, Language


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordduel — validate word-list resources")
    ap.add_argument("--wordlists", default=str(DATA_DIR), help="directory holding the word lists")
    ap.add_argument("--language", choices=[lang.value for lang in Language],
                    help="check only this language (default: all)")
    ap.add_argument("--difficulty", choices=[d.value for d in Difficulty],
                    help="check only this difficulty (default: all)")
    ap.add_argument("--json", action="store_true", help="print the full reports as JSON")
    args = ap.parse_args(argv)

    languages = [Language(args.language)] if args.language else list(Language)
    difficulties = [Difficulty(args.difficulty)] if args.difficulty else list(Difficulty)

    reports = []
    for lang in languages:
        for diff in difficulties:
            path = Path(args.wordlists) / resource_name(lang, diff.word_length)
            reports.append(validate_wordlist(diff.word_length, str(path)))

    if args.json:
        print(json.dumps(reports, indent=2, ensure_ascii=False))
    else:
        for rep in reports:
            print(pretty_summary(rep))

    return 0 if all(r["passed"] for r in reports) else 1


if __name__ == "__main__":
    sys.exit(main())
