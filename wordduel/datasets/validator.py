"""
Word-list resource validator.

What this module does:
- Validate one resource file (wordlist_<language>_<N>.txt) against length N.
- Enforce formatting rules (alphabetic, accented letters allowed, exact
  character count N, one per line).
- Detect duplicates (case-insensitive) and invalid lines; compute SHA-256 of
  the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordduel.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(7, "wordduel/datasets/data/wordlist_english_7.txt")
    print(pretty_summary(rep))

The game itself tolerates duplicates and skips bad lines (see WordList);
this report is for people maintaining the resources.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class ValidationReport:
    """Diagnostics and metadata for one resource file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words (case-insensitive)
    invalid_lines: int   # lines that are blank, non-alphabetic or the wrong length
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a resource file and validate them.

    Returns:
      (valid_words_uppercased, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            # len() counts characters, so 'maçã' is 4 letters
            if w and w.isalpha() and len(w) == N:
                valid.append(w.upper())
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word-list resource for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport) whose `passed`
        flag requires a non-empty file with no invalid lines and no duplicates.
    """
    p = Path(path)
    if not p.is_file():
        rep = ValidationReport(N, path, False, 0, 0, 0, "", False,
                               [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = set(words)
    issues: List[str] = []

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(unique) != len(words):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate line(s)")

    rep = ValidationReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        N=7 | wordlist_english_7.txt=412 (uniq=412, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    name = Path(report["path"]).name
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"N={report['N']} | {name}={report['count']} "
        f"(uniq={report['unique_count']}, invalid={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
