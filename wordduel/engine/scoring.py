"""
Per-letter feedback for a single (guess, secret) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

Letters are compared after diacritic folding, so 'Ç' in a guess is green
against 'C' in the secret at the same position. This mirrors the tolerant
equality used for win detection (see engine.word).

Algorithm (two-pass):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the secret.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Literal, Union

from .word import Word, fold

# Each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]

GREEN: PatternChar = "G"
YELLOW: PatternChar = "Y"
GRAY: PatternChar = "-"


def _as_text(w: Union[Word, str]) -> str:
    return w.text if isinstance(w, Word) else str(w).strip().upper()


def score(guess: Union[Word, str], secret: Union[Word, str]) -> str:
    """
    Compute the feedback pattern for `guess` against `secret`.

    Preconditions:
      - both words have the same character count

    Returns:
      - string of length N composed only of 'G', 'Y', '-'

    Examples:
      score("GARDENS", "GARNETS") -> "GGG-GYG"
      score("maçãs", "macas")     -> "GGGGG"
    """
    g_text = fold(_as_text(guess))
    s_text = fold(_as_text(secret))
    if len(g_text) != len(s_text):
        raise ValueError("Guess and secret must be the same length")

    n = len(g_text)
    pattern: List[str] = [GRAY] * n

    # Pass 1: greens, and leftover counts from the secret for pass 2
    remaining: Counter = Counter()
    for i, (g, s) in enumerate(zip(g_text, s_text)):
        if g == s:
            pattern[i] = GREEN
        else:
            remaining[s] += 1

    # Pass 2: yellows capped by the true multiplicity in the secret
    for i, g in enumerate(g_text):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return "".join(pattern)
