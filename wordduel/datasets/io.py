from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from ..errors import ResourceUnavailable


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises ResourceUnavailable if the path doesn't exist or can't be decoded.
    """
    p = Path(p)
    if not p.is_file():
        raise ResourceUnavailable(f"word list not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailable(f"cannot read word list {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def resource_name(language, length: int) -> str:
    """File name for a (language, length) key, e.g. wordlist_english_7.txt."""
    lang = getattr(language, "value", language)
    return f"wordlist_{str(lang).lower()}_{int(length)}.txt"
