from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, resource_name
from .wordlist import WordList

__all__ = ["validate_wordlist", "pretty_summary", "read_lines", "write_lines", "resource_name", "WordList"]
