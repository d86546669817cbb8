from .validator import validate_wordlists, pretty_summary
from .io import DEFAULT_DATA_DIR, Lang, load_wordlist

__all__ = ["validate_wordlists", "pretty_summary", "DEFAULT_DATA_DIR", "Lang", "load_wordlist"]
