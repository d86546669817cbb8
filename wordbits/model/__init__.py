from .letters import WORD_LEN, Letter, Word, parse_word, parse_words

__all__ = ["WORD_LEN", "Letter", "Word", "parse_word", "parse_words"]
