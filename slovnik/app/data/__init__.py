from .wordlist import DATA_DELIMITER, WordListRepository, parse_word_list

__all__ = ["DATA_DELIMITER", "WordListRepository", "parse_word_list"]
