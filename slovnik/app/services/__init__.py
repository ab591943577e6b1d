from .dictionary_service import DictionaryService
from .result_formatter import DictionaryResultFormatter, DisplayRecord

__all__ = ["DictionaryService", "DictionaryResultFormatter", "DisplayRecord"]
