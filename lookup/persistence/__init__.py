from .file import FileQuoteWriter
from .sql import SqlQuoteWriter, recent_quotes

__all__ = ["FileQuoteWriter", "SqlQuoteWriter", "recent_quotes"]
