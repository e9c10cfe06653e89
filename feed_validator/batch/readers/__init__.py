"""
Feed file readers.
"""

from .csv_reader import CSVReader
from .file_reader import FeedReader

__all__ = [
    "CSVReader",
    "FeedReader",
]
