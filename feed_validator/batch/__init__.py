"""
Batch feed validation module.
"""

from .pipeline import FeedValidationPipeline, FileBuildResult
from .readers import CSVReader, FeedReader

__all__ = [
    "FeedValidationPipeline",
    "FileBuildResult",
    "CSVReader",
    "FeedReader",
]
