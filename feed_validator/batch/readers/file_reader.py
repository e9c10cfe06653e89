"""
Feed reader: locates the files of a feed directory.
"""

from collections.abc import Iterator
from pathlib import Path

from feed_validator.core.models import RawFileInfo, RawRecord
from feed_validator.observability.logger import get_logger

from .csv_reader import CSVReader

logger = get_logger(__name__)


class FeedReader:
    """
    Reads every .txt file of an unzipped feed directory.
    """

    def __init__(self, feed_path: str | Path, csv_reader: CSVReader | None = None):
        """
        Initialize feed reader.

        Args:
            feed_path: Directory holding the feed files
            csv_reader: Reader used for each file (default: comma-separated UTF-8)

        Raises:
            FileNotFoundError: If feed_path is not a directory
        """
        self.feed_path = Path(feed_path)
        if not self.feed_path.is_dir():
            raise FileNotFoundError(f"Feed directory not found: {feed_path}")
        self.csv_reader = csv_reader or CSVReader()

    def files(self) -> list[RawFileInfo]:
        """Return the feed files, sorted by filename."""
        return [
            RawFileInfo(filename=path.name, path=str(path))
            for path in sorted(self.feed_path.glob("*.txt"))
            if path.is_file()
        ]

    def read(self) -> dict[str, Iterator[RawRecord]]:
        """
        Open every feed file lazily.

        Returns:
            Feed filename -> iterator of RawRecords
        """
        files = self.files()
        logger.info(
            f"Found {len(files)} feed files in {self.feed_path}",
            extra={"feed_files": [info.filename for info in files]},
        )
        return {
            info.filename: self.csv_reader.read(info.path, filename=info.filename)
            for info in files
        }
