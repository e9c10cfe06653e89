"""
CSV reader turning one feed file into RawRecords.
"""

import csv
from collections.abc import Iterator
from pathlib import Path

from feed_validator.core.models import RawFileInfo, RawRecord


class CSVReader:
    """
    Reads a comma-separated feed file lazily, one RawRecord per data row.

    Values are passed through untouched except that empty cells become None.
    Rows shorter than the header leave the trailing fields absent.
    """

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8-sig"):
        """
        Initialize CSV reader.

        Args:
            delimiter: Field delimiter
            encoding: File encoding; the default strips a UTF-8 BOM
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def read(self, file_path: str | Path, filename: str | None = None) -> Iterator[RawRecord]:
        """
        Read a CSV file into RawRecords.

        Args:
            file_path: Path to CSV file
            filename: Logical feed filename (defaults to the file's name)

        Yields:
            RawRecord per data row, numbered from 1
        """
        path = Path(file_path)
        file_info = RawFileInfo(filename=filename or path.name, path=str(path))

        with open(path, newline="", encoding=self.encoding) as f:
            reader = csv.DictReader(f, delimiter=self.delimiter)
            for row_number, row in enumerate(reader, start=1):
                fields = {
                    name.strip(): (value if value != "" else None)
                    for name, value in row.items()
                    # DictReader collects cells beyond the header under the None key
                    if name is not None
                }
                yield RawRecord(file_info=file_info, fields=fields, row_number=row_number)
