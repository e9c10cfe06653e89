"""
Raw input models: the file identity and one row of already-split fields.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawFileInfo(BaseModel):
    """
    Identity of a feed file.

    Attributes:
        filename: Logical name within the feed (e.g. "stop_times.txt")
        path: Location the file was read from
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., min_length=1)
    path: str = ""


class RawRecord(BaseModel):
    """
    One row of a feed file (ephemeral, consumed once by a builder).

    Attributes:
        file_info: File the row was read from
        fields: Field name -> raw value, None when absent
        row_number: 1-based data row number within the file, if known
    """

    model_config = ConfigDict(frozen=True)

    file_info: RawFileInfo
    fields: dict[str, str | None] = Field(default_factory=dict)
    row_number: int | None = None

    @property
    def filename(self) -> str:
        return self.file_info.filename

    def get(self, field_name: str) -> str | None:
        value = self.fields.get(field_name)
        if value is None or value == "":
            return None
        return value

    @classmethod
    def of(cls, filename: str, fields: dict[str, Any], row_number: int | None = None) -> "RawRecord":
        """Convenience constructor for records without a known path."""
        return cls(file_info=RawFileInfo(filename=filename), fields=fields, row_number=row_number)
