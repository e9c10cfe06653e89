"""
Base entity builder.

A builder accumulates raw field values for one record and turns them into a
typed entity in build(). Field problems never abort the build: each one is
reported as a notice and the field falls back to its default (enumerated
fields) or to the None placeholder (everything else).
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, NamedTuple

from feed_validator.core.fields import (
    INVALID,
    EnumeratedField,
    FieldParseError,
    parse_float,
    parse_integer,
    parse_text,
    parse_time,
)
from feed_validator.core.models import Entity, RawFileInfo, RawRecord
from feed_validator.core.notices import (
    CannotParseFloatNotice,
    CannotParseIntegerNotice,
    FloatFieldValueOutOfRangeNotice,
    IntegerFieldValueOutOfRangeNotice,
    InvalidTimeNotice,
    MissingRequiredValueNotice,
    Notice,
    UnexpectedEnumValueNotice,
)
from feed_validator.utils.time_utils import MalformedTimeError


class FieldKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    TIME = "time"
    ENUM = "enum"


@dataclass(frozen=True)
class FieldSpec:
    """
    Declaration of one entity field.

    Attributes:
        name: Column name in the feed file
        kind: How the raw value is parsed
        required: Whether absence is reported
        enum_type: Enumeration for ENUM fields
        min_value: Inclusive lower bound for numeric fields
        max_value: Inclusive upper bound for numeric fields
    """

    name: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    enum_type: type[EnumeratedField] | None = None
    min_value: float | None = None
    max_value: float | None = None

    def __post_init__(self):
        if self.kind is FieldKind.ENUM and self.enum_type is None:
            raise ValueError(f"Enum field '{self.name}' requires enum_type")


class BuildResult(NamedTuple):
    entity: Entity
    notices: list[Notice]


class EntityBuilder(ABC):
    """
    Builds one entity from one raw record.

    Subclasses declare ENTITY_TYPE and FIELDS. A builder instance
    is used for a single record: set() any number of fields, then build()
    exactly once.
    """

    ENTITY_TYPE: ClassVar[type]
    FIELDS: ClassVar[tuple[FieldSpec, ...]]

    def __init__(self, file_info: RawFileInfo | None = None):
        self.file_info = file_info or RawFileInfo(filename=self.ENTITY_TYPE.FILENAME)
        self._specs = {spec.name: spec for spec in self.FIELDS}
        self._raw: dict[str, str | None] = {}
        self._built = False

    @classmethod
    def from_record(cls, record: RawRecord) -> "EntityBuilder":
        """Create a builder with every declared field set from the record."""
        builder = cls(record.file_info)
        for spec in cls.FIELDS:
            builder.set(spec.name, record.get(spec.name))
        return builder

    def set(self, field_name: str, raw_value: str | None) -> "EntityBuilder":
        """
        Set the raw value of a field.

        Raises:
            KeyError: If the entity has no such field
        """
        if field_name not in self._specs:
            raise KeyError(f"{self.ENTITY_TYPE.__name__} has no field '{field_name}'")
        self._raw[field_name] = raw_value
        return self

    def build(self) -> BuildResult:
        """
        Parse every field and construct the entity.

        Returns:
            BuildResult with the entity and the notices found, in field
            declaration order

        Raises:
            RuntimeError: If the builder was already used
        """
        if self._built:
            raise RuntimeError(f"{self.__class__.__name__} instances build a single entity")
        self._built = True

        notices: list[Notice] = []
        values = {spec.name: self._parse_field(spec, None, notices) for spec in self.FIELDS}
        entity = self.ENTITY_TYPE(**values)

        # Field notices carry the same id rules report for this entity
        notices = [notice.model_copy(update={"entity_id": entity.entity_id}) for notice in notices]
        return BuildResult(entity, notices)

    # ---------- Field parsing ----------
    def _parse_field(self, spec: FieldSpec, entity_id: str | None, notices: list[Notice]) -> Any:
        raw_value = self._raw.get(spec.name)
        default = spec.enum_type.default() if spec.kind is FieldKind.ENUM else None

        if parse_text(spec.name, raw_value) is None:
            if spec.required:
                notices.append(
                    MissingRequiredValueNotice(
                        filename=self.file_info.filename,
                        field_name=spec.name,
                        entity_id=entity_id,
                    )
                )
            return default

        if spec.kind is FieldKind.TEXT:
            return parse_text(spec.name, raw_value)
        if spec.kind is FieldKind.TIME:
            return self._parse_time(spec, raw_value, entity_id, notices)
        if spec.kind is FieldKind.FLOAT:
            return self._parse_float(spec, raw_value, entity_id, notices)

        try:
            code = parse_integer(spec.name, raw_value)
        except FieldParseError:
            notices.append(
                CannotParseIntegerNotice(
                    filename=self.file_info.filename,
                    field_name=spec.name,
                    entity_id=entity_id,
                    raw_value=raw_value,
                )
            )
            return default

        if spec.kind is FieldKind.ENUM:
            return self._decode_enum(spec, code, entity_id, notices)
        return self._check_range(spec, code, entity_id, notices, IntegerFieldValueOutOfRangeNotice)

    def _parse_time(self, spec, raw_value, entity_id, notices) -> int | None:
        try:
            return parse_time(spec.name, raw_value)
        except MalformedTimeError:
            notices.append(
                InvalidTimeNotice(
                    filename=self.file_info.filename,
                    field_name=spec.name,
                    entity_id=entity_id,
                    raw_value=raw_value,
                )
            )
            return None

    def _parse_float(self, spec, raw_value, entity_id, notices) -> float | None:
        try:
            value = parse_float(spec.name, raw_value)
        except FieldParseError:
            notices.append(
                CannotParseFloatNotice(
                    filename=self.file_info.filename,
                    field_name=spec.name,
                    entity_id=entity_id,
                    raw_value=raw_value,
                )
            )
            return None
        return self._check_range(spec, value, entity_id, notices, FloatFieldValueOutOfRangeNotice)

    def _decode_enum(self, spec, code, entity_id, notices) -> EnumeratedField:
        decoded = spec.enum_type.decode(code)
        if decoded is INVALID:
            notices.append(
                UnexpectedEnumValueNotice(
                    filename=self.file_info.filename,
                    field_name=spec.name,
                    entity_id=entity_id,
                    enum_value=code,
                    expected_values=spec.enum_type.codes(),
                )
            )
            # Unrecognized codes are stored as the default once reported
            return spec.enum_type.default()
        return decoded

    def _check_range(self, spec, value, entity_id, notices, notice_type):
        too_low = spec.min_value is not None and value < spec.min_value
        too_high = spec.max_value is not None and value > spec.max_value
        if too_low or too_high:
            notices.append(
                notice_type(
                    filename=self.file_info.filename,
                    field_name=spec.name,
                    entity_id=entity_id,
                    range_min=spec.min_value,
                    range_max=spec.max_value,
                    actual_value=value,
                )
            )
            return None
        return value
