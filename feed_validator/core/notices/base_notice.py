"""
Base notice types.

A notice kind is a subclass of ErrorNotice or WarningNotice that fixes its
code, title and detail template as class variables and declares the
identifying parameters (filename, field name, entity id, ...) as fields.
Codes are registered at class definition and must never be reused.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    """Notice severity levels."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


_NOTICE_REGISTRY: dict[str, type["Notice"]] = {}


class Notice(BaseModel):
    """
    A single diagnostic finding.

    Attributes:
        filename: Feed file the finding refers to
        entity_id: Identifier of the offending entity, if any

    Class attributes (fixed per kind):
        severity: Severity of every notice of this kind
        code: Stable identifier, e.g. "E_015"
        title: Short human-readable title
        detail_template: str.format template rendered with the notice fields
    """

    model_config = ConfigDict(frozen=True)

    severity: ClassVar[Severity]
    code: ClassVar[str]
    title: ClassVar[str]
    detail_template: ClassVar[str] = ""

    filename: str
    entity_id: str | None = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        # Only leaf kinds define a code of their own
        code = cls.__dict__.get("code")
        if code is None:
            return

        existing = _NOTICE_REGISTRY.get(code)
        # Re-executing the same class definition (e.g. a module reload) is allowed
        same_kind = existing is not None and (existing.__module__, existing.__qualname__) == (
            cls.__module__,
            cls.__qualname__,
        )
        if existing is not None and not same_kind:
            raise ValueError(
                f"Notice code {code} is already used by {existing.__name__}, cannot reuse it for {cls.__name__}"
            )
        _NOTICE_REGISTRY[code] = cls

    @property
    def detail(self) -> str:
        """Detail message rendered from the kind's template."""
        return self.detail_template.format(**self.model_dump())

    def to_dict(self) -> dict[str, Any]:
        """Serialize the notice with its kind-level attributes."""
        return {
            "code": self.code,
            "severity": self.severity.value,
            "title": self.title,
            "detail": self.detail,
            **self.model_dump(mode="json"),
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.title}: {self.detail}"


class ErrorNotice(Notice):
    """Base shape for notices that make a feed invalid."""

    severity: ClassVar[Severity] = Severity.ERROR


class WarningNotice(Notice):
    """Base shape for notices that flag suspicious but valid data."""

    severity: ClassVar[Severity] = Severity.WARNING


def notice_kind(code: str) -> type[Notice]:
    """
    Look up a notice kind by its code.

    Raises:
        KeyError: If no kind is registered for the code
    """
    return _NOTICE_REGISTRY[code]


def registered_notice_kinds() -> dict[str, type[Notice]]:
    """Return a copy of the code -> kind registry."""
    return dict(_NOTICE_REGISTRY)
