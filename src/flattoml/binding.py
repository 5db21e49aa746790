"""Binding parsed data into caller-owned objects."""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, TypeVar, get_args

from pydantic import BaseModel, ConfigDict

from .data import ParsedConfig, get_bool, get_float, get_int, get_string
from .parser import parse

M = TypeVar("M", bound="SectionModel")

_NONE_TYPE = type(None)


class ConfigTarget(Protocol):
    """Protocol for objects that populate themselves from parsed data."""

    def populate(self, config: ParsedConfig) -> None:
        ...


def bind_from(raw: str | bytes, target: ConfigTarget, encoding: str = "utf-8") -> None:
    """Parse ``raw`` and hand the result to ``target.populate``.

    Raises:
        ParseError: If parsing fails; ``target`` is not called in that case.
    """

    config = parse(raw, encoding=encoding)
    target.populate(config)


def _unwrap_optional(annotation: Any) -> Any:
    args = get_args(annotation)
    if _NONE_TYPE in args:
        rest = [arg for arg in args if arg is not _NONE_TYPE]
        if len(rest) == 1:
            return rest[0]
    return annotation


def _typed_value(config: ParsedConfig, section: str, key: str, annotation: Any) -> Any:
    annotation = _unwrap_optional(annotation)
    # bool first: it must not fall through to the int lookup.
    if annotation is bool:
        return get_bool(config, section, key)
    if annotation is int:
        return get_int(config, section, key)
    if annotation is float:
        return get_float(config, section, key)
    return get_string(config, section, key)


class SectionModel(BaseModel):
    """Pydantic model read from one section of a document.

    Subclasses set ``section_name`` and declare typed fields. ``bool``,
    ``int`` and ``float`` fields (optional or not) use the matching typed
    lookup; every other field receives the unquoted string and is validated
    by pydantic. A field reads the key named by its alias, or by its own
    name. Keys missing from the section leave the field untouched.
    """

    model_config = ConfigDict(validate_assignment=True)

    section_name: ClassVar[str] = ""

    @classmethod
    def values_from(cls, config: ParsedConfig) -> dict[str, Any]:
        """Typed values for the keys present in the section, keyed by alias."""

        pairs = config.get(cls.section_name.lower(), {})
        values: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key in pairs:
                values[key] = _typed_value(config, cls.section_name, key, field.annotation)
        return values

    @classmethod
    def from_config(cls: type[M], config: ParsedConfig) -> M:
        """Build a new instance; absent keys take the field defaults."""

        return cls.model_validate(cls.values_from(config))

    def populate(self, config: ParsedConfig) -> None:
        """Update fields from ``config`` all at once.

        Raises:
            ValidationError: If any value is invalid; no field is changed.
        """

        updates = self.values_from(config)
        if not updates:
            return
        merged = self.model_validate({**self.model_dump(by_alias=True), **updates})
        for name, field in type(self).model_fields.items():
            if (field.alias or name) in updates:
                setattr(self, name, getattr(merged, name))
