"""Class descriptions: the intermediate form between inference and rendering."""

from __future__ import annotations

from dataclasses import dataclass

from json2dart.models.types import TypeRef


@dataclass(frozen=True)
class Field:
    """One generated field."""

    name: str  # camelCase Dart identifier
    json_key: str  # literal key read and written by fromJson / toJson
    type: TypeRef


@dataclass(frozen=True)
class ClassDescription:
    name: str
    fields: tuple[Field, ...] = ()

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Field | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class BuildResult:
    """Root class plus every nested class discovered under it, in discovery order."""

    root: ClassDescription
    auxiliary: tuple[ClassDescription, ...] = ()

    @property
    def classes(self) -> tuple[ClassDescription, ...]:
        return (self.root, *self.auxiliary)
