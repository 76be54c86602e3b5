"""JSON value kinds and Dart type references."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class JsonKind(Enum):
    """Kind of a parsed JSON value."""

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def of(cls, value: Any) -> JsonKind:
        if value is None:
            return cls.NULL
        # bool before numbers: True is an int in Python
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, dict):
            return cls.OBJECT
        if isinstance(value, (list, tuple)):
            return cls.ARRAY
        raise TypeError(f"not a JSON value: {type(value).__name__}")


class NumberKind(str, Enum):
    """Numeric hint for a JSON key, as recovered from the raw literal."""

    INT = "int"
    DOUBLE = "double"


class Primitive(Enum):
    """Dart primitive spellings."""

    STRING = "String"
    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class PrimitiveType:
    primitive: Primitive

    @property
    def dart(self) -> str:
        return self.primitive.value

    @property
    def is_number(self) -> bool:
        return self.primitive in (Primitive.INT, Primitive.DOUBLE)


@dataclass(frozen=True)
class ClassRef:
    """Reference to a generated class by name."""

    name: str

    @property
    def dart(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListType:
    element: TypeRef

    @property
    def dart(self) -> str:
        depth, element = 1, self.element
        while isinstance(element, ListType):
            depth, element = depth + 1, element.element
        return "List<" * depth + element.dart + ">" * depth

    @property
    def of_class(self) -> bool:
        """True when elements are generated classes (need per-element (de)serialization)."""
        return isinstance(self.element, ClassRef)


TypeRef = PrimitiveType | ClassRef | ListType

STRING = PrimitiveType(Primitive.STRING)
INT = PrimitiveType(Primitive.INT)
DOUBLE = PrimitiveType(Primitive.DOUBLE)
BOOL = PrimitiveType(Primitive.BOOL)
DYNAMIC = PrimitiveType(Primitive.DYNAMIC)


def number_type(kind: NumberKind | str) -> PrimitiveType:
    return INT if NumberKind(kind) is NumberKind.INT else DOUBLE
