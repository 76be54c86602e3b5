"""Data models for class inference."""

from json2dart.models.classes import BuildResult, ClassDescription, Field
from json2dart.models.types import (
    BOOL,
    DOUBLE,
    DYNAMIC,
    INT,
    STRING,
    ClassRef,
    JsonKind,
    ListType,
    NumberKind,
    Primitive,
    PrimitiveType,
    TypeRef,
    number_type,
)

__all__ = [
    "BOOL",
    "BuildResult",
    "ClassDescription",
    "ClassRef",
    "DOUBLE",
    "DYNAMIC",
    "Field",
    "INT",
    "JsonKind",
    "ListType",
    "NumberKind",
    "Primitive",
    "PrimitiveType",
    "STRING",
    "TypeRef",
    "number_type",
]
