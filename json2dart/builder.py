"""Class tree builder: infer class descriptions from a parsed JSON value.

Objects become classes, their keys become fields. Nested objects and arrays
of objects register further classes, returned alongside the root in
depth-first pre-order (a nested class precedes the classes found inside it).

Only the first element of an array is inspected. The same shape found at two
paths is registered twice; nothing is deduplicated.

The walk keeps its own stack of open classes, so nesting depth is bounded by
memory rather than by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from json2dart.models.classes import BuildResult, ClassDescription, Field
from json2dart.models.types import (
    BOOL,
    DOUBLE,
    DYNAMIC,
    STRING,
    ClassRef,
    JsonKind,
    ListType,
    NumberKind,
    TypeRef,
    number_type,
)
from json2dart.naming import capitalize_first_letter, singularize, to_camel_case

log = structlog.get_logger("json2dart.builder")

# Primitive array elements have no key of their own; hints are looked up here.
ELEMENT_KEY = "item"

# A class still to be built: (class name, JSON object)
Pending = tuple[str, Any]


@dataclass
class _OpenClass:
    """A class whose members are still being walked."""

    name: str
    members: Iterator[tuple[str, Any]]
    fields: dict[str, Field] = field(default_factory=dict)
    description: ClassDescription | None = None

    def add(self, key: str, type_ref: TypeRef) -> None:
        field_name = to_camel_case(key)
        prev = self.fields.get(field_name)
        if prev is not None:
            log.debug(
                "builder.field_overwritten",
                class_name=self.name,
                field=field_name,
                old_key=prev.json_key,
                new_key=key,
            )
        # Reassigning keeps the first-seen position
        self.fields[field_name] = Field(name=field_name, json_key=key, type=type_ref)

    def close(self) -> ClassDescription:
        self.description = ClassDescription(name=self.name, fields=tuple(self.fields.values()))
        return self.description


class ClassTreeBuilder:
    """Walks one JSON value; holds nothing but the numeric hints."""

    def __init__(self, number_types: Mapping[str, NumberKind | str] | None = None) -> None:
        self._number_types = dict(number_types or {})

    def build(self, name: str, value: Any) -> BuildResult:
        root = self._open(name, value)
        registered: list[_OpenClass] = []
        stack = [root]

        while stack:
            current = stack[-1]
            member = next(current.members, None)
            if member is None:
                stack.pop()
                description = current.close()
                if current is not root:
                    log.debug(
                        "builder.nested_class",
                        class_name=description.name,
                        fields=len(description.fields),
                    )
                continue

            key, item = member
            type_ref, pending = self._resolve(key, item)
            current.add(key, type_ref)
            if pending is not None:
                nested = self._open(*pending)
                registered.append(nested)
                stack.append(nested)

        discovered = tuple(c.description for c in registered)
        log.debug(
            "builder.done",
            root=name,
            fields=len(root.fields),
            nested=[c.name for c in discovered],
        )
        return BuildResult(root=root.close(), auxiliary=discovered)

    def _open(self, name: str, value: Any) -> _OpenClass:
        kind = JsonKind.of(value)
        if kind is not JsonKind.OBJECT:
            log.debug("builder.not_an_object", class_name=name, kind=kind.value)
            return _OpenClass(name=name, members=iter(()))
        return _OpenClass(name=name, members=iter(value.items()))

    def _resolve(self, key: str, value: Any) -> tuple[TypeRef, Pending | None]:
        """Field type for *value* under *key*, plus the class it introduces, if any."""
        depth = 0
        # Unwrap nested arrays; each level below the first is keyed ELEMENT_KEY
        while JsonKind.of(value) is JsonKind.ARRAY and value:
            first = value[0]
            depth += 1
            if JsonKind.of(first) is JsonKind.OBJECT:
                class_name = capitalize_first_letter(singularize(key))
                return _wrap(ClassRef(class_name), depth), (class_name, first)
            key, value = ELEMENT_KEY, first

        kind = JsonKind.of(value)
        if kind is JsonKind.OBJECT:
            class_name = capitalize_first_letter(key)
            return _wrap(ClassRef(class_name), depth), (class_name, value)
        if kind is JsonKind.ARRAY:
            leaf: TypeRef = ListType(DYNAMIC)
        elif kind is JsonKind.NUMBER:
            leaf = self._number_type(key)
        elif kind is JsonKind.STRING:
            leaf = STRING
        elif kind is JsonKind.BOOL:
            leaf = BOOL
        else:
            leaf = DYNAMIC
        return _wrap(leaf, depth), None

    def _number_type(self, key: str) -> TypeRef:
        hint = self._number_types.get(key)
        if hint is None:
            log.debug("builder.number_hint_missing", key=key)
            return DOUBLE
        return number_type(hint)


def _wrap(element: TypeRef, depth: int) -> TypeRef:
    for _ in range(depth):
        element = ListType(element)
    return element


def build(
    name: str,
    value: Any,
    number_types: Mapping[str, NumberKind | str] | None = None,
) -> BuildResult:
    """Build the class tree for *value* with *name* as the root class."""
    return ClassTreeBuilder(number_types).build(name, value)
