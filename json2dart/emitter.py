"""Dart code emitter: render class descriptions as null-safe Dart classes.

Each class gets nullable fields, a named-parameter constructor, a
``fromJson`` constructor and a ``toJson`` method. Reads and writes always
use the field's original JSON key, so ``user_name`` round-trips as
``user_name`` even though the field is ``userName``.
"""

from __future__ import annotations

from collections.abc import Iterable

from json2dart.models.classes import ClassDescription, Field
from json2dart.models.types import ClassRef, ListType, Primitive, PrimitiveType

CLASS_SEPARATOR = "\n\n"


def dart_string(value: str) -> str:
    """Single-quoted Dart string literal for *value*."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("$", "\\$")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


class DartEmitter:
    """Render :class:`ClassDescription` objects to Dart source text."""

    indent = "  "

    def render(self, cls: ClassDescription) -> str:
        lines = [f"class {cls.name} {{"]
        lines.extend(self._fields(cls))
        lines.append("")
        lines.extend(self._constructor(cls))
        lines.append("")
        lines.extend(self._from_json(cls))
        lines.append("")
        lines.extend(self._to_json(cls))
        lines.append("}")
        return "\n".join(lines)

    def render_all(self, classes: Iterable[ClassDescription]) -> str:
        return CLASS_SEPARATOR.join(self.render(cls) for cls in classes)

    # ── members ──────────────────────────────────────────────────────────

    def _fields(self, cls: ClassDescription) -> list[str]:
        return [self._line(1, f"{f.type.dart}? {f.name};") for f in cls.fields]

    def _constructor(self, cls: ClassDescription) -> list[str]:
        if not cls.fields:
            return [self._line(1, f"{cls.name}();")]
        params = ", ".join(f"this.{f.name}" for f in cls.fields)
        return [self._line(1, f"{cls.name}({{{params}}});")]

    def _from_json(self, cls: ClassDescription) -> list[str]:
        lines = [self._line(1, f"{cls.name}.fromJson(Map<String, dynamic> json) {{")]
        for f in cls.fields:
            lines.extend(self._read_field(f))
        lines.append(self._line(1, "}"))
        return lines

    def _to_json(self, cls: ClassDescription) -> list[str]:
        lines = [
            self._line(1, "Map<String, dynamic> toJson() {"),
            self._line(2, "final Map<String, dynamic> data = <String, dynamic>{};"),
        ]
        for f in cls.fields:
            lines.extend(self._write_field(f))
        lines.append(self._line(2, "return data;"))
        lines.append(self._line(1, "}"))
        return lines

    # ── per-field statements ─────────────────────────────────────────────

    def _read_field(self, f: Field) -> list[str]:
        src = f"json[{dart_string(f.json_key)}]"
        t = f.type

        if isinstance(t, ListType):
            if t.of_class:
                inner = t.element.dart
                return [
                    self._line(2, f"if ({src} != null) {{"),
                    self._line(3, f"{f.name} = <{inner}>[];"),
                    self._line(3, f"{src}.forEach((v) {{"),
                    self._line(4, f"{f.name}!.add({inner}.fromJson(v));"),
                    self._line(3, "});"),
                    self._line(2, "}"),
                ]
            return [self._line(2, f"{f.name} = {src} != null ? {t.dart}.from({src}) : null;")]

        if isinstance(t, ClassRef):
            return [self._line(2, f"{f.name} = {src} != null ? {t.name}.fromJson({src}) : null;")]

        if isinstance(t, PrimitiveType) and t.is_number:
            conv = "toInt" if t.primitive is Primitive.INT else "toDouble"
            return [self._line(2, f"{f.name} = ({src} as num?)?.{conv}();")]

        return [self._line(2, f"{f.name} = {src};")]

    def _write_field(self, f: Field) -> list[str]:
        dst = f"data[{dart_string(f.json_key)}]"
        t = f.type

        if isinstance(t, ListType) and t.of_class:
            return [
                self._line(2, f"if ({f.name} != null) {{"),
                self._line(3, f"{dst} = {f.name}!.map((v) => v.toJson()).toList();"),
                self._line(2, "}"),
            ]
        if isinstance(t, ClassRef):
            return [
                self._line(2, f"if ({f.name} != null) {{"),
                self._line(3, f"{dst} = {f.name}!.toJson();"),
                self._line(2, "}"),
            ]
        return [self._line(2, f"{dst} = {f.name};")]

    def _line(self, depth: int, text: str) -> str:
        return self.indent * depth + text


def render_class(cls: ClassDescription) -> str:
    return DartEmitter().render(cls)
