"""Tests for the Dart code emitter."""

from __future__ import annotations

import json

import pytest

from json2dart.emitter import DartEmitter, dart_string, render_class
from json2dart.generator import convert
from json2dart.models.classes import ClassDescription, Field
from json2dart.models.types import BOOL, DOUBLE, DYNAMIC, INT, STRING, ClassRef, ListType

ORDER_DART = """\
class Order {
  List<Item>? items;

  Order({this.items});

  Order.fromJson(Map<String, dynamic> json) {
    if (json['items'] != null) {
      items = <Item>[];
      json['items'].forEach((v) {
        items!.add(Item.fromJson(v));
      });
    }
  }

  Map<String, dynamic> toJson() {
    final Map<String, dynamic> data = <String, dynamic>{};
    if (items != null) {
      data['items'] = items!.map((v) => v.toJson()).toList();
    }
    return data;
  }
}"""

ITEM_DART = """\
class Item {
  int? id;

  Item({this.id});

  Item.fromJson(Map<String, dynamic> json) {
    id = (json['id'] as num?)?.toInt();
  }

  Map<String, dynamic> toJson() {
    final Map<String, dynamic> data = <String, dynamic>{};
    data['id'] = id;
    return data;
  }
}"""


@pytest.fixture
def order() -> ClassDescription:
    return ClassDescription("Order", (Field("items", "items", ListType(ClassRef("Item"))),))


@pytest.fixture
def item() -> ClassDescription:
    return ClassDescription("Item", (Field("id", "id", INT),))


def _one(field: Field) -> str:
    return render_class(ClassDescription("Model", (field,)))


class TestRenderClass:
    def test_full_class_with_object_list(self, order):
        assert render_class(order) == ORDER_DART

    def test_full_class_with_int(self, item):
        assert render_class(item) == ITEM_DART

    def test_render_all_separates_with_blank_line(self, order, item):
        assert DartEmitter().render_all([order, item]) == ORDER_DART + "\n\n" + ITEM_DART

    def test_deterministic(self, order):
        emitter = DartEmitter()
        assert emitter.render(order) == emitter.render(order)

    def test_constructor_lists_all_fields(self):
        cls = ClassDescription(
            "User",
            (Field("id", "id", INT), Field("name", "name", STRING), Field("ok", "ok", BOOL)),
        )
        assert "  User({this.id, this.name, this.ok});" in render_class(cls)

    def test_fields_are_nullable_in_order(self):
        cls = ClassDescription("User", (Field("name", "name", STRING), Field("raw", "raw", DYNAMIC)))
        code = render_class(cls)
        assert code.index("  String? name;") < code.index("  dynamic? raw;")

    def test_empty_class(self):
        code = render_class(ClassDescription("Empty"))
        assert code.startswith("class Empty {")
        assert "  Empty();" in code
        assert "  Empty.fromJson(Map<String, dynamic> json) {\n  }" in code
        assert code.endswith("    return data;\n  }\n}")


class TestFromJson:
    def test_int(self):
        assert "    count = (json['count'] as num?)?.toInt();" in _one(Field("count", "count", INT))

    def test_double(self):
        assert "    price = (json['price'] as num?)?.toDouble();" in _one(
            Field("price", "price", DOUBLE)
        )

    @pytest.mark.parametrize("type_ref", [STRING, BOOL, DYNAMIC])
    def test_direct_assignment(self, type_ref):
        assert "    value = json['value'];" in _one(Field("value", "value", type_ref))

    def test_primitive_list_copied(self):
        code = _one(Field("tags", "tags", ListType(STRING)))
        assert "    tags = json['tags'] != null ? List<String>.from(json['tags']) : null;" in code
        assert "forEach" not in code

    def test_nested_primitive_list_copied(self):
        code = _one(Field("grid", "grid", ListType(ListType(INT))))
        assert "List<List<int>>.from(json['grid'])" in code

    def test_class_ref(self):
        code = _one(Field("address", "address", ClassRef("Address")))
        assert (
            "    address = json['address'] != null ? Address.fromJson(json['address']) : null;"
            in code
        )


class TestToJson:
    def test_class_ref_guarded(self):
        code = _one(Field("address", "address", ClassRef("Address")))
        assert "    if (address != null) {\n      data['address'] = address!.toJson();\n    }" in code

    def test_primitive_list_unguarded(self):
        code = _one(Field("tags", "tags", ListType(STRING)))
        assert "    data['tags'] = tags;" in code
        assert "if (tags != null)" not in code

    def test_class_list_guarded(self, order):
        code = render_class(order)
        assert "    if (items != null) {" in code
        assert "items!.map((v) => v.toJson()).toList()" in code


class TestJsonKeys:
    def test_original_key_used_both_ways(self):
        code = _one(Field("userName", "user_name", STRING))
        assert "    userName = json['user_name'];" in code
        assert "    data['user_name'] = userName;" in code
        assert "'userName'" not in code

    def test_key_with_quote_is_escaped(self):
        code = _one(Field("it", "it's", STRING))
        assert "json['it\\'s']" in code

    def test_dart_string_escapes(self):
        assert dart_string("plain") == "'plain'"
        assert dart_string("it's $x") == "'it\\'s \\$x'"
        assert dart_string("back\\slash") == "'back\\\\slash'"
        assert dart_string("a\nb") == "'a\\nb'"

    @pytest.mark.parametrize("key", ["first-name", "class", ""])
    def test_non_identifier_key_kept_verbatim(self, key):
        code = convert("Row", json.dumps({key: "x"})).code
        assert f"  String? {key};" in code
        assert f"data[{dart_string(key)}] = {key};" in code
