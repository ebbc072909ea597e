"""Tests for tsdef.builtins module."""

import io

from tsdef.builtins import (
    BOOL,
    FLOAT,
    INT,
    NONE,
    PRIMITIVES,
    STR,
    UNKNOWN,
    dict_of,
    list_of,
    literal,
    optional,
    set_of,
    tuple_of,
)
from tsdef.emit import EmitCtx
from tsdef.options import DefinitionFileOptions
from tsdef.type_expr import DefinedTypeInfo, NativeTypeInfo, TypeDefinition, TypeName


def render(info):
    ctx = EmitCtx(io.StringIO(), DefinitionFileOptions())
    ctx.emit_info(info)
    return ctx.writer.getvalue()


class TestPrimitives:
    """Test primitive type infos."""

    def test_native_primitives(self):
        """Test JSON primitives render as TypeScript keywords."""
        assert render(BOOL) == "boolean"
        assert render(STR) == "string"
        assert render(NONE) == "null"
        assert render(UNKNOWN) == "unknown"

    def test_number_aliases(self):
        """Test that numbers are referenced through defined aliases."""
        assert isinstance(INT, DefinedTypeInfo)
        assert isinstance(FLOAT, DefinedTypeInfo)
        assert render(INT) == "types.Int"
        assert render(FLOAT) == "types.Float"
        assert INT.definition.expr == TypeName.ident("number")

    def test_primitives_map(self):
        """Test that PRIMITIVES covers the JSON scalar types."""
        assert PRIMITIVES[bool] is BOOL
        assert PRIMITIVES[str] is STR
        assert PRIMITIVES[int] is INT
        assert PRIMITIVES[float] is FLOAT
        assert PRIMITIVES[type(None)] is NONE


class TestContainers:
    """Test container helpers."""

    def test_list_of(self):
        """Test list rendering."""
        assert render(list_of(STR)) == "(string)[]"
        assert render(set_of(INT)) == "(types.Int)[]"

    def test_nested_list(self):
        """Test a list of lists."""
        assert render(list_of(list_of(BOOL))) == "((boolean)[])[]"

    def test_tuple_of(self):
        """Test tuple rendering."""
        assert render(tuple_of(INT, STR)) == "[types.Int,string]"

    def test_optional(self):
        """Test optional rendering."""
        assert render(optional(STR)) == "(string|null)"

    def test_dict_of(self):
        """Test dict rendering as a Record."""
        assert render(dict_of(STR, INT)) == "Record<string,types.Int>"

    def test_literal(self):
        """Test string literal rendering."""
        assert render(literal("on")) == '"on"'

    def test_helpers_are_native(self):
        """Test that helpers never create definitions of their own."""
        foo = TypeDefinition(name="Foo", body=TypeName.ident("string"))
        for info in (
            list_of(foo.info()),
            tuple_of(foo.info()),
            optional(foo.info()),
            dict_of(STR, foo.info()),
        ):
            assert isinstance(info, NativeTypeInfo)
            assert "types.Foo" in render(info)
