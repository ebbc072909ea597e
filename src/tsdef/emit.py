"""
Emission engine: renders type expressions and definitions as TypeScript.

The output is compact and not meant to be read directly; run a formatter
such as Prettier over the generated file if it needs to be.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TextIO, TypeVar

from tsdef.errors import GenericArityError
from tsdef.options import DefinitionFileOptions
from tsdef.type_expr import (
    DefinedTypeInfo,
    NativeTypeInfo,
    TypeArray,
    TypeDefinition,
    TypeExpr,
    TypeInfo,
    TypeIntersection,
    TypeName,
    TypeObject,
    TypeRef,
    TypeString,
    TypeTuple,
    TypeUnion,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Stats:
    """Statistics about a generated definition file."""

    # Number of unique type definitions emitted.
    type_definitions: int = 0


@dataclass
class EmitCtx:
    """
    State for one emission run.

    Attributes:
        writer: Text sink the output is written to
        options: Root namespace and header configuration
        stats: Running statistics
        referenced: Every definition rendered as a reference so far, in
            first-seen order (values unused)
    """

    writer: TextIO
    options: DefinitionFileOptions
    stats: Stats = field(default_factory=Stats)
    referenced: dict[TypeDefinition, None] = field(default_factory=dict)

    def write(self, text: str) -> None:
        self.writer.write(text)

    # -------------------------------------------------------------------------
    # Expressions
    # -------------------------------------------------------------------------

    def emit_expr(self, expr: TypeExpr) -> None:
        """Render one type expression."""
        match expr:
            case TypeRef(info=info, docs=docs):
                self.emit_docs(docs)
                self.emit_info(info)

            case TypeName(name=name, path=path, generic_args=args, docs=docs):
                self.emit_docs(docs)
                for part in path:
                    self.write(f"{part}.")
                self.write(name)
                self._emit_generic_args(args)

            case TypeString(value=value, docs=docs):
                self.emit_docs(docs)
                self.write(_string_literal(value))

            case TypeTuple(elements=elements, docs=docs):
                self.emit_docs(docs)
                self.write("[")
                self._emit_joined(elements, ",", self.emit_expr)
                self.write("]")

            case TypeObject(fields=fields, docs=docs):
                self.emit_docs(docs)
                self.write("{")
                for obj_field in fields:
                    self.emit_docs(obj_field.docs)
                    self.emit_expr(obj_field.name)
                    if obj_field.optional:
                        self.write("?")
                    self.write(":")
                    self.emit_expr(obj_field.type)
                    self.write(";")
                self.write("}")

            case TypeArray(item=item, docs=docs):
                self.emit_docs(docs)
                self.write("(")
                self.emit_expr(item)
                self.write(")[]")

            case TypeUnion(members=members, docs=docs):
                self.emit_docs(docs)
                self._emit_combined(members, "|", empty="never")

            case TypeIntersection(members=members, docs=docs):
                self.emit_docs(docs)
                self._emit_combined(members, "&", empty="any")

            case _:
                raise NotImplementedError(f"Unknown type expression: {type(expr)}")

    def emit_info(self, info: TypeInfo) -> None:
        """Render a reference to a type through its type information."""
        match info:
            case NativeTypeInfo(ref=ref):
                self.emit_expr(ref)

            case DefinedTypeInfo(definition=definition, generic_args=args):
                expected = len(definition.generic_vars)
                if len(args) != expected:
                    raise GenericArityError(
                        definition.qualified_name, expected, len(args)
                    )
                self.referenced.setdefault(definition, None)
                self.write(f"{self.options.root_namespace}.")
                for part in definition.path:
                    self.write(f"{part}.")
                self.write(definition.name)
                self._emit_generic_args(args)

            case _:
                raise NotImplementedError(f"Unknown type info: {type(info)}")

    def emit_docs(self, docs: str | None) -> None:
        """Render documentation as a block comment, one line per source line."""
        if docs is None:
            return
        self.write("\n/**\n")
        for line in _doc_lines(docs):
            self.write(f" * {line}\n")
        self.write(" */\n")

    # -------------------------------------------------------------------------
    # Definitions
    # -------------------------------------------------------------------------

    def emit_def(self, definition: TypeDefinition) -> None:
        """Render one definition as an exported type alias."""
        self.emit_docs(definition.docs)
        if definition.path:
            self.write(f"export namespace {'.'.join(definition.path)}{{")
        self.write(f"export type {definition.name}")
        if definition.generic_vars:
            self.write(f"<{','.join(definition.generic_vars)}>")
        self.write("=")
        self.emit_expr(definition.expr)
        self.write(";")
        if definition.path:
            self.write("}")
        self.write("\n")

        self.stats.type_definitions += 1
        logger.debug(
            "Emitted %s.%s", self.options.root_namespace, definition.qualified_name
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _emit_generic_args(self, args: tuple[TypeExpr, ...]) -> None:
        if not args:
            return
        self.write("<")
        self._emit_joined(args, ",", self.emit_expr)
        self.write(">")

    def _emit_combined(
        self, members: tuple[TypeExpr, ...], separator: str, *, empty: str
    ) -> None:
        if not members:
            self.write(empty)
            return
        self.write("(")
        self._emit_joined(members, separator, self.emit_expr)
        self.write(")")

    def _emit_joined(
        self, items: Iterable[T], separator: str, emit: Callable[[T], None]
    ) -> None:
        first = True
        for item in items:
            if not first:
                self.write(separator)
            emit(item)
            first = False


_SURROGATE = re.compile(r"[\ud800-\udfff]")


def _string_literal(value: str) -> str:
    """Quote a string as a TypeScript string literal."""
    # Lone surrogates can't be encoded as UTF-8, so they stay escaped.
    quoted = json.dumps(value, ensure_ascii=False)
    return _SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", quoted)


def _doc_lines(docs: str) -> list[str]:
    """Split on "\\n" or "\\r\\n" only; a final line ending adds no line."""
    lines = docs.split("\n")
    last = lines.pop()
    lines = [line.removesuffix("\r") for line in lines]
    if last:
        lines.append(last)
    return lines
