"""
Type expression domain for TypeScript definition generation.

This module defines the structural description of "what a type looks like"
as seen through its JSON encoding: named references, string literals,
tuples, objects, arrays, unions and intersections. Named, addressable
definitions live in ``TypeDefinition`` and are referenced by identity, which
is what lets recursive types be described without infinite nesting.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property
from typing import Any, TypeAlias, dataclass_transform

# =============================================================================
# Type Expression Base
# =============================================================================


@dataclass_transform(frozen_default=True)
class TypeExpr:
    """Base for type expression nodes. Subclasses are frozen dataclasses."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True)(cls)


# =============================================================================
# Type Information
# =============================================================================


@dataclass(frozen=True)
class NativeTypeInfo:
    """
    A type described by a ready-made expression.

    Used for TypeScript built-ins such as ``string`` or ``Record<K,V>``.
    The expression is rendered verbatim wherever the type is referenced and
    no definition is emitted for it.
    """

    ref: TypeExpr


@dataclass(frozen=True)
class DefinedTypeInfo:
    """A reference to a named definition, applied to generic arguments."""

    definition: TypeDefinition
    generic_args: tuple[TypeExpr, ...] = ()


TypeInfo: TypeAlias = NativeTypeInfo | DefinedTypeInfo


# =============================================================================
# Reference Types
# =============================================================================


class TypeRef(TypeExpr):
    """
    Reference to another type through its type information.

    Example: TypeRef(FOO.info()) → types.Foo
    """

    info: TypeInfo
    docs: str | None = None


class TypeName(TypeExpr):
    """
    A direct named reference, rendered literally.

    Unlike ``TypeRef`` this does not go through a definition, so it is never
    root-qualified and never contributes dependencies of its own.

    Examples:
        TypeName("string") → string
        TypeName("Record", generic_args=(k, v)) → Record<K,V>
        TypeName("Bar", path=("foo",)) → foo.Bar
    """

    name: str
    path: tuple[str, ...] = ()
    generic_args: tuple[TypeExpr, ...] = ()
    docs: str | None = None

    @classmethod
    def ident(cls, name: str) -> TypeName:
        """Bare identifier with no path and no generic arguments."""
        return cls(name)


# =============================================================================
# Structural Types
# =============================================================================


class TypeString(TypeExpr):
    """
    String literal type.

    Example: TypeString("circle") → "circle"
    """

    value: str
    docs: str | None = None


class TypeTuple(TypeExpr):
    """
    Fixed-length heterogeneous sequence.

    Example: TypeTuple((a, b)) → [A,B]
    """

    elements: tuple[TypeExpr, ...]
    docs: str | None = None


@dataclass(frozen=True)
class ObjectField:
    """One property of an object type."""

    name: TypeString
    type: TypeExpr
    optional: bool = False
    docs: str | None = None


class TypeObject(TypeExpr):
    """
    Object type with ordered fields.

    Example: TypeObject((ObjectField(TypeString("a"), t),)) → {"a":T;}
    """

    fields: tuple[ObjectField, ...]
    docs: str | None = None


class TypeArray(TypeExpr):
    """
    Homogeneous variable-length sequence.

    Example: TypeArray(t) → (T)[]
    """

    item: TypeExpr
    docs: str | None = None


class TypeUnion(TypeExpr):
    """
    Union of alternatives. An empty union is ``never``.

    Example: TypeUnion((a, b)) → (A|B)
    """

    members: tuple[TypeExpr, ...]
    docs: str | None = None


class TypeIntersection(TypeExpr):
    """
    Intersection of constraints. An empty intersection is ``any``.

    Example: TypeIntersection((a, b)) → (A&B)
    """

    members: tuple[TypeExpr, ...]
    docs: str | None = None


# =============================================================================
# Definitions
# =============================================================================


@dataclass(frozen=True, eq=False)
class TypeDefinition:
    """
    A named, top-level type definition.

    Definitions compare and hash by identity: two definitions built
    separately are distinct even if their contents are equal.

    ``body`` may be given as a zero-argument callable so that the body can
    refer to the definition itself, or to a definition declared later in
    the module::

        NODE = TypeDefinition(
            name="Node",
            body=lambda: TypeObject((
                ObjectField(TypeString("next"), NODE.ref(), optional=True),
            )),
        )
    """

    name: str
    body: TypeExpr | Callable[[], TypeExpr]
    path: tuple[str, ...] = ()
    generic_vars: tuple[str, ...] = ()
    docs: str | None = None

    @cached_property
    def expr(self) -> TypeExpr:
        """The body expression, forcing a deferred body on first access."""
        if isinstance(self.body, TypeExpr):
            return self.body
        return self.body()

    @property
    def qualified_name(self) -> str:
        """Dotted name relative to the root namespace."""
        return ".".join((*self.path, self.name))

    def info(self, *generic_args: TypeExpr) -> DefinedTypeInfo:
        return DefinedTypeInfo(self, generic_args)

    def ref(self, *generic_args: TypeExpr) -> TypeRef:
        return TypeRef(self.info(*generic_args))

    def __repr__(self) -> str:
        return f"TypeDefinition({self.qualified_name!r})"


# =============================================================================
# Root Resolution
# =============================================================================


def type_info_of(root: Any) -> TypeInfo:
    """
    Get the type information for a root.

    Accepts a ``TypeInfo`` directly, or any object (typically a class)
    carrying one in its ``TYPE_INFO`` attribute.
    """
    if isinstance(root, NativeTypeInfo | DefinedTypeInfo):
        return root

    info = getattr(root, "TYPE_INFO", None)
    if isinstance(info, NativeTypeInfo | DefinedTypeInfo):
        return info

    msg = f"Cannot get type info from: {root!r}"
    raise TypeError(msg)
