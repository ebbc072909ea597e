"""
Type information for JSON primitives and containers.

Python values are assumed to be encoded with ``json``: ``bool`` becomes
``boolean``, ``None`` becomes ``null``, lists, sets and tuples become arrays,
and dicts become objects keyed by their (string) keys.

| Python type | TypeScript type |
|---|---|
| bool | boolean |
| str | string |
| None | null |
| int | types.Int (alias of number) |
| float | types.Float (alias of number) |
| list[T], set[T] | (T)[] |
| tuple[A, B] | [A,B] |
| T | None | (T|null) |
| dict[K, V] | Record<K,V> |
"""

from __future__ import annotations

from tsdef.type_expr import (
    DefinedTypeInfo,
    NativeTypeInfo,
    TypeArray,
    TypeDefinition,
    TypeInfo,
    TypeName,
    TypeRef,
    TypeString,
    TypeTuple,
    TypeUnion,
)

# =============================================================================
# Primitives
# =============================================================================

BOOL = NativeTypeInfo(TypeName.ident("boolean"))
STR = NativeTypeInfo(TypeName.ident("string"))
NONE = NativeTypeInfo(TypeName.ident("null"))
UNKNOWN = NativeTypeInfo(TypeName.ident("unknown"))

# Numbers are emitted as named aliases so the generated module documents
# which values are integral. The aliases do not enforce it.
INT_DEF = TypeDefinition(
    name="Int",
    body=TypeName.ident("number"),
)
FLOAT_DEF = TypeDefinition(
    name="Float",
    body=TypeName.ident("number"),
)
INT = DefinedTypeInfo(INT_DEF)
FLOAT = DefinedTypeInfo(FLOAT_DEF)

PRIMITIVES: dict[type, TypeInfo] = {
    bool: BOOL,
    str: STR,
    int: INT,
    float: FLOAT,
    type(None): NONE,
}

# =============================================================================
# Containers
# =============================================================================


def list_of(item: TypeInfo) -> NativeTypeInfo:
    """list[T] → (T)[]"""
    return NativeTypeInfo(TypeArray(TypeRef(item)))


def set_of(item: TypeInfo) -> NativeTypeInfo:
    """set[T] → (T)[], since sets encode as JSON arrays."""
    return list_of(item)


def tuple_of(*elements: TypeInfo) -> NativeTypeInfo:
    """
    tuple[A, B] → [A,B]

    Also useful as a root that lists several unrelated types to define in
    one file.
    """
    return NativeTypeInfo(TypeTuple(tuple(TypeRef(e) for e in elements)))


def optional(inner: TypeInfo) -> NativeTypeInfo:
    """T | None → (T|null)"""
    return NativeTypeInfo(TypeUnion((TypeRef(inner), TypeRef(NONE))))


def dict_of(key: TypeInfo, value: TypeInfo) -> NativeTypeInfo:
    """dict[K, V] → Record<K,V>"""
    return NativeTypeInfo(
        TypeName("Record", generic_args=(TypeRef(key), TypeRef(value)))
    )


def literal(value: str) -> NativeTypeInfo:
    """Literal["x"] → "x" """
    return NativeTypeInfo(TypeString(value))
