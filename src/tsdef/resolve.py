"""
Reference resolution for type expression graphs.

Computes the deduplicated, transitively reachable set of definitions that a
root type depends on. Definitions are visited by identity, so recursive and
mutually recursive graphs are walked once per definition.
"""

from __future__ import annotations

from collections.abc import Iterator

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


class RefResolver:
    """
    Depth-first resolver with a visited set that persists across calls.

    Definitions are returned in first-discovery pre-order: a definition is
    listed before the definitions its body depends on. Once a definition has
    been returned by any call it is never returned again.

    Native references are leaves. Their expressions are opaque here and are
    only surfaced when the emission engine renders them.
    """

    def __init__(self) -> None:
        self.visited: set[TypeDefinition] = set()

    def resolve_expr(self, expr: TypeExpr) -> list[TypeDefinition]:
        """Newly discovered definitions reachable from an expression."""
        found: list[TypeDefinition] = []
        self._walk(expr, found, open_natives=False)
        return found

    def resolve_definition(self, definition: TypeDefinition) -> list[TypeDefinition]:
        """The definition itself, if unseen, followed by its new dependencies."""
        found: list[TypeDefinition] = []
        self._walk(TypeRef(definition.info()), found, open_natives=False)
        return found

    def resolve_root(self, info: TypeInfo) -> list[TypeDefinition]:
        """
        Seed resolution from the root type.

        The root reference itself is never rendered, so native references
        in it (including inside generic arguments it applies) are opened up
        rather than treated as leaves. Definition bodies are walked as usual.
        """
        found: list[TypeDefinition] = []
        self._walk(TypeRef(info), found, open_natives=True)
        return found

    def _walk(
        self, expr: TypeExpr, found: list[TypeDefinition], *, open_natives: bool
    ) -> None:
        # Explicit stack of child iterators, so long definition chains don't
        # exhaust the interpreter's recursion limit. A frame is only resumed
        # once everything pushed above it is done, which keeps pre-order.
        stack: list[tuple[Iterator[TypeExpr], bool]] = [(iter((expr,)), open_natives)]
        while stack:
            frame, opened = stack[-1]
            node = next(frame, None)
            if node is None:
                stack.pop()
                continue
            match node:
                case TypeRef(info=NativeTypeInfo(ref=ref)):
                    if opened:
                        stack.append((iter((ref,)), True))
                case TypeRef(
                    info=DefinedTypeInfo(definition=definition, generic_args=args)
                ):
                    stack.append((iter(args), opened))
                    if definition not in self.visited:
                        self.visited.add(definition)
                        found.append(definition)
                        stack.append((iter((definition.expr,)), False))
                case TypeName(generic_args=children) | TypeTuple(elements=children):
                    stack.append((iter(children), opened))
                case TypeUnion(members=children) | TypeIntersection(members=children):
                    stack.append((iter(children), opened))
                case TypeObject(fields=fields):
                    stack.append((iter([field.type for field in fields]), opened))
                case TypeArray(item=item):
                    stack.append((iter((item,)), opened))
                case TypeString():
                    pass
                case _:
                    raise NotImplementedError(f"Unknown type expression: {type(node)}")


def reference_closure(root: TypeInfo) -> list[TypeDefinition]:
    """
    All definitions reachable from ``root``, each exactly once.

    Example:
        >>> [d.name for d in reference_closure(BAZ.info())]
        ['Baz', 'Qux']
    """
    return RefResolver().resolve_root(root)
