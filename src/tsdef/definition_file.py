"""
Assembly of complete TypeScript definition files.

A definition file exports the root namespace as its default export and
defines every type the root depends on inside it::

    // AUTO-GENERATED by tsdef

    export default types;
    export namespace types{
    export type Int=number;
    export type Foo={"a":types.Int;"b":string;};
    }
"""

from __future__ import annotations

import io
import logging
from typing import Any, TextIO

from tsdef.emit import EmitCtx, Stats
from tsdef.options import DefinitionFileOptions
from tsdef.resolve import RefResolver
from tsdef.type_expr import type_info_of

logger = logging.getLogger(__name__)


def write_definition_file(
    writer: TextIO,
    root: Any,
    options: DefinitionFileOptions | None = None,
) -> Stats:
    """
    Write a TypeScript module defining ``root`` and all of its dependencies.

    Args:
        writer: Text sink for the module source
        root: A ``TypeInfo``, or an object with a ``TYPE_INFO`` attribute
        options: Header and root namespace; defaults apply when omitted

    Returns:
        Statistics for the written file

    Any exception raised by ``writer`` propagates immediately. Whatever was
    already written stays written and should be treated as incomplete.
    """
    info = type_info_of(root)
    if options is None:
        options = DefinitionFileOptions()
    ctx = EmitCtx(writer, options)
    resolver = RefResolver()
    namespace = options.root_namespace

    if options.header is not None:
        ctx.write(f"{options.header}\n")
    ctx.write(f"export default {namespace};\n")
    ctx.write(f"export namespace {namespace}{{\n")

    # Definitions behind native references only show up once rendered.
    # Resolve from rendered references until nothing new turns up.
    pending = resolver.resolve_root(info)
    checked = 0
    passes = 0
    while pending:
        passes += 1
        logger.debug("Pass %d: emitting %d definitions", passes, len(pending))
        for definition in pending:
            ctx.emit_def(definition)

        pending = []
        referenced = list(ctx.referenced)
        for definition in referenced[checked:]:
            pending.extend(resolver.resolve_definition(definition))
        checked = len(referenced)

    ctx.write("}\n")
    logger.debug(
        "Wrote %d type definitions under %s",
        ctx.stats.type_definitions,
        namespace,
    )
    return ctx.stats


def definition_file_text(
    root: Any, options: DefinitionFileOptions | None = None
) -> str:
    """Render a definition file for ``root`` and return it as a string."""
    buf = io.StringIO()
    write_definition_file(buf, root, options)
    return buf.getvalue()
