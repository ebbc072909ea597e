"""tsdef - TypeScript type definitions for JSON-encoded Python data."""

from tsdef.definition_file import (
    definition_file_text,
    # Output
    write_definition_file,
)
from tsdef.emit import (
    EmitCtx,
    Stats,
)
from tsdef.errors import GenericArityError
from tsdef.options import (
    DEFAULT_HEADER,
    DEFAULT_ROOT_NAMESPACE,
    DefinitionFileOptions,
)
from tsdef.resolve import (
    RefResolver,
    reference_closure,
)
from tsdef.type_expr import (
    DefinedTypeInfo,
    NativeTypeInfo,
    ObjectField,
    TypeArray,
    TypeDefinition,
    # Type expressions
    TypeExpr,
    TypeInfo,
    TypeIntersection,
    TypeName,
    TypeObject,
    TypeRef,
    TypeString,
    TypeTuple,
    TypeUnion,
    type_info_of,
)

__all__ = [
    "DEFAULT_HEADER",
    "DEFAULT_ROOT_NAMESPACE",
    "DefinedTypeInfo",
    # Options
    "DefinitionFileOptions",
    "EmitCtx",
    "GenericArityError",
    "NativeTypeInfo",
    "ObjectField",
    "RefResolver",
    "Stats",
    "TypeArray",
    "TypeDefinition",
    # Type expressions
    "TypeExpr",
    "TypeInfo",
    "TypeIntersection",
    "TypeName",
    "TypeObject",
    "TypeRef",
    "TypeString",
    "TypeTuple",
    "TypeUnion",
    "definition_file_text",
    "reference_closure",
    "type_info_of",
    # Output
    "write_definition_file",
]
