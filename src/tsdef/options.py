"""Options for customizing a generated definition file."""

from __future__ import annotations

import re

from pydantic import BaseModel, field_validator

DEFAULT_HEADER = "// AUTO-GENERATED by tsdef\n"
DEFAULT_ROOT_NAMESPACE = "types"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class DefinitionFileOptions(BaseModel):
    """
    Options for ``write_definition_file``.

    All definitions are placed under a single root namespace and referenced
    by their full path from it. Without this, a module such as::

        type Foo = number;
        export namespace foo {
            type Foo = string;
            type Bar = { x: Foo };
        }

    leaves it ambiguous which ``Foo`` ``Bar.x`` means. Under a root
    namespace the reference is written ``root.Foo`` or ``root.foo.Foo``.
    """

    # Exact text placed at the start of the file, usually a comment.
    # None omits the header.
    header: str | None = DEFAULT_HEADER
    # Namespace wrapping every definition; also the module's default export.
    root_namespace: str = DEFAULT_ROOT_NAMESPACE

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("root_namespace")
    @classmethod
    def check_identifier(cls, value: str) -> str:
        if not _IDENTIFIER.match(value):
            msg = f"root_namespace must be a TypeScript identifier, got {value!r}"
            raise ValueError(msg)
        return value
