"""Error types raised by the emission engine."""

from __future__ import annotations


class GenericArityError(AssertionError):
    """
    A reference supplied a different number of generic arguments than its
    definition declares.

    This is a contract violation in how the type graph was built, not a
    condition callers are expected to recover from.
    """

    def __init__(self, name: str, expected: int, got: int) -> None:
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(
            f"Type definition {name} expects {expected} generic "
            f"arguments but got {got}"
        )
