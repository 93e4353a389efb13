"""
Errors — Failure signals raised by enum declarations and lookups.

All of these indicate programmer error. They are raised where the problem is
detected and propagate to the caller unchanged.
"""

from typing import Any


class EnumError(Exception):
    """Base class for all enumkit errors."""
    pass


class InvalidValueError(EnumError, ValueError):
    """Raised when a value is not a member of the enum being constructed."""

    def __init__(self, value: Any, enum_name: str):
        self.value = value
        self.value_type = type(value).__name__
        self.enum_name = enum_name
        super().__init__(
            f"Given value ({value!r} of type {self.value_type}) "
            f"is not in enum `{enum_name}`"
        )


class NoSuchVariantOrMethodError(EnumError, AttributeError):
    """Raised when a class-level lookup names neither a member nor a method."""

    def __init__(self, enum_name: str, name: str):
        self.enum_name = enum_name
        self.name = name
        super().__init__(
            f"No such value (`{name}`) or static method in enum `{enum_name}`"
        )


class UndefinedDynamicAccessorError(EnumError, AttributeError):
    """
    Raised when an `is_*` / `is*` predicate does not resolve to a member.

    `candidate` is the constant name the accessor was normalized to.
    """

    def __init__(self, enum_name: str, accessor: str, candidate: str):
        self.enum_name = enum_name
        self.accessor = accessor
        self.candidate = candidate
        super().__init__(
            f"`{accessor}` does not match any member of enum `{enum_name}` "
            f"(looked for `{candidate}`)"
        )


class EnumDeclarationError(EnumError, TypeError):
    """Raised when an enum class declares an inconsistent member set."""
    pass
