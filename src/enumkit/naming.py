"""
Naming — Predicate accessor parsing and constant name normalization.

Maps accessor spellings such as `isFooBar`, `is_foo_bar` or `isHttp2` to
the constant names they refer to (`FOO_BAR`, `HTTP_2`).
"""

import re


CONST_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")

_SNAKE_PREDICATE = re.compile(r"^is_(?P<rest>[A-Za-z0-9_]+)$")
_PASCAL_PREDICATE = re.compile(r"^is(?P<rest>[A-Z0-9][A-Za-z0-9_]*)$")

_ACRONYM_END = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_START = re.compile(r"([a-z0-9])([A-Z])")
_DIGIT_RUN = re.compile(r"([A-Za-z])([0-9])")
_REPEATED = re.compile(r"_{2,}")


def is_const_name(name: str) -> bool:
    """Whether `name` is spelled like an enum member (UPPER_SNAKE)."""
    return bool(CONST_NAME.match(name))


def to_const_name(name: str) -> str:
    """
    Normalize a PascalCase, camelCase or snake_case name to UPPER_SNAKE.

    Examples:
        FooBar   -> FOO_BAR
        foo_bar  -> FOO_BAR
        HTTPCode -> HTTP_CODE
        Level2   -> LEVEL_2
    """
    result = _ACRONYM_END.sub(r"\1_\2", name)
    result = _WORD_START.sub(r"\1_\2", result)
    result = _DIGIT_RUN.sub(r"\1_\2", result)
    result = _REPEATED.sub("_", result.upper())
    return result.strip("_")


def parse_predicate(name: str) -> str | None:
    """
    Return the constant name a predicate accessor refers to.

    Returns None when `name` is not spelled as a predicate at all.
    """
    match = _SNAKE_PREDICATE.match(name) or _PASCAL_PREDICATE.match(name)
    if match is None:
        return None
    return to_const_name(match.group("rest"))
