"""
Enum Base — Constant-class enumerations with labels and lazy metadata.

Declare an enumeration by subclassing `EnumBase` and listing UPPER_CASE
constants:

    class Status(EnumBase):
        __default__ = "draft"

        DRAFT = "draft"
        ACTIVE = "active"
        ARCHIVED = "archived"

        __labels__ = {
            DRAFT: "Draft",
            ACTIVE: "Active",
        }

    Status()                  # <Status.DRAFT: 'draft'>
    Status.ACTIVE()           # <Status.ACTIVE: 'active'>
    Status("archived").label()  # 'archived' (no label entry)
    Status.ACTIVE().is_active   # True
    Status.choices()          # {'draft': 'Draft', 'active': 'Active', 'archived': 'archived'}

Labels can also be filled in procedurally by a `boot` classmethod, which
runs once before the class is first used.
"""

from dataclasses import dataclass
from typing import Any, Iterator

from pydantic_core import core_schema

from enumkit.config import get_config
from enumkit.errors import (
    InvalidValueError,
    NoSuchVariantOrMethodError,
    UndefinedDynamicAccessorError,
)
from enumkit.naming import is_const_name, parse_predicate, to_const_name
from enumkit.observability.logging import get_logger
from enumkit.registry import DECLARED_ATTR, EnumMetadata, get_registry

logger = get_logger("core")


# Marks "no value passed" so an explicit None can still be told apart
_UNSET = object()


def _is_member_value(value: Any) -> bool:
    """Whether a class-body value can be an enum member."""
    if callable(value) or hasattr(type(value), "__get__"):
        return False
    try:
        hash(value)
    except TypeError:
        return False
    return True


def strict_equals(a: Any, b: Any) -> bool:
    """Equality that also requires identical types (so 1 != True != 1.0)."""
    return type(a) is type(b) and a == b


def compatible(cls_a: type, cls_b: type) -> bool:
    """Whether two enum classes are the same or one refines the other."""
    return issubclass(cls_a, cls_b) or issubclass(cls_b, cls_a)


def _metadata(cls: type) -> EnumMetadata:
    return get_registry().ensure_booted(cls)


@dataclass(frozen=True, eq=False)
class VariantFactory:
    """
    Returned by `EnumClass.MEMBER`.

    Calling it builds an instance; `.value` is the raw member value.
    Instances of the owner (or a compatible enum) compare equal to it.
    """
    owner: type
    name: str
    value: Any

    def __call__(self) -> "EnumBase":
        return self.owner(self.value)

    def __repr__(self) -> str:
        return f"<{self.owner.__name__}.{self.name} factory: {self.value!r}>"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, VariantFactory):
            return NotImplemented
        return self.owner is other.owner and self.name == other.name

    def __hash__(self) -> int:
        # Same as the instances it builds
        return hash(self.value)


class EnumMeta(type):
    """
    Metaclass for enum classes.

    Moves UPPER_CASE constants out of the class namespace into a per-class
    declaration table and resolves them again, lazily, as factories.
    """

    def __new__(mcs, name, bases, namespace, **kwargs):
        declared = {
            key: value
            for key, value in namespace.items()
            if is_const_name(key) and _is_member_value(value)
        }
        body = {key: value for key, value in namespace.items() if key not in declared}
        body[DECLARED_ATTR] = declared
        body.setdefault("__slots__", ())
        return super().__new__(mcs, name, bases, body, **kwargs)

    def __getattr__(cls, name: str) -> VariantFactory:
        if name.startswith("_"):
            raise AttributeError(
                f"type object '{cls.__name__}' has no attribute '{name}'"
            )
        members = _metadata(cls).members
        if name in members:
            return VariantFactory(cls, name, members[name])
        raise NoSuchVariantOrMethodError(cls.__qualname__, name)

    def __iter__(cls) -> Iterator["EnumBase"]:
        return (cls(value) for value in cls.values())

    def __len__(cls) -> int:
        return len(cls.values())

    def __contains__(cls, value: Any) -> bool:
        return cls.has(value)

    def __bool__(cls) -> bool:
        return True


class EnumBase(metaclass=EnumMeta):
    """
    Abstract base for enumerations.

    Class-level settings a subclass may declare:
        __default__: Value used when constructing without a value
        __labels__: Mapping of value -> display label (may be partial)
        __fallback_to_default__: Replace unknown values with the default
            instead of raising. Only applies when __default__ is itself a
            member; otherwise unknown values still raise
        boot(): Classmethod run once before first use

    A member may not be named so that its `is_<name>` predicate collides
    with an existing attribute (e.g. `VARIANT` and `is_variant`).
    """

    __slots__ = ("_value",)

    __default__: Any = None
    __labels__: dict[Any, str] | None = None
    __fallback_to_default__: bool = False

    def __init__(self, value: Any = _UNSET):
        """
        Create an instance holding a validated member value.

        Raises:
            InvalidValueError: Value is not a member (and no fallback applies)
        """
        if type(self) is EnumBase:
            raise TypeError("EnumBase is abstract; subclass it and declare members")
        object.__setattr__(self, "_value", type(self)._resolve(value))

    @classmethod
    def _resolve(cls, value: Any) -> Any:
        value = cls._unwrap(value)

        if value is _UNSET or value is None:
            value = None if cls.has(None) else cls.__default__

        canonical = cls._canonical(value)
        if canonical is not _UNSET:
            return canonical

        if cls.__fallback_to_default__:
            default = cls._canonical(cls.__default__)
            if default is not _UNSET:
                if get_config().log_fallbacks:
                    logger.warning(
                        f"Unknown value {value!r} for {cls.__qualname__}, "
                        f"falling back to default {default!r}",
                        extra={"extra_data": {
                            "enum": cls.__qualname__,
                            "value": value,
                            "default": default,
                        }},
                    )
                return default

        raise InvalidValueError(value, cls.__qualname__)

    @classmethod
    def _unwrap(cls, value: Any) -> Any:
        """Turn factories and instances of compatible enums into raw values."""
        if isinstance(value, VariantFactory) and compatible(value.owner, cls):
            return value.value
        if isinstance(value, EnumBase) and compatible(type(value), cls):
            return value._value
        return value

    @classmethod
    def _canonical(cls, value: Any) -> Any:
        """Return the stored member value strictly equal to `value`, else _UNSET."""
        for member in _metadata(cls).values:
            if strict_equals(member, value):
                return member
        return _UNSET

    @classmethod
    def _label_for(cls, value: Any) -> str:
        _metadata(cls)  # boot() may populate __labels__
        labels = cls.__labels__
        label = labels.get(value) if labels else None
        if label is not None:
            return str(label)
        return str(value)

    # -------------------------------------------------------------------------
    # Instance API
    # -------------------------------------------------------------------------

    def value(self) -> Any:
        """Return the canonical member value."""
        return self._value

    def label(self) -> str:
        """Return the display label, falling back to the value as a string."""
        return type(self)._label_for(self._value)

    def name(self) -> str:
        """Return the constant name of this instance's member."""
        for const, value in _metadata(type(self)).members.items():
            if strict_equals(value, self._value):
                return const
        return ""

    def equals(self, other: Any) -> bool:
        """
        Whether `other` is an instance of a compatible enum with the same value.

        `other` may also be a member factory (`Cls.FOO`). Labels are not compared.
        """
        if isinstance(other, VariantFactory):
            return compatible(other.owner, type(self)) and strict_equals(
                self._value, other.value
            )
        if not isinstance(other, EnumBase) or not compatible(type(other), type(self)):
            return False
        return strict_equals(self._value, other._value)

    def not_equals(self, other: Any) -> bool:
        return not self.equals(other)

    def is_variant(self, name: str) -> bool:
        """
        Whether this instance is the member called `name`.

        Accepts FOO_BAR, foo_bar or FooBar spellings.
        """
        return self._matches(name, to_const_name(name))

    def _matches(self, accessor: str, candidate: str) -> bool:
        cls = type(self)
        members = _metadata(cls).members
        if candidate in members:
            return self.equals(cls(members[candidate]))

        if get_config().strict_predicates:
            raise UndefinedDynamicAccessorError(cls.__qualname__, accessor, candidate)

        logger.warning(
            f"`{accessor}` does not match any member of {cls.__qualname__} "
            f"(looked for {candidate}); returning False"
        )
        return False

    def __getattr__(self, name: str) -> bool:
        # Only reached for attributes not found normally
        if not name.startswith("_"):
            candidate = parse_predicate(name)
            if candidate is not None:
                return self._matches(name, candidate)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (EnumBase, VariantFactory)):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, (EnumBase, VariantFactory)):
            return NotImplemented
        return not self.equals(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self.label()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self.name()}: {self._value!r}>"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    # -------------------------------------------------------------------------
    # Class API
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, value: Any = _UNSET) -> "EnumBase":
        """Factory alias for the constructor."""
        return cls(value)

    @classmethod
    def default_value(cls) -> Any:
        """Return the declared default as written (not validated)."""
        return cls.__default__

    @classmethod
    def consts(cls) -> list[str]:
        """Member names in declaration order."""
        return _metadata(cls).names

    @classmethod
    def has_const(cls, name: str) -> bool:
        return name in _metadata(cls).members

    @classmethod
    def values(cls) -> list[Any]:
        """Member values in declaration order."""
        return _metadata(cls).values

    @classmethod
    def labels(cls) -> list[str]:
        """Labels for every member, in the same order as `values()`."""
        return [cls._label_for(value) for value in cls.values()]

    @classmethod
    def has(cls, value: Any) -> bool:
        """Strict membership test."""
        return cls._canonical(cls._unwrap(value)) is not _UNSET

    @classmethod
    def has_not(cls, value: Any) -> bool:
        return not cls.has(value)

    @classmethod
    def choices(cls) -> dict[Any, str]:
        """
        Map of value -> label, ready to feed a select/dropdown.

        Example:
            FOO = "foo"
            BAR = "bar"
            __labels__ = {FOO: "I am foo"}

            choices() == {"foo": "I am foo", "bar": "bar"}
        """
        return {value: cls._label_for(value) for value in cls.values()}

    @classmethod
    def to_dict(cls) -> dict[str, Any]:
        """Map of member name -> value, as declared."""
        return dict(_metadata(cls).members)

    @classmethod
    def from_label(cls, label: str) -> "EnumBase | None":
        """Look up the first member whose label equals `label`."""
        for value in cls.values():
            if cls._label_for(value) == label:
                return cls(value)
        return None

    @classmethod
    def reset(cls) -> bool:
        """Drop cached metadata so the next use rediscovers it (for testing)."""
        return get_registry().reset(cls)

    # -------------------------------------------------------------------------
    # pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_value
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return {"enum": cls.values(), "title": cls.__name__}

    @classmethod
    def _validate(cls, value: Any) -> "EnumBase":
        if isinstance(value, cls):
            return value
        return cls(value)


def _serialize_value(instance: EnumBase) -> Any:
    return instance.value()
