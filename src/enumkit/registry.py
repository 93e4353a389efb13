"""
Metadata Registry — Process-wide cache of discovered enum members.

Each concrete enum class is "booted" once: its declared members are merged
along the MRO, validated, cached under the class, and the class's optional
`boot()` hook is run. The cache is only cleared explicitly, which lets test
suites force rediscovery.
"""

from dataclasses import dataclass, field
from threading import RLock
from typing import Any

from enumkit.errors import EnumDeclarationError
from enumkit.observability.logging import get_logger

logger = get_logger("registry")


# Per-class attribute holding the members declared directly in that class body
DECLARED_ATTR = "__variants__"

# Optional one-time initialization classmethod
BOOT_HOOK = "boot"


@dataclass
class EnumMetadata:
    """Discovered metadata for one enum class."""
    enum_class: type
    members: dict[str, Any] = field(default_factory=dict)
    ready: bool = False

    @property
    def names(self) -> list[str]:
        return list(self.members.keys())

    @property
    def values(self) -> list[Any]:
        return list(self.members.values())


def discover_members(cls: type) -> dict[str, Any]:
    """
    Collect declared members for `cls`, base classes first.

    A name redeclared in a subclass keeps its original position.

    Raises:
        EnumDeclarationError: Two members share a value, or a member's
            `is_<name>` predicate is shadowed by a class attribute
    """
    members: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        members.update(vars(klass).get(DECLARED_ATTR, {}))

    seen: dict[Any, str] = {}
    for name, value in members.items():
        if value in seen:
            raise EnumDeclarationError(
                f"Enum `{cls.__qualname__}` declares {name} and {seen[value]} "
                f"with the same value {value!r}"
            )
        seen[value] = name

        predicate = f"is_{name.lower()}"
        if any(predicate in vars(klass) for klass in cls.__mro__):
            raise EnumDeclarationError(
                f"Enum `{cls.__qualname__}` member {name} clashes with the "
                f"`{predicate}` attribute; rename the member"
            )

    return members


def find_boot_hook(cls: type):
    """Return the `boot` hook defined anywhere in the MRO, bound to `cls`."""
    for klass in cls.__mro__:
        if BOOT_HOOK in vars(klass):
            return getattr(cls, BOOT_HOOK)
    return None


class MetadataRegistry:
    """
    Cache of `EnumMetadata` keyed by enum class.

    Booting holds a re-entrant lock so the `boot()` hook runs exactly once
    even when several threads touch a class for the first time; the hook
    itself may call back into the registry for the same class.
    """

    def __init__(self):
        self._entries: dict[type, EnumMetadata] = {}
        self._lock = RLock()

    def ensure_booted(self, cls: type) -> EnumMetadata:
        """Return metadata for `cls`, discovering it on first use."""
        entry = self._entries.get(cls)
        if entry is not None and entry.ready:
            return entry

        with self._lock:
            entry = self._entries.get(cls)
            if entry is not None:
                # Either booted by another thread, or re-entered from boot()
                return entry

            entry = EnumMetadata(enum_class=cls, members=discover_members(cls))
            self._entries[cls] = entry

            hook = find_boot_hook(cls)
            if hook is not None:
                try:
                    hook()
                except Exception:
                    del self._entries[cls]
                    raise

            entry.ready = True
            logger.debug(
                f"Booted {cls.__qualname__} with {len(entry.members)} members"
                f"{' (boot hook ran)' if hook is not None else ''}",
                extra={"extra_data": {
                    "enum": cls.__qualname__,
                    "members": len(entry.members),
                    "boot_hook": hook is not None,
                }},
            )
            return entry

    def is_booted(self, cls: type) -> bool:
        """Whether `cls` currently has cached metadata."""
        entry = self._entries.get(cls)
        return entry is not None and entry.ready

    def reset(self, cls: type) -> bool:
        """Evict cached metadata for `cls`. Returns whether anything was evicted."""
        with self._lock:
            evicted = self._entries.pop(cls, None) is not None
        if evicted:
            logger.debug(f"Reset metadata for {cls.__qualname__}")
        return evicted

    def reset_all(self) -> None:
        """Evict all cached metadata (for testing)."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


# Global metadata registry
_registry = MetadataRegistry()


def get_registry() -> MetadataRegistry:
    """Get global metadata registry."""
    return _registry


def reset_all() -> None:
    """Evict metadata for every enum class (for testing)."""
    _registry.reset_all()
