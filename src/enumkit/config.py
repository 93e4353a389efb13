"""
Configuration — Process-wide behaviour switches for enumkit.

Values come from `EnumConfig` defaults, optionally overridden by
ENUMKIT_* environment variables, and finally by `configure()`.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any


_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class EnumConfig:
    """Configuration for enum behaviour."""
    strict_predicates: bool = True  # Unresolved is_* accessors raise instead of warning
    log_fallbacks: bool = True  # Log a warning when an unknown value falls back to the default

    @classmethod
    def from_env(cls) -> "EnumConfig":
        """Build a config from ENUMKIT_* environment variables."""
        defaults = cls()
        return cls(
            strict_predicates=_env_flag(
                "ENUMKIT_STRICT_PREDICATES", defaults.strict_predicates
            ),
            log_fallbacks=_env_flag("ENUMKIT_LOG_FALLBACKS", defaults.log_fallbacks),
        )


# Global config, loaded lazily so env changes before first use are honoured
_config: EnumConfig | None = None


def get_config() -> EnumConfig:
    """Get the active configuration."""
    global _config
    if _config is None:
        _config = EnumConfig.from_env()
    return _config


def configure(**overrides: Any) -> EnumConfig:
    """
    Override configuration values.

    Raises:
        TypeError: An override names an unknown setting
    """
    global _config
    known = {f.name for f in fields(EnumConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown enumkit settings: {', '.join(sorted(unknown))}")
    _config = replace(get_config(), **overrides)
    return _config


def reset_config() -> None:
    """Drop overrides so the next read reloads from the environment (for testing)."""
    global _config
    _config = None
