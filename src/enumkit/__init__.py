"""
enumkit — Constant-class enumerations with labels, lazy metadata and
convention-based accessors.
"""

__version__ = "0.1.0"

from enumkit.core import (
    EnumBase,
    EnumMeta,
    VariantFactory,
    compatible,
    strict_equals,
)
from enumkit.errors import (
    EnumError,
    InvalidValueError,
    NoSuchVariantOrMethodError,
    UndefinedDynamicAccessorError,
    EnumDeclarationError,
)
from enumkit.config import (
    EnumConfig,
    get_config,
    configure,
    reset_config,
)
from enumkit.registry import (
    EnumMetadata,
    MetadataRegistry,
    get_registry,
    reset_all,
)

__all__ = [
    # Core
    "EnumBase",
    "EnumMeta",
    "VariantFactory",
    "compatible",
    "strict_equals",
    # Errors
    "EnumError",
    "InvalidValueError",
    "NoSuchVariantOrMethodError",
    "UndefinedDynamicAccessorError",
    "EnumDeclarationError",
    # Config
    "EnumConfig",
    "get_config",
    "configure",
    "reset_config",
    # Registry
    "EnumMetadata",
    "MetadataRegistry",
    "get_registry",
    "reset_all",
]
