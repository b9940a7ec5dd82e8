from moz60check.infrastructure.catalog.extension_catalog import (
    ExtensionCatalog,
    ExtensionMetadata,
    default_extension_dirs,
    target_from_path,
)

__all__ = [
    "ExtensionCatalog",
    "ExtensionMetadata",
    "default_extension_dirs",
    "target_from_path",
]
