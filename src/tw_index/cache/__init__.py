"""Project-scoped utility index cache."""

from .lock import DEFAULT_BUILD_REGISTRY, BuildInProgressError, BuildRegistry
from .manager import (
    CacheManager,
    CacheStatus,
    is_cache_stale,
    load_picker_items,
    preview_text,
    project_cache_key,
    read_index,
)
from .models import (
    CACHE_SCHEMA_VERSION,
    CLASS_LIST_FILE,
    META_FILE,
    NAME_MAP_FILE,
    CachedIndex,
    CacheIOError,
    IndexMeta,
    IndexWriteResult,
    PickerItem,
)
from .writer import sanitize_class_to_filename, write_index

__all__ = [
    "BuildInProgressError",
    "BuildRegistry",
    "CACHE_SCHEMA_VERSION",
    "CLASS_LIST_FILE",
    "CacheIOError",
    "CacheManager",
    "CacheStatus",
    "CachedIndex",
    "DEFAULT_BUILD_REGISTRY",
    "IndexMeta",
    "IndexWriteResult",
    "META_FILE",
    "NAME_MAP_FILE",
    "PickerItem",
    "is_cache_stale",
    "load_picker_items",
    "preview_text",
    "project_cache_key",
    "read_index",
    "sanitize_class_to_filename",
    "write_index",
]
