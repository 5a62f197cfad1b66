"""Candidate utility class catalogs."""

from .enumerate import (
    INTROSPECTION_PACKAGE,
    CandidateSet,
    ClassEnumerator,
    EnumerationSource,
    FallbackCatalog,
    Introspected,
)
from .static import fallback_catalog
from .variants import expand_flex_utilities, expand_spacing_utilities, expand_variants

__all__ = [
    "CandidateSet",
    "ClassEnumerator",
    "EnumerationSource",
    "FallbackCatalog",
    "INTROSPECTION_PACKAGE",
    "Introspected",
    "expand_flex_utilities",
    "expand_spacing_utilities",
    "expand_variants",
    "fallback_catalog",
]
