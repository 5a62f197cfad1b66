"""Stylesheet rule extraction."""

from .extractor import (
    SelectorBlock,
    build_selector_lookup,
    css_escape_class,
    extract_rules_for_classes,
    match_selector_classes,
    split_selector_blocks,
)

__all__ = [
    "SelectorBlock",
    "build_selector_lookup",
    "css_escape_class",
    "extract_rules_for_classes",
    "match_selector_classes",
    "split_selector_blocks",
]
