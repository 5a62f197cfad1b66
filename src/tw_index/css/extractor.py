"""Brace-delimited rule extraction keyed by bare class selectors.

This is selector matching over crude ``{``/``}`` blocks, not a CSS parser.
A class matches a block when ``.<class>`` appears at the start of the
selector text or after a comma or whitespace, and is followed by whitespace,
``,``, ``{``, ``.``, ``:``, ``#``, ``[`` or the end of the selector. The class
may appear literally or in the backslash-escaped form Tailwind emits.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_SELECTOR_START = re.compile(r"(?:^|[,\s])\.")
_SELECTOR_RUN = re.compile(r"(?:\\[0-9a-fA-F]{1,6} ?|\\[^\n]|[^\s,{\\])+")
_CHAINING_CHARS = frozenset(".:#[")
_IDENT_CHARS = re.compile(r"[A-Za-z0-9_-]")


@dataclass(slots=True, frozen=True)
class SelectorBlock:
    """One selector fragment and its declaration body."""

    selector: str
    body: str


def split_selector_blocks(css: str) -> list[SelectorBlock]:
    """Split stylesheet text on ``}`` and then on ``{``.

    Blocks without both a selector and a body are dropped. When a block holds
    more than one ``{`` (a rule nested in an at-rule), the selector fragment is
    the text between the last two ``{``, so the at-rule prelude is dropped.
    """
    blocks: list[SelectorBlock] = []
    for raw_block in css.split("}"):
        head, sep, tail = raw_block.rpartition("{")
        if not sep:
            continue
        selector = head.rpartition("{")[2].strip()
        body = tail.strip()
        if not selector or not body:
            continue
        blocks.append(SelectorBlock(selector=selector, body=body))
    return blocks


def css_escape_class(name: str) -> tuple[str, ...]:
    """Return the escaped selector spellings a CSS serializer may emit."""
    if not name:
        return ()
    escaped: list[str] = []
    for char in name:
        if _IDENT_CHARS.fullmatch(char) or ord(char) > 0x7F:
            escaped.append(char)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            escaped.append(f"\\{ord(char):x} ")
        else:
            escaped.append(f"\\{char}")
    body = "".join(escaped)
    first = name[0]
    if first.isdigit():
        rest = body[1:]
        return (f"\\3{first} {rest}", f"\\3{first}{rest}")
    if len(name) > 1 and first == "-" and (name[1] == "-" or name[1].isdigit()):
        return (f"\\-{body[1:]}",)
    return (body,)


def build_selector_lookup(classes: Iterable[str]) -> dict[str, str]:
    """Map every literal and escaped spelling of each class to the class."""
    lookup: dict[str, str] = {}
    for name in classes:
        lookup.setdefault(name, name)
        for spelling in css_escape_class(name):
            lookup.setdefault(spelling, name)
    return lookup


def match_selector_classes(selector: str, lookup: dict[str, str]) -> set[str]:
    """Return classes referenced as bare class selectors in one selector fragment."""
    matched: set[str] = set()
    for start in _SELECTOR_START.finditer(selector):
        run_match = _SELECTOR_RUN.match(selector, start.end())
        if run_match is None:
            continue
        run = run_match.group(0)
        for end in range(1, len(run) + 1):
            if end < len(run) and run[end] not in _CHAINING_CHARS:
                continue
            found = lookup.get(run[:end])
            if found is not None:
                matched.add(found)
    return matched


def extract_rules_for_classes(css: str, classes: Sequence[str]) -> dict[str, str]:
    """Return one entry per class: every matching block body, newline-terminated."""
    rules: dict[str, str] = {name: "" for name in classes}
    if not css or not rules:
        return rules
    lookup = build_selector_lookup(rules)
    for block in split_selector_blocks(css):
        for name in match_selector_classes(block.selector, lookup):
            rules[name] += block.body + "\n"
    return rules
