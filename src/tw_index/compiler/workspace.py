"""Scoped scratch workspace for one compiler run."""

from __future__ import annotations

import tempfile
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

WORKSPACE_PREFIX = "twpicker-"
UTILITIES_DIRECTIVE = "@tailwind utilities;"


@dataclass(slots=True, frozen=True)
class ScratchWorkspace:
    """Paths of the synthetic compiler inputs and output."""

    root: Path

    @property
    def input_css(self) -> Path:
        return self.root / "input.css"

    @property
    def output_css(self) -> Path:
        return self.root / "output.css"

    @property
    def content_html(self) -> Path:
        return self.root / "index.html"


def safelist_markup(classes: Sequence[str]) -> str:
    """Render one element carrying every candidate class."""
    return f'<div class="{" ".join(classes)}"></div>'


@contextmanager
def scratch_workspace(classes: Sequence[str]) -> Iterator[ScratchWorkspace]:
    """Create compiler inputs in a unique temp dir, removed on every exit path."""
    with tempfile.TemporaryDirectory(prefix=WORKSPACE_PREFIX) as raw_dir:
        workspace = ScratchWorkspace(root=Path(raw_dir).resolve())
        workspace.input_css.write_text(UTILITIES_DIRECTIVE, encoding="utf-8")
        workspace.content_html.write_text(safelist_markup(classes), encoding="utf-8")
        yield workspace
