"""Bundled fallback catalog of Tailwind v3 default utilities.

The catalog is a best-effort rendition of the documented default utility
surface. It is used when the project has no usable language-service library,
so every name here is probed against the project's real compiler and the
previews still reflect the project's theme where the names exist.
"""

from __future__ import annotations

from collections.abc import Iterable

SPACING_SCALE = (
    "0", "px", "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "7", "8", "9", "10",
    "11", "12", "14", "16", "20", "24", "28", "32", "36", "40", "44", "48", "52", "56", "60",
    "64", "72", "80", "96",
)  # fmt: skip
FRACTIONS = (
    "1/2", "1/3", "2/3", "1/4", "2/4", "3/4", "1/5", "2/5", "3/5", "4/5",
    "1/6", "2/6", "3/6", "4/6", "5/6",
)  # fmt: skip
PALETTE = (
    "slate", "gray", "zinc", "neutral", "stone", "red", "orange", "amber", "yellow", "lime",
    "green", "emerald", "teal", "cyan", "sky", "blue", "indigo", "violet", "purple",
    "fuchsia", "pink", "rose",
)  # fmt: skip
SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
SPECIAL_COLORS = ("inherit", "current", "transparent", "black", "white")
BORDER_PALETTE = ("slate", "gray", "red", "blue", "green")
DIRECTIONS = ("x", "y", "t", "r", "b", "l")
RADIUS_SIDES = ("", "t", "r", "b", "l", "tl", "tr", "br", "bl")
RADIUS_SIZES = ("none", "sm", "", "md", "lg", "xl", "2xl", "3xl", "full")
CURSORS = (
    "auto", "default", "pointer", "wait", "text", "move", "help", "not-allowed", "none",
    "context-menu", "progress", "cell", "crosshair", "vertical-text", "alias", "copy",
    "no-drop", "grab", "grabbing", "all-scroll", "col-resize", "row-resize", "n-resize",
    "e-resize", "s-resize", "w-resize", "ne-resize", "nw-resize", "se-resize", "sw-resize",
    "ew-resize", "ns-resize", "nesw-resize", "nwse-resize", "zoom-in", "zoom-out",
)  # fmt: skip


def _scaled(prefix: str, values: Iterable[str]) -> list[str]:
    return [f"{prefix}-{value}" if value else prefix for value in values]


def _layout() -> list[str]:
    names = ["container", "aspect-auto", "aspect-square", "aspect-video"]
    names += ["visible", "invisible", "sr-only", "not-sr-only"]
    names += ["static", "fixed", "absolute", "relative", "sticky"]
    names += ["inset-0", "inset-x-0", "inset-y-0"]
    for value in ("0", "1", "2", "4", "8"):
        names += _scaled("top", [value]) + _scaled("right", [value])
        names += _scaled("bottom", [value]) + _scaled("left", [value])
    names += [
        "block", "inline-block", "inline", "flex", "inline-flex", "table", "inline-table",
        "table-caption", "table-cell", "table-column", "table-column-group",
        "table-footer-group", "table-header-group", "table-row-group", "table-row",
        "flow-root", "grid", "inline-grid", "contents", "list-item", "hidden",
    ]  # fmt: skip
    names += ["isolate", "isolation-auto", "box-border", "box-content"]
    names += _scaled("object", ("contain", "cover", "fill", "none", "scale-down"))
    names += _scaled(
        "object",
        (
            "bottom", "center", "left", "left-bottom", "left-top", "right", "right-bottom",
            "right-top", "top",
        ),
    )  # fmt: skip
    names += _scaled("clear", ("left", "right", "both", "none"))
    names += _scaled("float", ("right", "left", "none"))
    return names


def _flexbox_and_grid() -> list[str]:
    names = ["flex-row", "flex-row-reverse", "flex-col", "flex-col-reverse"]
    names += ["flex-wrap", "flex-wrap-reverse", "flex-nowrap"]
    names += ["flex-1", "flex-auto", "flex-initial", "flex-none"]
    names += ["grow", "grow-0", "shrink", "shrink-0"]
    names += _scaled("justify", ("start", "end", "center", "between", "around", "evenly"))
    names += _scaled("items", ("start", "end", "center", "baseline", "stretch"))
    names += _scaled("content", ("start", "end", "center", "between", "around", "evenly"))
    names += _scaled("self", ("auto", "start", "end", "center", "stretch", "baseline"))
    names += _scaled("grid-cols", [str(n) for n in range(1, 13)])
    names += ["col-auto"] + _scaled("col-span", [str(n) for n in range(1, 7)])
    names += _scaled("grid-rows", [str(n) for n in range(1, 7)])
    names += ["row-auto"] + _scaled("row-span", [str(n) for n in range(1, 7)])
    names += _scaled("gap", ("0", "1", "2", "3", "4", "5", "6", "8", "10", "12"))
    names += _scaled("gap-x", ("0", "1", "2", "3", "4", "5", "6", "8"))
    names += _scaled("gap-y", ("0", "1", "2", "3", "4", "5", "6", "8"))
    return names


def _spacing() -> list[str]:
    names: list[str] = []
    for base in ("p", "m"):
        values = SPACING_SCALE if base == "p" else SPACING_SCALE + ("auto",)
        names += _scaled(base, values)
        for direction in DIRECTIONS:
            names += _scaled(base + direction, values)
    return names


def _sizing() -> list[str]:
    names: list[str] = []
    for axis in ("w", "h"):
        names += _scaled(axis, SPACING_SCALE)
        names += _scaled(axis, ("auto",) + FRACTIONS)
        names += _scaled(axis, ("full", "screen", "min", "max", "fit"))
    names += _scaled("max-w", ("0", "none", "xs", "sm", "md", "lg", "xl"))
    names += _scaled("max-w", ("2xl", "3xl", "4xl", "5xl", "6xl", "7xl"))
    names += _scaled("max-w", ("full", "min", "max", "fit", "prose"))
    names += _scaled("max-w-screen", ("sm", "md", "lg", "xl", "2xl"))
    names += _scaled("min-w", ("0", "full", "min", "max", "fit"))
    names += _scaled("max-h", SPACING_SCALE)
    names += _scaled("max-h", ("full", "screen", "min", "max", "fit"))
    names += _scaled("min-h", ("0", "full", "screen", "min", "max", "fit"))
    return names


def _typography() -> list[str]:
    names = _scaled("font", ("sans", "serif", "mono"))
    names += _scaled(
        "text",
        ("xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl", "8xl", "9xl"),
    )
    names += _scaled(
        "font",
        (
            "thin", "extralight", "light", "normal", "medium", "semibold", "bold",
            "extrabold", "black",
        ),
    )  # fmt: skip
    names += ["italic", "not-italic"]
    names += ["uppercase", "lowercase", "capitalize", "normal-case"]
    names += ["underline", "overline", "line-through", "no-underline"]
    names += _scaled("text", ("left", "center", "right", "justify", "start", "end"))
    names += _scaled(
        "align",
        ("baseline", "top", "middle", "bottom", "text-top", "text-bottom", "sub", "super"),
    )
    names += _scaled(
        "whitespace", ("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces")
    )
    names += _scaled("break", ("normal", "words", "all", "keep"))
    names += _scaled("leading", ("3", "4", "5", "6", "7", "8", "9", "10"))
    names += _scaled("leading", ("none", "tight", "snug", "normal", "relaxed", "loose"))
    names += _scaled("tracking", ("tighter", "tight", "normal", "wide", "wider", "widest"))
    names += _scaled("indent", SPACING_SCALE[: SPACING_SCALE.index("8") + 1])
    names += ["truncate", "text-ellipsis", "text-clip"]
    return names


def _colors(prefix: str, families: Iterable[str]) -> list[str]:
    names = _scaled(prefix, SPECIAL_COLORS)
    for family in families:
        names += _scaled(f"{prefix}-{family}", SHADES)
    return names


def _borders() -> list[str]:
    names: list[str] = []
    for side in ("",) + DIRECTIONS:
        prefix = f"border-{side}" if side else "border"
        names += _scaled(prefix, ("0", "", "2", "4", "8"))
    names += _scaled("border", ("solid", "dashed", "dotted", "double", "hidden", "none"))
    names += _colors("border", BORDER_PALETTE)
    for side in RADIUS_SIDES:
        prefix = f"rounded-{side}" if side else "rounded"
        names += _scaled(prefix, RADIUS_SIZES)
    return names


def _effects() -> list[str]:
    names = _scaled("shadow", ("sm", "", "md", "lg", "xl", "2xl", "inner", "none"))
    names += _scaled(
        "opacity",
        ("0", "5", "10", "20", "25", "30", "40", "50", "60", "70", "75", "80", "90", "95", "100"),
    )
    return names


def _overflow_and_interactivity() -> list[str]:
    modes = ("auto", "hidden", "clip", "visible", "scroll")
    names = _scaled("overflow", modes)
    names += _scaled("overflow-x", modes) + _scaled("overflow-y", modes)
    for prefix in ("overscroll", "overscroll-x", "overscroll-y"):
        names += _scaled(prefix, ("auto", "contain", "none"))
    names += _scaled("cursor", CURSORS)
    names += _scaled("select", ("none", "text", "all", "auto"))
    names += _scaled("pointer-events", ("none", "auto"))
    names += _scaled("appearance", ("none", "auto"))
    return names


def _transitions_and_transforms() -> list[str]:
    names = _scaled(
        "transition", ("none", "all", "", "colors", "opacity", "shadow", "transform")
    )
    names += _scaled("duration", ("75", "100", "150", "200", "300", "500", "700", "1000"))
    names += _scaled("ease", ("linear", "in", "out", "in-out"))
    names += _scaled("animate", ("none", "spin", "ping", "pulse", "bounce"))
    names += _scaled("transform", ("", "cpu", "gpu", "none"))
    scales = ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150")
    for prefix in ("scale", "scale-x", "scale-y"):
        names += _scaled(prefix, scales)
    names += _scaled("rotate", ("0", "1", "2", "3", "6", "12", "45", "90", "180"))
    names += _scaled("translate-x", SPACING_SCALE) + _scaled("translate-y", SPACING_SCALE)
    for prefix in ("skew-x", "skew-y"):
        names += _scaled(prefix, ("0", "1", "2", "3", "6", "12"))
    return names


def _filters() -> list[str]:
    names = _scaled("blur", ("none", "sm", "", "md", "lg", "xl", "2xl", "3xl"))
    names += _scaled(
        "brightness",
        ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150", "200"),
    )
    names += _scaled("contrast", ("0", "50", "75", "100", "125", "150", "200"))
    names += ["grayscale-0", "grayscale", "sepia-0", "sepia", "invert-0", "invert"]
    names += _scaled("hue-rotate", ("0", "15", "30", "60", "90", "180"))
    names += _scaled("saturate", ("0", "50", "100", "150", "200"))
    return names


def _tables_and_lists() -> list[str]:
    names = ["border-collapse", "border-separate", "table-auto", "table-fixed"]
    names += ["caption-top", "caption-bottom"]
    names += _scaled("list", ("none", "disc", "decimal", "inside", "outside"))
    return names


def fallback_catalog() -> list[str]:
    """Return the bundled default utility names (may contain duplicates)."""
    names: list[str] = []
    names += _layout()
    names += _flexbox_and_grid()
    names += _spacing()
    names += _sizing()
    names += _typography()
    names += _colors("text", PALETTE)
    names += _colors("bg", PALETTE)
    names += _borders()
    names += _effects()
    names += _overflow_and_interactivity()
    names += _transitions_and_transforms()
    names += _filters()
    names += _tables_and_lists()
    return names
