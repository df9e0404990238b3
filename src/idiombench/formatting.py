"""Shared text formatting helpers for idiombench.

Plain-string helpers for durations, ratios, section headers and
fixed-width tables.  Nothing here touches the terminal directly.
"""

from __future__ import annotations

import math

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def format_elapsed(nanoseconds: float, precision: int = 2) -> str:
    """Format a nanosecond duration with an adaptive unit.

    Examples: ``'850ns'``, ``'12.50µs'``, ``'3.20ms'``, ``'1.05s'``.
    """
    if math.isnan(nanoseconds):
        return "N/A"
    if nanoseconds < _NS_PER_US:
        return f"{nanoseconds:.0f}ns"
    if nanoseconds < _NS_PER_MS:
        return f"{nanoseconds / _NS_PER_US:.{precision}f}µs"
    if nanoseconds < _NS_PER_S:
        return f"{nanoseconds / _NS_PER_MS:.{precision}f}ms"
    return f"{nanoseconds / _NS_PER_S:.{precision}f}s"


def format_ratio(ratio: float, precision: int = 2) -> str:
    """Format a dimensionless ratio as fixed-point, e.g. ``'0.50x'``."""
    if math.isnan(ratio):
        return "N/A"
    if math.isinf(ratio):
        return "inf"
    return f"{ratio:.{precision}f}x"


def format_count(n: int) -> str:
    """Format an integer with thousands separators: ``'1,000,000'``."""
    return f"{n:,}"


def truncate(text: str, max_len: int, suffix: str = "...") -> str:
    """Truncate *text* to *max_len* characters, ending in *suffix* when cut."""
    if len(text) <= max_len:
        return text
    if max_len <= len(suffix):
        return suffix[:max_len]
    return text[: max_len - len(suffix)] + suffix


def format_section_header(title: str, width: int = 72) -> str:
    """Format a header line: ``'─── Title ───...'``."""
    lead = "─── "
    fill = width - len(lead) - len(title) - 1
    return f"{lead}{title} {'─' * max(0, fill)}"


def format_table(
    headers: list[str],
    rows: list[list[str]],
    *,
    alignments: str | None = None,
    max_widths: dict[int, int] | None = None,
    indent: int = 2,
    rule: bool = True,
) -> str:
    """Render rows as a fixed-width text table.

    Column widths come from the widest cell (header included).  Short
    rows are padded with empty cells; long rows are cut to the header
    count.

    Args:
        headers: Column headers.
        rows: Cell strings, one list per row.
        alignments: One character per column, ``'l'`` or ``'r'``.
            Missing entries default to ``'l'``.
        max_widths: Column index to maximum width; longer cells are
            truncated with ``'...'``.
        indent: Leading spaces on every line.
        rule: Draw a horizontal rule under the header.

    Returns:
        The table as a single string without a trailing newline.
    """
    if not headers:
        return ""

    ncols = len(headers)
    align = (alignments or "").ljust(ncols, "l")[:ncols]
    limits = max_widths or {}

    def _fit(col: int, text: str) -> str:
        limit = limits.get(col)
        return truncate(text, limit) if limit else text

    head = [_fit(i, h) for i, h in enumerate(headers)]
    body = [[_fit(i, cell) for i, cell in enumerate((list(r) + [""] * ncols)[:ncols])] for r in rows]

    widths = [len(h) for h in head]
    for row in body:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def _line(cells: list[str]) -> str:
        parts = [
            cell.rjust(w) if a == "r" else cell.ljust(w)
            for cell, w, a in zip(cells, widths, align)
        ]
        return (" " * indent + "  ".join(parts)).rstrip()

    lines = [_line(head)]
    if rule:
        lines.append(" " * indent + "─" * (sum(widths) + 2 * (ncols - 1)))
    lines.extend(_line(row) for row in body)
    return "\n".join(lines)
