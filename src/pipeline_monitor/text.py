"""Text helpers for laying out generated SystemVerilog."""

from __future__ import annotations


def _lines(text: str) -> list[str]:
    # Split on "\n" only; a trailing newline does not open a new line
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def reindent(width: int, text: str) -> str:
    """Indent every line after the first by ``width`` spaces.

    The first line is left as is: it is expected to sit at the indentation
    of the surrounding template already. Every line, the last included,
    comes back terminated by a newline.

    Args:
        width: Number of spaces to insert before continuation lines.
        text: Source text, possibly multi-line.

    Returns:
        The re-indented text, or an empty string for empty input.
    """
    spaces = " " * width
    out: list[str] = []
    for idx, line in enumerate(_lines(text)):
        if idx > 0:
            out.append(spaces)
        out.append(line)
        out.append("\n")
    return "".join(out)
