"""Filter, map, join and indent over an ordered collection.

Usage:
    from pipeline_monitor.stitch import stitch

    block = stitch(
        pipeline.stages,
        render_stage_report,
        lambda s: s.stall is not None,
        separator="\\n",
        indent=4,
    )
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from pipeline_monitor.text import reindent

T = TypeVar("T")


def stitch(
    items: Iterable[T],
    render: Callable[[T], str],
    *predicates: Callable[[T], bool],
    separator: Optional[str] = None,
    indent: Optional[int] = None,
) -> str:
    """Render every item that passes all predicates and join the fragments.

    Args:
        items: Ordered collection to walk.
        render: Maps one passing item to its text fragment. Called at most
            once per passing item, in collection order.
        *predicates: Conjunctive filters, evaluated in order and
            short-circuiting on the first failure.
        separator: Placed between consecutive fragments only.
        indent: When greater than zero, continuation lines of the joined
            text are indented by this many spaces (see ``reindent``).

    Returns:
        The joined text; empty when no item passes.
    """
    out: list[str] = []
    started = False

    for item in items:
        if not all(pred(item) for pred in predicates):
            continue

        if started and separator is not None:
            out.append(separator)
        started = True

        out.append(render(item))

    result = "".join(out)
    if indent is not None and indent > 0:
        result = reindent(indent, result)
    return result
