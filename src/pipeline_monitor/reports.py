"""Per-entity report lines for the monitor's clocked block.

Each renderer turns one model entity into a single ``$display`` statement.
The ``\\x1B`` escapes are emitted as text and interpreted by the simulator.
"""

from __future__ import annotations

from pipeline_monitor.models import Forward, Hazard, Stage

# Substituted for a missing stall or flush condition
FALSE_LITERAL = "1'b0"

STAGE_REPORT = r'$display("%s {name}\x1B[0m", status({stall}, {flush}));'
HAZARD_REPORT = r'$display("%s {name}\x1B[0m", hazard_mark({condition}));'
FORWARD_REPORT = r'$display("%s {name}\x1B[0m", forward_mark({condition}));'


def render_stage_report(stage: Stage) -> str:
    stall = stage.stall if stage.stall is not None else FALSE_LITERAL
    flush = stage.flush if stage.flush is not None else FALSE_LITERAL
    return STAGE_REPORT.format(name=stage.name, stall=stall, flush=flush)


def render_hazard_report(hazard: Hazard) -> str:
    return HAZARD_REPORT.format(name=hazard.name, condition=hazard.condition)


def render_forward_report(forward: Forward) -> str:
    # Endpoints are documentation only; the line reports the condition
    return FORWARD_REPORT.format(name=forward.name, condition=forward.condition)
