"""Built-in pipeline descriptions.

Usage:
    from pipeline_monitor.presets import PIPELINE_PRESETS, get_preset

    pipeline = PIPELINE_PRESETS["riscv_rv32i"]
    pipeline = get_preset("classic_5stage")
"""

from __future__ import annotations

from pipeline_monitor.exceptions import PresetNotFoundError
from pipeline_monitor.models import Edge, Forward, Hazard, Pipeline, Stage


def _riscv_rv32i() -> Pipeline:
    fetch = Stage(
        name="IF",
        description="Instruction Fetch",
        stall="stall_fetch",
        flush="warp",
    )
    decode = Stage(
        name="ID",
        description="Instruction Decode",
        stall="stall_decode",
        flush="warp",
    )
    execute = Stage(
        name="EX",
        description="Execute",
        stall="stall_execute",
        flush="warp",
    )
    writeback = Stage(name="WB", description="Write-back")

    stages = (fetch, decode, execute, writeback)
    dec, ex = stages.index(decode), stages.index(execute)

    hazards = (
        Hazard(
            name="ID/EX",
            description="Operand produced in EX is read in ID",
            condition="conflict_decode_1 || conflict_decode_2",
        ),
        Hazard(
            name="EX/EX",
            description="Back-to-back dependency inside EX",
            condition="conflict_execute_1 || conflict_execute_2",
        ),
    )

    forwards = (
        Forward(
            name="ID/EX (rs1)",
            description="EX result bypassed to rs1 in decode",
            condition="conflict_decode_1",
            from_stage=dec,
            to_stage=ex,
        ),
        Forward(
            name="ID/EX (rs2)",
            description="EX result bypassed to rs2 in decode",
            condition="conflict_decode_2",
            from_stage=dec,
            to_stage=ex,
        ),
        Forward(
            name="EX/EX (rs1)",
            description="EX result fed back to rs1",
            condition="conflict_execute_1 && !cannot_forward_execute",
            from_stage=ex,
            to_stage=ex,
        ),
        Forward(
            name="EX/EX (rs2)",
            description="EX result fed back to rs2",
            condition="conflict_execute_2 && !cannot_forward_execute",
            from_stage=ex,
            to_stage=ex,
        ),
    )

    return Pipeline(
        name="RISCV",
        description="Custom RISC-V (RV32I) CPU",
        clock=Edge.posedge("clock"),
        stages=stages,
        hazards=hazards,
        forwards=forwards,
    )


def _classic_5stage() -> Pipeline:
    stages = (
        Stage(name="IF", description="Instruction Fetch", stall="pc_stall", flush="branch_taken"),
        Stage(name="ID", description="Instruction Decode", stall="load_use", flush="branch_taken"),
        Stage(name="EX", description="Execute", flush="load_use"),
        Stage(name="MEM", description="Memory Access", stall="dcache_miss"),
        Stage(name="WB", description="Write-back"),
    )

    return Pipeline(
        name="MIPS5",
        description="Classic five-stage in-order pipeline",
        clock=Edge.negedge("clk"),
        stages=stages,
        hazards=(
            Hazard(
                name="load-use",
                description="Load result needed by the next instruction",
                condition="load_use",
            ),
        ),
        forwards=(
            Forward(
                name="MEM->EX",
                description="ALU result from EX/MEM register",
                condition="fwd_a == 2'b10 || fwd_b == 2'b10",
                from_stage=3,
                to_stage=2,
            ),
            Forward(
                name="WB->EX",
                description="Write-back value from MEM/WB register",
                condition="fwd_a == 2'b01 || fwd_b == 2'b01",
                from_stage=4,
                to_stage=2,
            ),
        ),
    )


PIPELINE_PRESETS: dict[str, Pipeline] = {
    "riscv_rv32i": _riscv_rv32i(),
    "classic_5stage": _classic_5stage(),
}


def available_presets() -> list[str]:
    """List registered preset names."""
    return list(PIPELINE_PRESETS.keys())


def get_preset(name: str) -> Pipeline:
    """Look up a preset by name.

    Raises:
        PresetNotFoundError: If no preset has that name.
    """
    try:
        return PIPELINE_PRESETS[name]
    except KeyError:
        raise PresetNotFoundError(
            f"Unknown preset: {name} (available: {', '.join(available_presets())})"
        ) from None
