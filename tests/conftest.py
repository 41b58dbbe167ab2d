"""Pytest configuration for pipeline-monitor tests."""

import pytest

from pipeline_monitor.models import Edge, Forward, Pipeline, Stage
from pipeline_monitor.presets import PIPELINE_PRESETS


@pytest.fixture
def one_stage_pipeline():
    """Single stage with a stall condition and no flush."""
    return Pipeline(
        name="P",
        description="one stage",
        clock=Edge.posedge("clk"),
        stages=[Stage(name="IF", description="fetch", stall="s1")],
    )


@pytest.fixture
def small_pipeline():
    """Two stages, no hazards, one forward."""
    return Pipeline(
        name="P",
        description="small",
        clock=Edge.posedge("clk"),
        stages=[
            Stage(name="IF", description="fetch", stall="s1"),
            Stage(name="WB", description="write-back"),
        ],
        forwards=[
            Forward(name="F1", description="bypass", condition="c1", from_stage=0, to_stage=1),
        ],
    )


@pytest.fixture
def riscv_pipeline():
    return PIPELINE_PRESETS["riscv_rv32i"]
