"""Tests for built-in pipeline presets."""

import pytest

from pipeline_monitor.checks import check_pipeline, has_errors
from pipeline_monitor.exceptions import MonitorError, PresetNotFoundError
from pipeline_monitor.presets import PIPELINE_PRESETS, available_presets, get_preset
from pipeline_monitor.testbench import generate_testbench


class TestPresets:
    def test_available(self):
        names = available_presets()
        assert "riscv_rv32i" in names
        assert "classic_5stage" in names

    def test_get_preset(self):
        assert get_preset("riscv_rv32i") is PIPELINE_PRESETS["riscv_rv32i"]

    def test_unknown_preset(self):
        with pytest.raises(PresetNotFoundError, match="Unknown preset"):
            get_preset("nonexistent")
        with pytest.raises(KeyError):
            get_preset("nonexistent")
        with pytest.raises(MonitorError):
            get_preset("nonexistent")

    def test_riscv_shape(self, riscv_pipeline):
        assert [s.name for s in riscv_pipeline.stages] == ["IF", "ID", "EX", "WB"]
        assert len(riscv_pipeline.hazards) == 2
        assert len(riscv_pipeline.forwards) == 4
        wb = riscv_pipeline.stages[-1]
        assert wb.stall is None and wb.flush is None

    def test_riscv_forwards_share_stages(self, riscv_pipeline):
        execute = riscv_pipeline.stages[2]
        for forward in riscv_pipeline.forwards:
            _, dst = riscv_pipeline.endpoints(forward)
            assert dst is execute

    @pytest.mark.parametrize("name", sorted(PIPELINE_PRESETS))
    def test_presets_are_consistent(self, name):
        assert not has_errors(check_pipeline(PIPELINE_PRESETS[name]))

    @pytest.mark.parametrize("name", sorted(PIPELINE_PRESETS))
    def test_presets_render(self, name):
        pipeline = PIPELINE_PRESETS[name]
        out = generate_testbench(pipeline)
        assert f"always @({pipeline.clock.render()}) begin" in out
