"""Tests for the pipemon CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from pipeline_monitor.cli import cli, register_commands
from pipeline_monitor.models import Edge, Forward, Pipeline, Stage
from pipeline_monitor.presets import PIPELINE_PRESETS
from pipeline_monitor.testbench import generate_testbench

# Register subcommands on the cli group (normally done in main())
register_commands()


@pytest.fixture
def runner():
    r = CliRunner()
    with r.isolated_filesystem():
        yield r


# ---------------------------------------------------------------------------
# pipemon render
# ---------------------------------------------------------------------------


def test_render_default_preset(runner):
    result = runner.invoke(cli, ["--quiet", "render"])
    assert result.exit_code == 0
    assert result.output == generate_testbench(PIPELINE_PRESETS["riscv_rv32i"]) + "\n"


def test_render_named_preset(runner):
    result = runner.invoke(cli, ["--quiet", "render", "--preset", "classic_5stage"])
    assert result.exit_code == 0
    assert "always @(negedge clk) begin" in result.output


def test_render_unknown_preset(runner):
    result = runner.invoke(cli, ["--quiet", "render", "-p", "nonexistent"])
    assert result.exit_code == 1
    assert "Unknown preset" in result.output


def test_render_to_file(runner):
    result = runner.invoke(cli, ["--json", "render", "-o", "monitor.sv"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["pipeline"] == "RISCV"
    assert data["output"] == "monitor.sv"
    written = Path("monitor.sv").read_text(encoding="utf-8")
    assert written == generate_testbench(PIPELINE_PRESETS["riscv_rv32i"]) + "\n"


def test_render_creates_output_directory(runner):
    result = runner.invoke(cli, ["--quiet", "render", "-o", "build/sim/monitor.sv"])
    assert result.exit_code == 0
    written = Path("build/sim/monitor.sv").read_text(encoding="utf-8")
    assert written == generate_testbench(PIPELINE_PRESETS["riscv_rv32i"]) + "\n"


def test_render_unwritable_output(runner):
    Path("blocker").write_text("not a directory\n")
    result = runner.invoke(cli, ["--quiet", "render", "-o", "blocker/monitor.sv"])
    assert result.exit_code == 1
    assert "Cannot write" in result.output


def test_render_broken_template(runner):
    Path("tpl").mkdir()
    Path("tpl/monitor.sv.j2").write_text("{% if %}\n")
    Path("alt.yaml").write_text("template_dir: tpl\n")
    result = runner.invoke(cli, ["--quiet", "--config", "alt.yaml", "render"])
    assert result.exit_code == 1
    assert "monitor.sv.j2" in result.output


def test_render_undecodable_config(runner):
    Path("bad.yaml").write_bytes(b"default_preset: \xff\xfe\n")
    result = runner.invoke(cli, ["--quiet", "--config", "bad.yaml", "render"])
    assert result.exit_code == 1
    assert "cannot read settings" in result.output


def test_render_uses_config_file(runner):
    Path("alt.yaml").write_text("default_preset: classic_5stage\n")
    result = runner.invoke(cli, ["--quiet", "--config", "alt.yaml", "render"])
    assert result.exit_code == 0
    assert "MIPS5" in result.output


def test_render_invalid_config(runner):
    Path("bad.yaml").write_text("log_level: LOUD\n")
    result = runner.invoke(cli, ["--quiet", "--config", "bad.yaml", "render"])
    assert result.exit_code == 1
    assert "log_level" in result.output


# ---------------------------------------------------------------------------
# pipemon check / show
# ---------------------------------------------------------------------------


def test_check_clean(runner):
    result = runner.invoke(cli, ["--quiet", "check"])
    assert result.exit_code == 0
    assert "no issues" in result.output


def test_check_json(runner):
    result = runner.invoke(cli, ["--json", "check", "--preset", "classic_5stage"])
    assert result.exit_code == 0
    assert json.loads(result.output) == []


def test_check_dangling_forward(runner, monkeypatch):
    broken = Pipeline(
        name="Broken",
        description="dangling forward",
        clock=Edge.posedge("clk"),
        stages=[Stage(name="A", description="a")],
        forwards=[Forward(name="f", description="", condition="c", from_stage=0, to_stage=5)],
    )
    monkeypatch.setitem(PIPELINE_PRESETS, "broken", broken)
    result = runner.invoke(cli, ["--json", "check", "--preset", "broken"])
    assert result.exit_code == 1
    issues = json.loads(result.output)
    assert issues[0]["severity"] == "error"
    assert issues[0]["entity"] == "forward f"


def test_show_json(runner):
    result = runner.invoke(cli, ["--json", "show"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["clock"] == {"kind": "posedge", "signal": "clock"}
    assert data["forwards"][0]["from"] == 1
    assert data["forwards"][0]["to"] == 2


def test_show_tables(runner):
    result = runner.invoke(cli, ["--quiet", "show", "--preset", "riscv_rv32i"])
    assert result.exit_code == 0
    assert "Stages" in result.output
    assert "Forwards" in result.output
    assert "ID → EX" in result.output


# ---------------------------------------------------------------------------
# pipemon preset / config
# ---------------------------------------------------------------------------


def test_preset_list_json(runner):
    result = runner.invoke(cli, ["--json", "preset", "list"])
    assert result.exit_code == 0
    names = {p["name"] for p in json.loads(result.output)}
    assert names == set(PIPELINE_PRESETS)


def test_preset_list(runner):
    result = runner.invoke(cli, ["--quiet", "preset", "list"])
    assert result.exit_code == 0
    assert "riscv_rv32i" in result.output


def test_config_init_and_validate(runner):
    result = runner.invoke(cli, ["--json", "config", "init"])
    assert result.exit_code == 0
    assert Path(".pipemon/config.yaml").exists()

    result = runner.invoke(cli, ["--json", "config", "validate"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["valid"] is True
    assert data["settings"]["default_preset"] == "riscv_rv32i"


def test_config_validate_missing(runner):
    result = runner.invoke(cli, ["--json", "config", "validate"])
    assert result.exit_code == 1
    assert json.loads(result.output)["valid"] is False


def test_config_validate_invalid(runner):
    Path(".pipemon").mkdir()
    Path(".pipemon/config.yaml").write_text("log_level: LOUD\n")
    result = runner.invoke(cli, ["--json", "config", "validate"])
    assert result.exit_code == 1
    assert "log_level" in json.loads(result.output)["error"]


def test_config_show_json(runner):
    runner.invoke(cli, ["--json", "config", "init"])
    result = runner.invoke(cli, ["--json", "config", "show"])
    assert result.exit_code == 0
    assert "default_preset" in json.loads(result.output)["content"]


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "pipemon" in result.output
