"""Testbench assembly for pipeline monitors.

Renders the Jinja2 skeleton ``monitor.sv.j2`` with the per-entity report
blocks of a Pipeline. The result is a SystemVerilog fragment that prints
stage status, hazards and forwards on every clock edge.

Usage:
    from pipeline_monitor.testbench import TestbenchGenerator, generate_testbench

    source = generate_testbench(pipeline)

    generator = TestbenchGenerator(template_dir=Path("my_templates"))
    source = generator.render(pipeline)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from pipeline_monitor.exceptions import TemplateRenderError
from pipeline_monitor.models import Pipeline
from pipeline_monitor.reports import (
    render_forward_report,
    render_hazard_report,
    render_stage_report,
)
from pipeline_monitor.stitch import stitch

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent
MONITOR_TEMPLATE = "monitor.sv.j2"

# Must match the literal indentation of the report blocks in the skeleton
BLOCK_INDENT = 4


class TestbenchGenerator:
    """Render monitor testbenches from Pipeline descriptions."""

    # Keep pytest from collecting this class
    __test__ = False

    def __init__(self, template_dir: Optional[Union[str, Path]] = None):
        self._template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            undefined=StrictUndefined,
            keep_trailing_newline=False,
        )

    @property
    def template_dir(self) -> Path:
        return self._template_dir

    def sections(self, pipeline: Pipeline) -> dict[str, str]:
        """Build the template variables for ``pipeline``.

        Returns:
            Dict with keys: name, description, clock, stages, hazards, forwards
        """
        return {
            "name": pipeline.name,
            "description": pipeline.description,
            "clock": pipeline.clock.render(),
            "stages": stitch(
                pipeline.stages,
                render_stage_report,
                separator="\n",
                indent=BLOCK_INDENT,
            ),
            "hazards": stitch(
                pipeline.hazards,
                render_hazard_report,
                separator="\n",
                indent=BLOCK_INDENT,
            ),
            "forwards": stitch(
                pipeline.forwards,
                render_forward_report,
                separator="\n",
                indent=BLOCK_INDENT,
            ),
        }

    def render(self, pipeline: Pipeline) -> str:
        """Render the complete monitor for ``pipeline``.

        Raises:
            TemplateRenderError: If the skeleton is missing, does not
                parse, or references a variable that was not supplied.
        """
        logger.debug(
            "Rendering monitor for %s (%d stages, %d hazards, %d forwards)",
            pipeline.name,
            len(pipeline.stages),
            len(pipeline.hazards),
            len(pipeline.forwards),
        )
        return self._render_template(MONITOR_TEMPLATE, self.sections(pipeline))

    def _render_template(self, template_name: str, params: dict[str, Any]) -> str:
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateRenderError(
                f"Template {template_name!r} not found in {self._template_dir}"
            ) from e
        except TemplateError as e:
            raise TemplateRenderError(f"Template {template_name!r}: {e}") from e

        try:
            return template.render(**params)
        except TemplateError as e:
            raise TemplateRenderError(f"Template {template_name!r}: {e}") from e


def generate_testbench(
    pipeline: Pipeline,
    template_dir: Optional[Union[str, Path]] = None,
) -> str:
    """Render the monitor for ``pipeline`` with a fresh generator."""
    return TestbenchGenerator(template_dir).render(pipeline)


__all__ = [
    "BLOCK_INDENT",
    "MONITOR_TEMPLATE",
    "TEMPLATE_DIR",
    "TestbenchGenerator",
    "generate_testbench",
]
