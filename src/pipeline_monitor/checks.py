"""Consistency checks over a Pipeline description.

Pipelines are not validated on construction; these checks report dangling
stage references and naming problems without ever raising.
"""

from __future__ import annotations

import logging
from collections import Counter
from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from pipeline_monitor.models import Pipeline

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class PipelineIssue(BaseModel):
    """One finding from ``check_pipeline``."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    entity: str
    message: str


def _name_issues(kind: str, names: Iterable[str]) -> list[PipelineIssue]:
    names = list(names)
    issues: list[PipelineIssue] = []

    for idx, name in enumerate(names):
        if not name.strip():
            issues.append(
                PipelineIssue(
                    severity=Severity.WARNING,
                    entity=f"{kind}[{idx}]",
                    message=f"{kind} at index {idx} has an empty name",
                )
            )

    counts = Counter(n for n in names if n.strip())
    for name, count in counts.items():
        if count > 1:
            issues.append(
                PipelineIssue(
                    severity=Severity.WARNING,
                    entity=f"{kind} {name}",
                    message=f"{kind} name {name!r} is used {count} times",
                )
            )
    return issues


def check_pipeline(pipeline: Pipeline) -> list[PipelineIssue]:
    """Report dangling forward endpoints, empty and duplicate names."""
    issues: list[PipelineIssue] = []
    num_stages = len(pipeline.stages)

    for forward in pipeline.forwards:
        for role, index in (("from", forward.from_stage), ("to", forward.to_stage)):
            if not 0 <= index < num_stages:
                issues.append(
                    PipelineIssue(
                        severity=Severity.ERROR,
                        entity=f"forward {forward.name}",
                        message=(
                            f"'{role}' references stage {index}, "
                            f"but the pipeline has {num_stages} stages"
                        ),
                    )
                )

    issues.extend(_name_issues("stage", (s.name for s in pipeline.stages)))
    issues.extend(_name_issues("hazard", (h.name for h in pipeline.hazards)))
    issues.extend(_name_issues("forward", (f.name for f in pipeline.forwards)))

    errors = sum(1 for i in issues if i.severity == Severity.ERROR)
    logger.info(
        "Checked %s: %d errors, %d warnings",
        pipeline.name,
        errors,
        len(issues) - errors,
    )
    return issues


def has_errors(issues: Iterable[PipelineIssue]) -> bool:
    return any(i.severity == Severity.ERROR for i in issues)
