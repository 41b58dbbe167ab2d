"""Pydantic models for instruction pipeline descriptions.

A Pipeline owns the canonical tuple of stages. Forwarding paths refer to
their source and destination stages by index into that tuple, so a stage
shared by several forwards exists exactly once. All models are frozen.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pipeline_monitor.exceptions import StageReferenceError


class EdgeKind(str, Enum):
    """Clock transition that triggers the monitor."""

    POSEDGE = "posedge"
    NEGEDGE = "negedge"
    EDGE = "edge"


class Edge(BaseModel):
    """Clock-triggering condition: a transition kind on a named signal."""

    model_config = ConfigDict(frozen=True)

    kind: EdgeKind = Field(description="Transition that fires the monitor")
    signal: str = Field(description="Clock signal name")

    @classmethod
    def posedge(cls, signal: str) -> Edge:
        return cls(kind=EdgeKind.POSEDGE, signal=signal)

    @classmethod
    def negedge(cls, signal: str) -> Edge:
        return cls(kind=EdgeKind.NEGEDGE, signal=signal)

    @classmethod
    def either(cls, signal: str) -> Edge:
        return cls(kind=EdgeKind.EDGE, signal=signal)

    def render(self) -> str:
        """Event expression for an ``always @(...)`` header."""
        return f"{self.kind.value} {self.signal}"


class Stage(BaseModel):
    """One pipeline phase (fetch, decode, ...)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Label printed by the monitor")
    description: str = Field(description="Human-readable stage description")
    stall: Optional[str] = Field(
        default=None,
        description="Expression that is true while the stage stalls",
    )
    flush: Optional[str] = Field(
        default=None,
        description="Expression that is true while the stage is flushed",
    )


class Hazard(BaseModel):
    """A detected pipeline correctness risk."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    condition: str = Field(description="Expression that is true when the hazard is detected")


class Forward(BaseModel):
    """A bypass path between two stages of the owning pipeline."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    condition: str = Field(description="Expression that is true while the path is active")
    from_stage: int = Field(alias="from", description="Index of the source stage")
    to_stage: int = Field(alias="to", description="Index of the destination stage")


class Pipeline(BaseModel):
    """Root aggregate rendered into a monitor testbench."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display title")
    description: str = Field(description="Subtitle printed in the banner")
    clock: Edge
    stages: tuple[Stage, ...] = Field(default_factory=tuple)
    hazards: tuple[Hazard, ...] = Field(default_factory=tuple)
    forwards: tuple[Forward, ...] = Field(default_factory=tuple)

    def stage(self, index: int) -> Stage:
        """Return the stage at ``index``.

        Raises:
            StageReferenceError: If no stage exists at that index.
        """
        if not 0 <= index < len(self.stages):
            raise StageReferenceError(
                f"Pipeline {self.name!r} has no stage at index {index} "
                f"({len(self.stages)} stages)"
            )
        return self.stages[index]

    def stage_index(self, stage: Stage) -> int:
        """Index of ``stage``, matched by identity first, then by value."""
        for idx, candidate in enumerate(self.stages):
            if candidate is stage:
                return idx
        for idx, candidate in enumerate(self.stages):
            if candidate == stage:
                return idx
        raise StageReferenceError(f"Stage {stage.name!r} is not part of pipeline {self.name!r}")

    def endpoints(self, forward: Forward) -> tuple[Stage, Stage]:
        """Resolve a forward's source and destination stages."""
        return self.stage(forward.from_stage), self.stage(forward.to_stage)

    def summary(self) -> str:
        """Short multi-line summary for display."""
        lines = [
            f"Name: {self.name}",
            f"Description: {self.description}",
            f"Clock: {self.clock.render()}",
            f"Stages: {len(self.stages)}",
            f"Hazards: {len(self.hazards)}",
            f"Forwards: {len(self.forwards)}",
        ]
        return "\n".join(lines)
