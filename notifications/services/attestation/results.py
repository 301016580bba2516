from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StageResult:
    """
    Outcome of one scheduler stage.

    Counters are informational (logs, command output); as_dict()
    gives the public {success, error} shape.
    """

    success: bool = True
    error: Optional[str] = None
    sent: int = 0
    skipped: int = 0
    failed: int = 0
    closed: int = 0

    @classmethod
    def failure(cls, error: str) -> "StageResult":
        return cls(success=False, error=error)

    def as_dict(self) -> dict:
        if self.success:
            return {"success": True}
        return {"success": False, "error": self.error or "Unknown error"}

    def summary(self) -> str:
        if not self.success:
            return f"failed: {self.error}"
        if self.closed:
            return f"{self.closed} closed"
        return f"{self.sent} sent, {self.skipped} skipped, {self.failed} failed"


@dataclass
class RunSummary:
    """Per-stage results of one full scheduler run, in execution order."""

    stages: dict[str, StageResult] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return all(result.success for result in self.stages.values())

    @property
    def failed_stages(self) -> list[str]:
        return [name for name, result in self.stages.items() if not result.success]

    def as_dict(self) -> dict:
        return {name: result.as_dict() for name, result in self.stages.items()}
