"""
清理结果类型定义
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from core.enums import RemovalStep, ResourceKind


@dataclass
class StepOutcome:
    """单个清理步骤的结果"""

    step: RemovalStep
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class RemovalOutcome:
    """单个资源的清理结果"""

    kind: ResourceKind
    id: str
    name: str
    steps: List[StepOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(s.success for s in self.steps)

    @property
    def errors(self) -> List[str]:
        return [
            f"{self.kind.value} {self.name}: {s.step.value} failed: {s.error}"
            for s in self.steps
            if not s.success
        ]


@dataclass
class PurgeResult:
    """一轮清理的结果"""

    started_at: datetime
    swarm_mode: bool = False
    services_listed: int = 0
    containers_listed: int = 0
    removals: List[RemovalOutcome] = field(default_factory=list)
    aborted: bool = False  # 列表阶段失败，本轮中止
    error_message: Optional[str] = None
    execution_time: float = 0.0  # 执行时间（秒）

    def record(self, outcome: RemovalOutcome):
        self.removals.append(outcome)

    def _removed(self, kind: ResourceKind) -> int:
        return sum(1 for r in self.removals if r.kind == kind and r.success)

    @property
    def services_removed(self) -> int:
        return self._removed(ResourceKind.SERVICE)

    @property
    def containers_removed(self) -> int:
        return self._removed(ResourceKind.CONTAINER)

    @property
    def errors(self) -> List[str]:
        errors = [e for r in self.removals for e in r.errors]
        if self.error_message:
            errors.insert(0, self.error_message)
        return errors

    @property
    def success(self) -> bool:
        return not self.aborted and all(r.success for r in self.removals)
