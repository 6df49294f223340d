"""
Remover - 单个资源的清理

按句柄给出的步骤顺序执行（容器：stop → remove；服务：remove），
某一步失败只记录日志，后续步骤照常执行，本方法从不抛出异常
"""

from typing import Any, Callable, Iterable, Mapping, Optional

from core.exceptions import RemovalStepException
from core.utils.logger import log_event

from .repositories.base import RemovableHandle
from .types import RemovalOutcome, StepOutcome

EventLog = Callable[[Iterable[str], Optional[Mapping[str, Any]]], None]


class Remover:
    """两阶段（或单阶段）清理执行器"""

    def __init__(self, log: EventLog = log_event):
        """
        Args:
            log: 结构化事件输出 log(tags, fields)，默认写入 loguru
        """
        self._log = log

    def remove(self, handle: RemovableHandle) -> RemovalOutcome:
        """
        清理一个资源

        每一步恰好输出一条以步骤名为标签的事件，无论成功与否

        Args:
            handle: 可删除句柄

        Returns:
            各步骤结果
        """
        outcome = RemovalOutcome(kind=handle.kind, id=handle.id, name=handle.name)

        for step, action in handle.steps():
            error = None
            try:
                action()
            except Exception as e:
                error = RemovalStepException(step.value, handle.name, str(e))

            outcome.steps.append(
                StepOutcome(step=step, error=error.detail if error else None)
            )
            self._log(
                [step.value],
                {
                    "id": handle.name,
                    "kind": handle.kind.value,
                    "error": str(error) if error else None,
                },
            )

        return outcome
