"""
清理观察者 - 执行监控
"""

from abc import ABC, abstractmethod

from loguru import logger

from .types import PurgeResult


class PurgeObserver(ABC):
    """清理观察者接口"""

    @abstractmethod
    def on_purge_completed(self, result: PurgeResult):
        """一轮清理成功完成时调用"""
        pass

    @abstractmethod
    def on_purge_failed(self, result: PurgeResult):
        """一轮清理中止或有步骤失败时调用"""
        pass


class LoggingObserver(PurgeObserver):
    """日志观察者（默认）"""

    def on_purge_completed(self, result: PurgeResult):
        logger.info(
            f"✓ Purge finished in {result.execution_time:.2f}s: "
            f"{_summary(result)}"
        )

    def on_purge_failed(self, result: PurgeResult):
        if result.aborted:
            # 中止原因已由编排器记录
            logger.debug(f"Purge aborted after {result.execution_time:.2f}s")
            return
        logger.warning(
            f"⚠️  Purge finished with {len(result.errors)} failed steps: "
            f"{_summary(result)}"
        )
        for error in result.errors:
            logger.warning(f"  - {error}")


class MetricsObserver(PurgeObserver):
    """指标收集观察者"""

    def __init__(self):
        self.metrics = {
            "total_cycles": 0,
            "total_success": 0,
            "total_failures": 0,
            "total_aborted": 0,
            "containers_removed": 0,
            "services_removed": 0,
            "failed_steps": 0,
        }

    def _count(self, result: PurgeResult):
        self.metrics["total_cycles"] += 1
        self.metrics["containers_removed"] += result.containers_removed
        self.metrics["services_removed"] += result.services_removed
        self.metrics["failed_steps"] += sum(
            1 for r in result.removals for s in r.steps if not s.success
        )

    def on_purge_completed(self, result: PurgeResult):
        self._count(result)
        self.metrics["total_success"] += 1

    def on_purge_failed(self, result: PurgeResult):
        self._count(result)
        self.metrics["total_failures"] += 1
        if result.aborted:
            self.metrics["total_aborted"] += 1

    def get_metrics(self) -> dict:
        """获取指标"""
        return self.metrics.copy()


def _summary(result: PurgeResult) -> str:
    parts = []
    if result.swarm_mode:
        parts.append(
            f"services {result.services_removed}/{result.services_listed} removed"
        )
    parts.append(
        f"containers {result.containers_removed}/{result.containers_listed} removed"
    )
    return ", ".join(parts)
