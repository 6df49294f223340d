"""
Purge Daemon - 清理守护进程

按 cron 表达式（在配置的时区内计算）周期性执行清理
"""

import threading
from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from croniter import croniter
from loguru import logger

from core.utils.time_utils import utc_now

from .observers import MetricsObserver
from .orchestrator import PurgeOrchestrator


class PurgeDaemon(threading.Thread):
    """清理守护进程，单线程执行，各轮清理不会重叠"""

    def __init__(
        self,
        orchestrator: PurgeOrchestrator,
        schedule: str,
        timezone: str,
        metrics: Optional[MetricsObserver] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Args:
            orchestrator: PurgeOrchestrator 实例
            schedule: cron 表达式
            timezone: 计算 cron 时使用的时区
            metrics: 可选的指标观察者，每轮结束后输出统计
            clock: 当前时间来源
        """
        super().__init__(daemon=True, name="PurgeDaemon")
        self.orchestrator = orchestrator
        self.schedule = schedule
        self.tz = ZoneInfo(timezone)
        self.metrics = metrics
        self._clock = clock
        self._stop_event = threading.Event()

    def next_run(self, after: Optional[datetime] = None) -> datetime:
        """
        计算下一次执行时间

        Args:
            after: 起算时间（默认当前时间）

        Returns:
            配置时区内的下一次执行时间
        """
        base = (after or self._clock()).astimezone(self.tz)
        return croniter(self.schedule, base).get_next(datetime)

    def run(self):
        """主循环"""
        logger.info(f"Purge daemon started ({self.schedule}, {self.tz.key})")

        last_run: Optional[datetime] = None
        while not self._stop_event.is_set():
            now = self._clock()
            # wait() 按单调时钟计时，可能在墙上时间到点前返回
            base = now if last_run is None else max(now, last_run)
            next_time = self.next_run(base)
            delay = max((next_time - now).total_seconds(), 0)
            logger.info(f"Next purge at {next_time.isoformat()}")

            # 等待下一次执行，stop() 会立即唤醒
            if self._stop_event.wait(delay):
                break
            last_run = next_time

            try:
                self.orchestrator.purge()
                if self.metrics is not None:
                    self._log_stats()
            except Exception as e:
                logger.opt(exception=True).error(f"Purge daemon error: {e}")

        logger.info("Purge daemon stopped")

    def stop(self):
        """停止守护进程"""
        self._stop_event.set()

    def _log_stats(self):
        """输出统计信息"""
        stats = self.metrics.get_metrics()
        logger.info(
            f"📊 Cycles: {stats['total_cycles']} "
            f"(failed {stats['total_failures']}, aborted {stats['total_aborted']}), "
            f"removed {stats['containers_removed']} containers, "
            f"{stats['services_removed']} services"
        )
