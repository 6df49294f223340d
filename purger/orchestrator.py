"""
Purge Orchestrator - 批量清理编排

流程：列出 → 选择 → 逐个清理

- swarm 模式下先完整处理服务，再处理容器
- 全程严格串行：任意时刻最多一个列表或删除调用在进行
- 列表失败中止本轮；单个资源的步骤失败只记录，不中止
"""

import time
from datetime import datetime
from typing import Callable, List

from loguru import logger

from core.config import PurgeConfig
from core.exceptions import RuntimeListingException
from core.utils.time_utils import utc_now

from .observers import LoggingObserver, PurgeObserver
from .remover import Remover
from .repositories import ContainerRepository, ResourceRepository, ServiceRepository
from .selection import ExpirationPolicy, NameFilter, Selector
from .types import PurgeResult


class PurgeOrchestrator:
    """
    批量清理编排器

    所有协作者均可注入，便于测试：
    - containers / services: 资源访问仓储
    - remover: 单个资源清理执行器
    - observers: 每轮结束后通知
    - clock: 当前时间来源
    """

    def __init__(
        self,
        config: PurgeConfig,
        containers: ResourceRepository = None,
        services: ResourceRepository = None,
        remover: Remover = None,
        observers: List[PurgeObserver] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.containers = containers or ContainerRepository()
        self.services = services or ServiceRepository()
        self.remover = remover or Remover()
        self.observers: List[PurgeObserver] = (
            observers if observers is not None else [LoggingObserver()]
        )
        self._clock = clock

        # 名称规则统一作用于容器和服务
        self.selector = Selector(
            ExpirationPolicy(config.age_threshold),
            NameFilter(config.include_pattern, config.exclude_pattern),
        )

    def purge(self) -> PurgeResult:
        """
        执行一轮清理

        Returns:
            本轮结果（success / aborted / errors）
        """
        start_time = time.time()
        result = PurgeResult(started_at=self._clock(), swarm_mode=self.config.swarm_mode)
        logger.info(
            f"Purging outstanding docker containers at {result.started_at.isoformat()}"
        )

        try:
            if self.config.swarm_mode:
                result.services_listed = self._purge_phase(self.services, result)
            result.containers_listed = self._purge_phase(self.containers, result)
        except RuntimeListingException as e:
            logger.error(f"✗ {e}")
            result.aborted = True
            result.error_message = str(e)

        result.execution_time = time.time() - start_time
        self._notify_observers(result)
        return result

    def _purge_phase(self, repository: ResourceRepository, result: PurgeResult) -> int:
        """
        处理一类资源：列出、选择、逐个清理

        Returns:
            列出的资源数量

        Raises:
            RuntimeListingException: 列表失败（不进行任何删除）
        """
        listed = repository.list()
        handles = self.selector.select(listed, repository.get_handle, self._clock())

        kind = repository.kind.value
        if handles:
            logger.info(f"Found {len(handles)} expired {kind}s out of {len(listed)}")
        else:
            logger.debug(f"No expired {kind}s out of {len(listed)}")

        for handle in handles:
            result.record(self.remover.remove(handle))

        return len(listed)

    def _notify_observers(self, result: PurgeResult):
        """通知所有观察者"""
        if result.success:
            for observer in self.observers:
                observer.on_purge_completed(result)
        else:
            for observer in self.observers:
                observer.on_purge_failed(result)


def purge(config: PurgeConfig, **kwargs) -> PurgeResult:
    """便捷函数：以给定配置执行一轮清理"""
    return PurgeOrchestrator(config, **kwargs).purge()
