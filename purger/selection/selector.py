"""
选择器：组合过期判定与名称过滤，生成本轮删除集合
"""

from datetime import datetime
from typing import Callable, Iterable, List, Optional

from loguru import logger

from core.models import ResourceDescriptor
from core.utils.time_utils import format_age, utc_now

from .expiration import ExpirationPolicy, Threshold
from .name_filter import NameFilter, Pattern

HandleFactory = Callable[[ResourceDescriptor], object]


class Selector:
    """
    单次遍历列表，保留同时满足过期和名称规则的资源

    输出保持输入顺序，不排序、不去重
    """

    def __init__(self, policy: ExpirationPolicy, name_filter: Optional[NameFilter] = None):
        self.policy = policy
        self.name_filter = name_filter or NameFilter()

    def accepts(self, descriptor: ResourceDescriptor, now: datetime) -> bool:
        return self.policy.is_expired(descriptor, now) and self.name_filter.matches(
            descriptor.name
        )

    def select(
        self,
        listed: Iterable[ResourceDescriptor],
        build_handle: HandleFactory,
        now: Optional[datetime] = None,
    ) -> List:
        """
        Args:
            listed: Docker 返回的资源列表
            build_handle: 为选中资源构建可删除句柄
            now: 判定使用的当前时间（整批相同）

        Returns:
            可删除句柄列表
        """
        now = now or utc_now()
        selected = []

        for descriptor in listed:
            if not self.accepts(descriptor, now):
                continue
            logger.debug(
                f"Selected {descriptor.kind.value} {descriptor.name} "
                f"(age {format_age(descriptor.created_at, now)})"
            )
            selected.append(build_handle(descriptor))

        return selected


def select(
    listed: Iterable[ResourceDescriptor],
    threshold: Threshold,
    build_handle: HandleFactory,
    include: Optional[Pattern] = None,
    exclude: Optional[Pattern] = None,
    now: Optional[datetime] = None,
) -> List:
    """Selector 的函数形式"""
    selector = Selector(ExpirationPolicy(threshold), NameFilter(include, exclude))
    return selector.select(listed, build_handle, now)
