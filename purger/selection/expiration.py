"""
过期判定
"""

from datetime import datetime, timedelta
from typing import Optional, Union

from core.models import ResourceDescriptor
from core.utils.time_utils import utc_now

Threshold = Union[timedelta, int, float]


def _as_timedelta(threshold: Threshold) -> timedelta:
    # 数字按秒处理
    if isinstance(threshold, timedelta):
        return threshold
    return timedelta(seconds=threshold)


def is_expired(created_at: datetime, threshold: Threshold, now: datetime) -> bool:
    """
    判断资源是否过期

    严格大于：年龄恰好等于阈值时不算过期

    Args:
        created_at: 创建时间（带时区）
        threshold: 年龄阈值（timedelta 或秒数）
        now: 当前时间（带时区）

    Returns:
        now - created_at > threshold
    """
    return now - created_at > _as_timedelta(threshold)


class ExpirationPolicy:
    """按年龄阈值判定资源是否过期"""

    def __init__(self, threshold: Threshold):
        threshold = _as_timedelta(threshold)
        if threshold < timedelta(0):
            raise ValueError(f"Age threshold must be non-negative, got: {threshold}")
        self.threshold = threshold

    def is_expired(
        self, descriptor: ResourceDescriptor, now: Optional[datetime] = None
    ) -> bool:
        return is_expired(descriptor.created_at, self.threshold, now or utc_now())

    def __repr__(self) -> str:
        return f"ExpirationPolicy(threshold={self.threshold})"
