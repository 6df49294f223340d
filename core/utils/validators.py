"""
验证工具
"""
import re
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from croniter import croniter


def validate_pattern(pattern: str) -> re.Pattern:
    """
    验证名称匹配规则（正则表达式，普通子串也合法）

    Args:
        pattern: 要验证的正则表达式

    Returns:
        编译后的正则

    Raises:
        ValueError: 如果正则表达式无效
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid name pattern {pattern!r}: {e}") from e


def validate_timezone(name: str) -> ZoneInfo:
    """
    验证时区名称

    Args:
        name: IANA 时区名称，如 America/Los_Angeles

    Returns:
        ZoneInfo 实例

    Raises:
        ValueError: 如果时区不存在
    """
    if not name or not name.strip():
        raise ValueError("Timezone cannot be empty")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name}") from e


def validate_schedule(expression: str) -> bool:
    """
    验证 cron 表达式

    支持标准 5 段格式，如 "0 0 * * *"（每天午夜）

    Raises:
        ValueError: 如果表达式无效
    """
    if not expression or not croniter.is_valid(expression):
        raise ValueError(
            f"Invalid schedule: {expression!r}. "
            "Expected a cron expression (e.g., '0 0 * * *')"
        )
    return True
