"""
容器清理工具的枚举类型定义
"""

from enum import Enum


class ResourceKind(str, Enum):
    """资源类型枚举"""

    CONTAINER = "container"  # 普通容器
    SERVICE = "service"  # swarm 服务


class RemovalStep(str, Enum):
    """清理步骤枚举，值即日志事件标签"""

    STOPPED = "stopped"  # 已停止（仅容器）
    REMOVED = "removed"  # 已删除
