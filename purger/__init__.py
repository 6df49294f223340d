"""
Purger Service - 容器清理服务

职责：
- 列出运行中的容器和 swarm 服务
- 按年龄阈值和名称规则选出过期资源
- 逐个停止并删除（swarm 模式下先删服务）

架构：
- repositories/: Docker 资源访问与可删除句柄
- selection/: 过期判定、名称过滤、选择器
- remover: 单个资源的 stop/remove
- orchestrator: 一轮清理的编排
- daemon: 按 cron 计划触发
"""

__version__ = "1.0.0"

from .orchestrator import PurgeOrchestrator, purge
from .remover import Remover
from .types import PurgeResult, RemovalOutcome, StepOutcome

__all__ = [
    "PurgeOrchestrator",
    "purge",
    "Remover",
    "PurgeResult",
    "RemovalOutcome",
    "StepOutcome",
]
