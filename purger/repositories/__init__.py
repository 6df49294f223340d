"""
Docker 资源访问仓储模块
"""

from .base import RemovableHandle, ResourceRepository
from .container_repository import ContainerHandle, ContainerRepository
from .service_repository import ServiceHandle, ServiceRepository

__all__ = [
    "RemovableHandle",
    "ResourceRepository",
    "ContainerHandle",
    "ContainerRepository",
    "ServiceHandle",
    "ServiceRepository",
]
