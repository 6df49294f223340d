"""
swarm 服务访问仓储
"""

from typing import List

from core.enums import RemovalStep, ResourceKind
from core.models import ResourceDescriptor

from .base import RemovableHandle, ResourceRepository, Step


class ServiceHandle(RemovableHandle):
    """服务句柄：没有 stop 阶段，直接 remove"""

    kind = ResourceKind.SERVICE

    def remove(self) -> None:
        self.api.remove_service(self.id)

    def steps(self) -> List[Step]:
        return [(RemovalStep.REMOVED, self.remove)]


class ServiceRepository(ResourceRepository):
    """swarm 服务访问仓储（仅在 swarm 模式下使用）"""

    kind = ResourceKind.SERVICE

    def _list_raw(self) -> List[dict]:
        return self.api.services()

    def _to_descriptor(self, info: dict) -> ResourceDescriptor:
        return ResourceDescriptor.from_service(info)

    def get_handle(self, descriptor: ResourceDescriptor) -> ServiceHandle:
        return ServiceHandle(self.api, descriptor)
