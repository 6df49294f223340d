"""
容器访问仓储
"""

from typing import List

from core.enums import RemovalStep, ResourceKind
from core.models import ResourceDescriptor

from .base import RemovableHandle, ResourceRepository, Step


class ContainerHandle(RemovableHandle):
    """容器句柄：先 stop 再 remove"""

    kind = ResourceKind.CONTAINER

    def stop(self) -> None:
        self.api.stop(self.id)

    def remove(self) -> None:
        self.api.remove_container(self.id)

    def steps(self) -> List[Step]:
        return [
            (RemovalStep.STOPPED, self.stop),
            (RemovalStep.REMOVED, self.remove),
        ]


class ContainerRepository(ResourceRepository):
    """
    容器访问仓储

    只列出运行中的容器（APIClient.containers() 默认行为）
    """

    kind = ResourceKind.CONTAINER

    def _list_raw(self) -> List[dict]:
        return self.api.containers()

    def _to_descriptor(self, info: dict) -> ResourceDescriptor:
        return ResourceDescriptor.from_container(info)

    def get_handle(self, descriptor: ResourceDescriptor) -> ContainerHandle:
        return ContainerHandle(self.api, descriptor)
