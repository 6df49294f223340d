"""
资源访问基类

- ResourceRepository: 列出某类资源，并为选中的资源构建可删除句柄
- RemovableHandle: 绑定资源 ID 与该类资源的清理步骤
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from docker import APIClient
from loguru import logger

from core.docker_client import docker_manager
from core.enums import RemovalStep, ResourceKind
from core.exceptions import RuntimeListingException
from core.models import ResourceDescriptor

Step = Tuple[RemovalStep, Callable[[], None]]


class RemovableHandle(ABC):
    """
    可删除句柄

    每次删除尝试创建一个，删除完成（无论成败）后丢弃
    """

    kind: ResourceKind

    def __init__(self, api: APIClient, descriptor: ResourceDescriptor):
        self.api = api
        self.descriptor = descriptor

    @property
    def id(self) -> str:
        return self.descriptor.id

    @property
    def name(self) -> str:
        """用于日志的显示名称"""
        return self.descriptor.name

    @abstractmethod
    def steps(self) -> List[Step]:
        """
        按执行顺序返回清理步骤

        Returns:
            (步骤, 无参可调用对象) 列表
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name} ({self.id[:12]})>"


class ResourceRepository(ABC):
    """
    资源访问仓储基类

    职责：
    - 调用 Docker API 列出资源（失败时抛出 RuntimeListingException）
    - 将原始条目转换为 ResourceDescriptor
    - 为选中的资源构建 RemovableHandle
    """

    kind: ResourceKind

    def __init__(self, api: Optional[APIClient] = None):
        self._api = api

    @property
    def api(self) -> APIClient:
        # 未注入时延迟使用全局 docker_manager
        if self._api is None:
            self._api = docker_manager.get_api()
        return self._api

    @abstractmethod
    def _list_raw(self) -> List[dict]:
        """调用 Docker API 返回原始列表"""
        pass

    @abstractmethod
    def _to_descriptor(self, info: dict) -> ResourceDescriptor:
        """将原始条目转换为 ResourceDescriptor"""
        pass

    @abstractmethod
    def get_handle(self, descriptor: ResourceDescriptor) -> RemovableHandle:
        """为资源构建可删除句柄"""
        pass

    def list(self) -> List[ResourceDescriptor]:
        """
        列出当前所有该类资源（保持 Docker 返回的顺序）

        Returns:
            ResourceDescriptor 列表

        Raises:
            RuntimeListingException: Docker 不可达、认证失败或 API 错误
        """
        try:
            raw = self._list_raw()
            descriptors = [self._to_descriptor(info) for info in raw]
        except Exception as e:
            raise RuntimeListingException(self.kind.value, str(e)) from e

        logger.debug(f"Listed {len(descriptors)} {self.kind.value}s")
        return descriptors
