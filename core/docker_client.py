"""
Docker 连接管理器
封装 docker SDK 的低层 APIClient，供列表与删除操作复用
"""

from typing import Optional

import docker
from docker import APIClient
from docker.errors import DockerException as DockerSDKException
from loguru import logger

from .exceptions import DockerConnectionException, DockerNotInitializedException


class DockerManager:
    """
    Docker 客户端管理器
    进程内共享一个 APIClient，通过全局实例 docker_manager 访问
    """

    def __init__(self):
        self._api: Optional[APIClient] = None

    def init(self, base_url: Optional[str] = None, timeout: int = 60) -> None:
        """
        初始化 Docker API 客户端

        参数:
            base_url: Docker 守护进程地址，为空时读取 DOCKER_HOST 等环境变量
            timeout: API 调用超时（秒）
        """
        if self._api is not None:
            logger.warning("DockerManager 已经初始化")
            return

        try:
            if base_url:
                self._api = APIClient(base_url=base_url, timeout=timeout)
            else:
                self._api = docker.from_env(timeout=timeout).api
        except DockerSDKException as e:
            raise DockerConnectionException(str(e)) from e

        logger.info(f"Docker管理器已初始化（{self._api.base_url}）")

    def close(self) -> None:
        """关闭 Docker 连接"""
        if self._api is not None:
            self._api.close()
            self._api = None
            logger.info("Docker连接已关闭")

    def get_api(self) -> APIClient:
        """
        获取 Docker API 客户端

        返回:
            APIClient 实例
        """
        if self._api is None:
            raise DockerNotInitializedException()
        return self._api

    def ping(self) -> bool:
        """
        检查 Docker 守护进程是否可用

        返回:
            如果守护进程响应 ping 则为 True
        """
        try:
            return bool(self._api.ping()) if self._api else False
        except Exception as e:
            logger.error(f"Docker ping失败: {e}")
            return False


# 全局实例
docker_manager = DockerManager()
