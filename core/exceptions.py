"""
容器清理工具的自定义异常
"""
from typing import Any


class PurgerException(Exception):
    """docker-purger 基础异常类"""
    pass


# ========== 配置异常 ==========

class ConfigurationException(PurgerException):
    """配置相关异常基类（启动阶段检测，对整个进程致命）"""
    pass


class InvalidConfigException(ConfigurationException):
    """无效的配置异常"""
    def __init__(self, key: str, value: Any, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid configuration: {key}={value} - {reason}"
        )


# ========== Docker 异常 ==========

class DockerException(PurgerException):
    """Docker 相关异常基类"""
    pass


class DockerNotInitializedException(DockerException):
    """Docker 客户端未初始化异常"""
    def __init__(self):
        super().__init__(
            "DockerManager not initialized. Call init() first."
        )


class DockerConnectionException(DockerException):
    """Docker 连接异常"""
    def __init__(self, detail: str):
        super().__init__(f"Docker connection error: {detail}")


# ========== 清理流程异常 ==========

class RuntimeListingException(DockerException):
    """列出容器/服务失败，本轮清理中止"""
    def __init__(self, kind: str, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(f"Failed to list {kind}s: {detail}")


class RemovalStepException(PurgerException):
    """单个资源的 stop/remove 步骤失败（在 Remover 内部记录，不向上传播）"""
    def __init__(self, step: str, name: str, detail: str):
        self.step = step
        self.name = name
        self.detail = detail
        super().__init__(f"{step} failed for {name}: {detail}")
