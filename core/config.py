"""
使用 Pydantic Settings 进行配置管理
从 purge.properties 文件和环境变量加载配置
"""

import re
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from loguru import logger

from .exceptions import InvalidConfigException
from .utils.time_utils import days_to_timedelta
from .utils.validators import (
    validate_pattern,
    validate_schedule,
    validate_timezone,
)


# timedelta 能表示的最大天数
MAX_AGE_DAYS = 999_999_999


class Settings(BaseSettings):
    """应用配置，包含参数校验"""

    # 清理策略配置
    PURGE_AGE_DAYS: float = Field(
        default=1,
        ge=0,
        le=MAX_AGE_DAYS,
        allow_inf_nan=False,
        description="超过该天数的容器将被清理",
    )
    PURGE_RUN_IMMEDIATELY: bool = Field(
        default=False, description="立即执行一次清理而不是按计划执行"
    )
    PURGE_SCHEDULE: str = Field(
        default="0 0 * * *", description="清理计划（cron 表达式）"
    )
    PURGE_TIMEZONE: str = Field(
        default="America/Los_Angeles", description="清理计划所在时区"
    )
    PURGE_SWARM_MODE: bool = Field(
        default=False, description="先清理 swarm 服务，再清理容器"
    )
    PURGE_INCLUDE_PATTERN: Optional[str] = Field(
        default=None, description="只清理名称匹配该正则的资源"
    )
    PURGE_EXCLUDE_PATTERN: Optional[str] = Field(
        default=None, description="名称匹配该正则的资源永不清理（优先于 include）"
    )

    # Docker 配置
    DOCKER_BASE_URL: Optional[str] = Field(
        default=None, description="Docker 守护进程地址（为空时读取 DOCKER_HOST 等环境变量）"
    )
    DOCKER_TIMEOUT: int = Field(default=60, description="Docker API 调用超时（秒）")

    # 日志配置
    LOG_LEVEL: str = Field(default="INFO", description="日志级别")
    LOG_FILE: Optional[str] = Field(default=None, description="日志文件路径")
    LOG_SERIALIZE: bool = Field(default=False, description="以 JSON 行格式输出日志")

    model_config = SettingsConfigDict(
        env_file="purge.properties",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("PURGE_SCHEDULE")
    @classmethod
    def validate_purge_schedule(cls, v: str) -> str:
        validate_schedule(v)
        return v

    @field_validator("PURGE_TIMEZONE")
    @classmethod
    def validate_purge_timezone(cls, v: str) -> str:
        validate_timezone(v)
        return v

    @field_validator("PURGE_INCLUDE_PATTERN", "PURGE_EXCLUDE_PATTERN")
    @classmethod
    def validate_name_pattern(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        validate_pattern(v)
        return v

    @field_validator("DOCKER_TIMEOUT")
    @classmethod
    def validate_docker_timeout(cls, v: int) -> int:
        if v < 1:
            raise ValueError("DOCKER_TIMEOUT 至少为 1")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL 必须为 {valid_levels} 中的一项")
        return v_upper

    def to_purge_config(self) -> "PurgeConfig":
        """
        构建单次运行使用的不可变配置

        返回:
            PurgeConfig 实例（阈值为 timedelta，名称规则已编译）
        """
        return PurgeConfig(
            age_threshold=days_to_timedelta(self.PURGE_AGE_DAYS),
            run_immediately=self.PURGE_RUN_IMMEDIATELY,
            schedule=self.PURGE_SCHEDULE,
            timezone=self.PURGE_TIMEZONE,
            swarm_mode=self.PURGE_SWARM_MODE,
            include_pattern=_compile(self.PURGE_INCLUDE_PATTERN),
            exclude_pattern=_compile(self.PURGE_EXCLUDE_PATTERN),
        )


@dataclass(frozen=True)
class PurgeConfig:
    """清理流程的不可变配置，显式传入 PurgeOrchestrator"""

    age_threshold: timedelta = timedelta(days=1)
    run_immediately: bool = False
    schedule: str = "0 0 * * *"
    timezone: str = "America/Los_Angeles"
    swarm_mode: bool = False
    include_pattern: Optional[re.Pattern] = None
    exclude_pattern: Optional[re.Pattern] = None

    @property
    def age_days(self) -> float:
        return self.age_threshold.total_seconds() / 86400


def _compile(pattern: Optional[str]) -> Optional[re.Pattern]:
    return re.compile(pattern) if pattern else None


# ========== 配置获取函数 ==========


@lru_cache()
def get_settings() -> Settings:
    """
    获取配置实例（单例）

    返回:
        配置实例
    """
    settings = Settings()
    logger.debug("Settings loaded")
    return settings


def load_settings(**overrides: Any) -> Settings:
    """
    加载配置，命令行参数（非 None 的值）覆盖环境变量和配置文件

    参数:
        **overrides: 以字段名为键的覆盖值

    返回:
        配置实例

    异常:
        InvalidConfigException: 任意字段校验失败
    """
    values = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(**values)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ())) or "settings"
        raise InvalidConfigException(key, first.get("input"), first.get("msg")) from e
