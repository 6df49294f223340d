#!/usr/bin/env python3
"""
用于检查 Docker 连接与当前清理配置的健康检查脚本
"""

import sys
from pathlib import Path

# 将项目根目录添加到路径
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger
from core.config import get_settings
from core.docker_client import docker_manager
from core.utils.logger import setup_logger
from core.utils.time_utils import format_age, utc_now
from purger.repositories import ContainerRepository, ServiceRepository
from purger.selection import ExpirationPolicy, NameFilter, Selector


def check_docker(settings) -> bool:
    """检查Docker连接"""
    try:
        docker_manager.init(settings.DOCKER_BASE_URL, settings.DOCKER_TIMEOUT)

        if docker_manager.ping():
            logger.info("✓ Docker连接正常")
            return True
        else:
            logger.error("✗ Docker连接失败：ping返回False")
            return False

    except Exception as e:
        logger.error(f"✗ Docker连接失败: {e}")
        return False


def check_resource_stats(swarm_mode: bool):
    """显示资源统计信息（只统计，不删除）"""
    config = get_settings().to_purge_config()
    selector = Selector(
        ExpirationPolicy(config.age_threshold),
        NameFilter(config.include_pattern, config.exclude_pattern),
    )
    now = utc_now()

    repositories = [ContainerRepository()]
    if swarm_mode:
        repositories.insert(0, ServiceRepository())

    for repository in repositories:
        kind = repository.kind.value
        try:
            listed = repository.list()
        except Exception as e:
            logger.error(f"获取{kind}统计信息失败: {e}")
            continue

        expired = [d for d in listed if selector.accepts(d, now)]
        logger.info(f"{kind} 统计信息:")
        logger.info(f"  总数:     {len(listed)}")
        logger.info(f"  已过期:   {len(expired)}")
        for descriptor in expired:
            logger.info(
                f"    - {descriptor.name} (age {format_age(descriptor.created_at, now)})"
            )


def main():
    """主健康检查流程"""
    # 设置日志
    setup_logger("INFO")

    logger.info("=== 系统健康检查 ===")

    settings = get_settings()
    logger.info(f"年龄阈值: {settings.PURGE_AGE_DAYS} 天")
    logger.info(f"执行计划: {settings.PURGE_SCHEDULE} ({settings.PURGE_TIMEZONE})")
    logger.info(f"Swarm 模式: {settings.PURGE_SWARM_MODE}")

    healthy = check_docker(settings)

    # 显示资源统计（如果 Docker 可访问）
    if healthy:
        check_resource_stats(settings.PURGE_SWARM_MODE)

    # 清理资源
    docker_manager.close()

    # 总体状态
    logger.info("=" * 30)
    if healthy:
        logger.info("✓ 综合状态: 健康")
        sys.exit(0)
    else:
        logger.error("✗ 综合状态: 不健康")
        sys.exit(1)


if __name__ == "__main__":
    main()
