"""
docker-purger - 主入口

定时清理运行时间过长的 Docker 容器（以及 swarm 服务）：
1. 列出运行中的容器（swarm 模式下先列出服务）
2. 选出超过年龄阈值且通过名称规则的资源
3. 逐个 stop + remove
"""

import argparse
import signal
import sys
import threading
from typing import List, Optional

from loguru import logger

from core.config import PurgeConfig, load_settings
from core.docker_client import docker_manager
from core.exceptions import ConfigurationException, DockerException
from core.utils.logger import setup_logger

from .daemon import PurgeDaemon
from .observers import LoggingObserver, MetricsObserver
from .orchestrator import PurgeOrchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docker-purger",
        description="定时清理超过指定天数的 Docker 容器",
    )
    parser.add_argument(
        "-d", "--days",
        type=float,
        help="超过该天数的容器将被清理（默认 1）",
    )
    parser.add_argument(
        "-i", "--interval",
        type=str,
        help="重复执行的 cron 表达式（默认 '0 0 * * *'，即每天午夜）",
    )
    parser.add_argument(
        "-z", "--timezone",
        type=str,
        help="计算执行时间所用的时区（默认 America/Los_Angeles）",
    )
    parser.add_argument(
        "-r", "--run-now",
        action="store_true",
        default=None,
        help="立即执行一次清理而不是按计划执行",
    )
    parser.add_argument(
        "-s", "--swarm",
        action="store_true",
        default=None,
        help="先清理过期的 swarm 服务，再清理容器",
    )
    parser.add_argument(
        "--include",
        type=str,
        help="只清理名称匹配该正则的资源",
    )
    parser.add_argument(
        "--exclude",
        type=str,
        help="名称匹配该正则的资源永不清理（优先于 --include）",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="日志级别（DEBUG, INFO, WARNING, ERROR）",
    )
    return parser


def run_scheduled(orchestrator: PurgeOrchestrator, config: PurgeConfig,
                  metrics: MetricsObserver) -> int:
    """按计划运行，直到收到停止信号"""
    daemon = PurgeDaemon(orchestrator, config.schedule, config.timezone, metrics=metrics)

    stop_event = threading.Event()

    def signal_handler(signum, frame):
        logger.info(f"🛑 Received signal {signum}, shutting down...")
        daemon.stop()
        stop_event.set()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    daemon.start()

    stop_event.wait()

    daemon.join(timeout=10)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """清理服务主入口"""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            PURGE_AGE_DAYS=args.days,
            PURGE_SCHEDULE=args.interval,
            PURGE_TIMEZONE=args.timezone,
            PURGE_RUN_IMMEDIATELY=args.run_now,
            PURGE_SWARM_MODE=args.swarm,
            PURGE_INCLUDE_PATTERN=args.include,
            PURGE_EXCLUDE_PATTERN=args.exclude,
            LOG_LEVEL=args.log_level,
        )
    except ConfigurationException as e:
        setup_logger("INFO")
        logger.error(f"✗ {e}")
        return 2

    setup_logger(settings.LOG_LEVEL, settings.LOG_FILE, settings.LOG_SERIALIZE)
    config = settings.to_purge_config()

    if config.run_immediately:
        logger.info(f"will halt all docker instances older than {config.age_days:g} days now")
    else:
        logger.info(
            f"will halt all docker instances older than {config.age_days:g} days "
            f"at {config.schedule}, {config.timezone} timezone"
        )

    try:
        docker_manager.init(settings.DOCKER_BASE_URL, settings.DOCKER_TIMEOUT)
    except DockerException as e:
        logger.error(f"✗ {e}")
        return 1

    metrics = MetricsObserver()
    orchestrator = PurgeOrchestrator(config, observers=[LoggingObserver(), metrics])

    try:
        if config.run_immediately:
            result = orchestrator.purge()
            return 0 if result.success else 1
        return run_scheduled(orchestrator, config, metrics)
    finally:
        docker_manager.close()


if __name__ == "__main__":
    sys.exit(main())
