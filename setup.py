"""
docker-purger 安装配置
"""
from setuptools import setup, find_packages

setup(
    name="docker-purger",
    version="1.0.0",
    description="定时清理过期 Docker 容器和 swarm 服务",
    author="docker-purger Team",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.10",
    install_requires=[
        "docker>=7.0",
        "loguru>=0.7",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-dateutil>=2.8",
        "croniter>=1.4",
        "tzdata",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "docker-purger=purger.main:main",
        ],
    },
)
