"""
docker-purger 核心模块
配置、异常、枚举、资源模型、Docker 连接管理和工具函数
"""
