"""ES 客户端工厂模块 - 统一管理 Elasticsearch 客户端的配置与创建.

主要组件:
    - ClientFactory: 客户端工厂，按连接分组创建并缓存客户端
    - ElasticsearchConfig: 全局配置（连接分组 + 分页缓存前缀）
    - ClusterConfig: 集群配置模型
    - ConnectionConfig: 连接池配置模型

使用示例:
    from elasticmodel.connection import ClientFactory, ElasticsearchConfig

    factory = ClientFactory(ElasticsearchConfig.from_env())
    client = factory.create("default")
"""

from .models import ClusterConfig, ConnectionConfig, ElasticsearchConfig
from .tool import ClientFactory

__all__ = [
    "ClientFactory",
    "ElasticsearchConfig",
    "ClusterConfig",
    "ConnectionConfig",
]
