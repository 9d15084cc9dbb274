"""ES 客户端工厂工具模块.

提供 ClientFactory 类，按连接分组创建并缓存 Elasticsearch 客户端。

使用示例:
    from elasticmodel.connection import ClientFactory, ElasticsearchConfig

    with ClientFactory(ElasticsearchConfig.from_env()) as factory:
        client = factory.create()
"""

from __future__ import annotations

import logging

from elasticsearch import Elasticsearch

from elasticmodel.exceptions import ConfigurationError

from .models import DEFAULT_GROUP, ClusterConfig, ElasticsearchConfig

logger = logging.getLogger(__name__)


class ClientFactory:
    """Elasticsearch 客户端工厂.

    惰性创建并按分组缓存客户端，支持上下文管理器。

    Attributes:
        config: 全局配置
        _clients: 按分组名缓存的客户端字典

    Examples:
        >>> factory = ClientFactory(
        ...     ElasticsearchConfig(groups={"default": ClusterConfig(hosts=["http://localhost:9200"])})
        ... )
        >>> client = factory.create()
    """

    def __init__(self, config: ElasticsearchConfig | None) -> None:
        """初始化客户端工厂.

        Args:
            config: 全局配置，至少包含一个连接分组

        Raises:
            ConfigurationError: 当配置为空时抛出
        """
        if config is None or not config.groups:
            raise ConfigurationError("elasticsearch config empty!")
        self.config = config
        self._clients: dict[str, Elasticsearch] = {}

    def _create_client(self, cluster_config: ClusterConfig) -> Elasticsearch:
        """根据集群配置创建 Elasticsearch 客户端实例.

        Args:
            cluster_config: 单个集群的配置信息

        Returns:
            Elasticsearch 客户端实例
        """
        connection = self.config.connection
        kwargs: dict = {
            "hosts": cluster_config.hosts,
            "connections_per_node": connection.max_connections,
            "request_timeout": connection.request_timeout,
            "max_retries": connection.max_retries,
            "retry_on_timeout": connection.retry_on_timeout,
            "http_compress": connection.http_compress,
        }

        # SSL + Basic Auth
        if cluster_config.enable_ssl:
            if cluster_config.username:
                kwargs["basic_auth"] = (
                    cluster_config.username,
                    cluster_config.password or "",
                )
            if cluster_config.ca_certs:
                kwargs["ca_certs"] = cluster_config.ca_certs
            kwargs["verify_certs"] = cluster_config.verify_certs

        return Elasticsearch(**kwargs)

    def create(self, group: str = DEFAULT_GROUP) -> Elasticsearch:
        """获取指定分组的客户端.

        Args:
            group: 连接分组名，默认 "default"

        Returns:
            Elasticsearch 客户端实例

        Raises:
            ConfigurationError: 当分组配置不存在时抛出
        """
        if group in self._clients:
            return self._clients[group]

        cluster_config = self.config.get_group(group)
        client = self._create_client(cluster_config)
        self._clients[group] = client
        logger.info(f"创建 ES 客户端: group={group}, hosts={cluster_config.hosts}")
        return client

    # ============================================================
    # 生命周期管理
    # ============================================================

    def __enter__(self) -> ClientFactory:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """上下文管理器退出，自动关闭所有客户端."""
        self.close_all()

    def close_all(self) -> None:
        """关闭所有已创建的客户端连接并清空缓存."""
        for group, client in self._clients.items():
            try:
                client.close()
            except Exception as e:
                logger.warning(f"关闭 ES 客户端失败: group={group}, error={e}")
        self._clients.clear()
