"""ES 连接配置数据模型定义模块.

提供客户端工厂相关的数据模型，包括：
- ClusterConfig: 单个连接分组（集群）的配置
- ConnectionConfig: 连接池配置
- ElasticsearchConfig: 全部连接分组及分页缓存前缀
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from elasticmodel.exceptions import ConfigurationError

DEFAULT_GROUP = "default"
DEFAULT_HOST = "http://127.0.0.1:9200"
DEFAULT_CACHE_PREFIX = "elasticmodel"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ClusterConfig:
    """集群配置模型.

    Attributes:
        hosts: ES 节点地址列表（必需，不可为空）
        enable_ssl: 是否启用 HTTPS 及 Basic Auth
        username: Basic Auth 用户名
        password: Basic Auth 密码
        ca_certs: CA 证书文件路径
        verify_certs: 是否验证 SSL 证书，默认 True

    Raises:
        ConfigurationError: 当 hosts 为空时抛出

    Examples:
        >>> config = ClusterConfig(
        ...     hosts=["https://localhost:9200"],
        ...     enable_ssl=True,
        ...     username="elastic",
        ...     password="changeme",
        ...     ca_certs="/storage/cert/http_ca.crt",
        ... )
    """

    hosts: list[str] = field(default_factory=list)
    enable_ssl: bool = False
    username: str | None = None
    password: str | None = None
    ca_certs: str | None = None
    verify_certs: bool = True

    def __post_init__(self) -> None:
        """校验集群配置参数合法性."""
        if not self.hosts:
            raise ConfigurationError("hosts 不能为空，请提供至少一个 ES 节点地址")


@dataclass
class ConnectionConfig:
    """连接池配置模型.

    Attributes:
        max_connections: 每个节点的最大连接数，默认 50，必须 >= 1
        request_timeout: 请求超时时间（秒），默认 2.0，必须 >= 0
        max_retries: 最大重试次数，默认 3
        retry_on_timeout: 超时是否重试，默认 True
        http_compress: 是否启用 HTTP 压缩，默认 True

    Raises:
        ConfigurationError: 当参数不合法时抛出
    """

    max_connections: int = 50
    request_timeout: float = 2.0
    max_retries: int = 3
    retry_on_timeout: bool = True
    http_compress: bool = True

    def __post_init__(self) -> None:
        """校验连接池配置参数合法性."""
        if self.max_connections < 1:
            raise ConfigurationError(
                f"max_connections 必须 >= 1，当前值: {self.max_connections}"
            )
        if self.request_timeout < 0:
            raise ConfigurationError(
                f"request_timeout 必须 >= 0，当前值: {self.request_timeout}"
            )


@dataclass
class ElasticsearchConfig:
    """Elasticsearch 全局配置.

    Attributes:
        groups: 连接分组名 -> 集群配置
        connection: 连接池配置
        cache_prefix: 深度分页游标缓存键前缀
    """

    groups: dict[str, ClusterConfig] = field(default_factory=dict)
    connection: ConnectionConfig = field(default_factory=ConnectionConfig)
    cache_prefix: str = DEFAULT_CACHE_PREFIX

    def get_group(self, group: str = DEFAULT_GROUP) -> ClusterConfig:
        """获取连接分组配置.

        Raises:
            ConfigurationError: 分组不存在
        """
        config = self.groups.get(group)
        if config is None:
            raise ConfigurationError(f"elasticsearch config empty! group: {group}")
        return config

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ElasticsearchConfig:
        """从环境变量读取 default 分组配置.

        支持的环境变量:
            ELASTICSEARCH_HOST: 节点地址，多个以逗号分隔，默认 http://127.0.0.1:9200
            ELASTICSEARCH_ENABLE_SSL: 是否启用 SSL
            ELASTICSEARCH_USERNAME: 用户名，默认 elastic
            ELASTICSEARCH_PASSWORD: 密码
            ELASTICSEARCH_HTTPS_CERT_PATH: CA 证书路径
            ELASTICSEARCH_MAX_CONNECTIONS: 最大连接数
            ELASTICSEARCH_TIMEOUT: 请求超时（秒）
            ELASTICSEARCH_CACHE_PREFIX: 分页缓存前缀

        Args:
            environ: 环境变量字典，默认 os.environ

        Returns:
            ElasticsearchConfig 实例
        """
        env = os.environ if environ is None else environ
        hosts = [
            host.strip()
            for host in env.get("ELASTICSEARCH_HOST", DEFAULT_HOST).split(",")
            if host.strip()
        ]
        cluster = ClusterConfig(
            hosts=hosts,
            enable_ssl=env.get("ELASTICSEARCH_ENABLE_SSL", "").lower() in _TRUE_VALUES,
            username=env.get("ELASTICSEARCH_USERNAME", "elastic"),
            password=env.get("ELASTICSEARCH_PASSWORD", ""),
            ca_certs=env.get("ELASTICSEARCH_HTTPS_CERT_PATH") or None,
        )
        connection = ConnectionConfig(
            max_connections=int(env.get("ELASTICSEARCH_MAX_CONNECTIONS", 50)),
            request_timeout=float(env.get("ELASTICSEARCH_TIMEOUT", 2.0)),
        )
        return cls(
            groups={DEFAULT_GROUP: cluster},
            connection=connection,
            cache_prefix=env.get("ELASTICSEARCH_CACHE_PREFIX", DEFAULT_CACHE_PREFIX),
        )
