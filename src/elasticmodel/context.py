"""查询上下文模块.

QueryContext 显式携带查询构建器所需的协作对象（ES 客户端、游标缓存、日志记录器），
由调用方创建并传入模型，不依赖进程级的全局容器。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from elasticsearch import Elasticsearch

from elasticmodel.connection.models import DEFAULT_CACHE_PREFIX, DEFAULT_GROUP, ElasticsearchConfig
from elasticmodel.connection.tool import ClientFactory
from elasticmodel.pagination.cache import CacheStore, MemoryCache

# 默认游标缓存过期时间（秒）
DEFAULT_CURSOR_TTL = 3600.0


def _default_cache() -> MemoryCache:
    return MemoryCache(ttl=DEFAULT_CURSOR_TTL)


@dataclass
class QueryContext:
    """查询上下文.

    Attributes:
        client: Elasticsearch 客户端
        cache: 深度分页游标缓存，默认为进程内缓存，条目 DEFAULT_CURSOR_TTL 秒后过期
        cache_prefix: 游标缓存键前缀
        logger: 日志记录器，None 时使用构建器模块的记录器

    Examples:
        >>> context = QueryContext(client=Elasticsearch("http://localhost:9200"))
        >>> Article.query(context).where("status", 1).get()
    """

    client: Elasticsearch
    cache: CacheStore = field(default_factory=_default_cache)
    cache_prefix: str = DEFAULT_CACHE_PREFIX
    logger: logging.Logger | None = None

    @classmethod
    def from_config(
        cls,
        config: ElasticsearchConfig,
        group: str = DEFAULT_GROUP,
        cache: CacheStore | None = None,
        logger: logging.Logger | None = None,
    ) -> QueryContext:
        """根据配置创建上下文.

        Args:
            config: 全局配置
            group: 连接分组名
            cache: 游标缓存，默认带过期时间的进程内缓存
            logger: 日志记录器

        Raises:
            ConfigurationError: 配置为空或分组不存在
        """
        client = ClientFactory(config).create(group)
        return cls(
            client=client,
            cache=cache if cache is not None else _default_cache(),
            cache_prefix=config.cache_prefix,
            logger=logger,
        )
