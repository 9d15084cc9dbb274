"""elasticmodel - Elasticsearch 文档模型与链式查询构建器.

以模型声明索引与字段类型，通过链式调用构建 bool 查询，
并完成分页、写入、按条件更新删除和索引管理。

主要功能:
    - Model: 文档模型，声明 index 和 casts
    - Builder: 链式查询构建器
    - QueryContext: 显式注入 ES 客户端与游标缓存

使用示例:
    from elasticmodel import FieldType, Model, QueryContext

    class Article(Model):
        index = "articles"
        casts = {"title": FieldType.VARCHAR, "views": FieldType.INT}

    context = QueryContext.from_config(ElasticsearchConfig.from_env())
    paged = Article.query(context).where("views", ">", 100).order_by("views", "desc").page(1, 20)
"""

__version__ = "0.1.0"

# 导出连接配置
from elasticmodel.connection import ClientFactory, ClusterConfig, ConnectionConfig, ElasticsearchConfig
from elasticmodel.context import QueryContext

# 导出核心组件
from elasticmodel.core import BoolQuery, Bucket, FieldType, Operator, translate

# 导出异常
from elasticmodel.exceptions import (
    ConfigurationError,
    ElasticModelError,
    LogicError,
    UnsupportedOperatorError,
    ValidationError,
)
from elasticmodel.geo import GeoDistanceUnit, GeoPoint
from elasticmodel.model import Model, QueryableModel
from elasticmodel.pagination import CacheStore, MemoryCache, PaginationCursor
from elasticmodel.query import Builder, BulkErrorItem, PagedResponse

__all__ = [
    # 版本
    "__version__",
    # 模型与构建器
    "Model",
    "QueryableModel",
    "Builder",
    "QueryContext",
    # 操作符和枚举
    "Operator",
    "Bucket",
    "FieldType",
    "GeoDistanceUnit",
    # 核心组件
    "BoolQuery",
    "translate",
    "GeoPoint",
    # 结果
    "PagedResponse",
    "BulkErrorItem",
    # 连接与缓存
    "ClientFactory",
    "ElasticsearchConfig",
    "ClusterConfig",
    "ConnectionConfig",
    "CacheStore",
    "MemoryCache",
    "PaginationCursor",
    # 异常
    "ElasticModelError",
    "ValidationError",
    "UnsupportedOperatorError",
    "ConfigurationError",
    "LogicError",
]
