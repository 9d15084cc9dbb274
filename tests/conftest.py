"""公共 fixtures.

ES 客户端使用 MagicMock 替代，上游错误使用真实的 elasticsearch 异常类构造。
"""

from unittest.mock import MagicMock

import pytest
from elastic_transport import ApiResponseMeta, HeadApiResponse, HttpHeaders, NodeConfig
from elasticsearch import ApiError, BadRequestError, ConflictError, NotFoundError

from elasticmodel import FieldType, MemoryCache, Model, QueryContext

_ERROR_CLASSES = {
    400: BadRequestError,
    404: NotFoundError,
    409: ConflictError,
}


def _meta(status: int) -> ApiResponseMeta:
    return ApiResponseMeta(
        status=status,
        http_version="1.1",
        headers=HttpHeaders(),
        duration=0.0,
        node=NodeConfig("http", "localhost", 9200),
    )


def make_api_error(status: int, message: str = "error") -> ApiError:
    """构造指定状态码的 ApiError."""
    meta = _meta(status)
    cls = _ERROR_CLASSES.get(status, ApiError)
    return cls(message, meta, {"error": {"type": "test_exception", "reason": message}, "status": status})


class Article(Model):
    index = "articles"
    casts = {
        "id": FieldType.BIGINT,
        "title": FieldType.VARCHAR,
        "views": FieldType.INT,
        "created_at": FieldType.DATETIME,
    }


@pytest.fixture
def api_error():
    return make_api_error


@pytest.fixture
def article_cls() -> type[Article]:
    return Article


@pytest.fixture
def es_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def cache() -> MemoryCache:
    return MemoryCache()


@pytest.fixture
def context(es_client, cache) -> QueryContext:
    return QueryContext(client=es_client, cache=cache, cache_prefix="test")


@pytest.fixture
def builder(context):
    """绑定 Article 模型的查询构建器."""
    return Article.query(context)


def search_response(hits: list[dict], total: int | None = None) -> dict:
    """构造 search 响应."""
    return {
        "took": 1,
        "timed_out": False,
        "hits": {
            "total": {"value": len(hits) if total is None else total, "relation": "eq"},
            "hits": hits,
        },
    }


@pytest.fixture
def make_search_response():
    return search_response


@pytest.fixture
def head_response():
    """构造 HEAD 请求响应（如 indices.exists）."""

    def _make(status: int) -> HeadApiResponse:
        return HeadApiResponse(meta=_meta(status))

    return _make
