"""条件子句转换模块.

将 (字段, 操作符, 值, 选项) 转换为 bool 查询的子句及其所在位置（must / should / must_not），
子句使用 elasticsearch.dsl 的查询对象表示，在发送请求前才序列化为字典。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from elasticsearch.dsl import Q
from elasticsearch.dsl.query import Query

from elasticmodel.core.operators import Bucket, Operator
from elasticmodel.exceptions import UnsupportedOperatorError, ValidationError
from elasticmodel.geo.models import GeoPoint

logger = logging.getLogger(__name__)

# match_phrase 默认允许的词间距
DEFAULT_PHRASE_SLOP = 100

# 默认地理距离过滤范围
DEFAULT_GEO_DISTANCE = "50km"

# 操作符 -> (子句位置, 查询类型)
_OPERATOR_TABLE: dict[Operator, tuple[Bucket, str]] = {
    Operator.EQUAL: (Bucket.MUST, "term"),
    Operator.TERM: (Bucket.MUST, "term"),
    Operator.NOT_EQUAL: (Bucket.MUST_NOT, "term"),
    Operator.NOT_EQUAL_ALT: (Bucket.MUST_NOT, "term"),
    Operator.NOT_TERM: (Bucket.MUST_NOT, "term"),
    Operator.MATCH: (Bucket.MUST, "match"),
    Operator.SHOULD_MATCH: (Bucket.SHOULD, "match"),
    Operator.NOT_MATCH: (Bucket.MUST_NOT, "match"),
    Operator.MULTI_MATCH: (Bucket.MUST, "multi_match"),
    Operator.MATCH_PHRASE: (Bucket.MUST, "match_phrase"),
    Operator.SHOULD_MATCH_PHRASE: (Bucket.SHOULD, "match_phrase"),
    Operator.NOT_MATCH_PHRASE: (Bucket.MUST_NOT, "match_phrase"),
    Operator.GT: (Bucket.MUST, "range"),
    Operator.LT: (Bucket.MUST, "range"),
    Operator.GTE: (Bucket.MUST, "range"),
    Operator.LTE: (Bucket.MUST, "range"),
    Operator.BETWEEN: (Bucket.MUST, "range"),
    Operator.NOT_BETWEEN: (Bucket.MUST_NOT, "range"),
    Operator.IN: (Bucket.MUST, "terms"),
    Operator.NOT_IN: (Bucket.MUST_NOT, "terms"),
    Operator.REGEX: (Bucket.MUST, "regexp"),
    Operator.PREFIX: (Bucket.MUST, "prefix"),
    Operator.NOT_PREFIX: (Bucket.MUST_NOT, "prefix"),
    Operator.WILDCARD: (Bucket.MUST, "wildcard"),
    Operator.EXISTS: (Bucket.MUST, "exists"),
    Operator.NOT_EXISTS: (Bucket.MUST_NOT, "exists"),
}

_RANGE_KEYS = {
    Operator.GT: "gt",
    Operator.LT: "lt",
    Operator.GTE: "gte",
    Operator.LTE: "lte",
}


def parse_operator(operator: str | Operator) -> Operator:
    """
    解析操作符.

    Raises:
        UnsupportedOperatorError: 不支持的操作符
    """
    if isinstance(operator, Operator):
        return operator
    try:
        return Operator(operator)
    except ValueError:
        raise UnsupportedOperatorError(
            f"where query condition operate [{operator}] illegally, "
            f"supported only [{','.join(Operator.values())}]"
        ) from None


def _field_query(query_type: str, field: str, value: Any) -> Query:
    """构建以字段名为键的查询对象.

    使用字典形式，字段名中的 "__" 保持原样，不会被展开为 "."。
    """
    return Q({query_type: {field: value}})


def _range_bounds(value: Any, operator: Operator) -> dict[str, Any]:
    """校验并提取 between / not_between 的起止值."""
    if (
        not isinstance(value, Sequence)
        or isinstance(value, str)
        or len(value) < 2
        or value[0] is None
        or value[1] is None
    ):
        raise ValidationError(
            f"The {operator.value} query value should contain start and end."
        )
    return {"gte": value[0], "lte": value[1]}


def translate(
    field: str | Sequence[str],
    operator: str | Operator,
    value: Any = None,
    options: dict[str, Any] | None = None,
) -> tuple[Bucket, Query]:
    """
    将单个查询条件转换为 bool 子句.

    Args:
        field: 字段名；multi_match 时为字段列表
        operator: 操作符
        value: 条件值
        options: 附加参数，目前用于 match_phrase（如 slop）

    Returns:
        (子句位置, 查询对象) 元组

    Raises:
        UnsupportedOperatorError: 不支持的操作符
        ValidationError: 参数不合法（between 缺少起止值、字段类型错误等）

    示例:
        >>> bucket, query = translate("age", ">=", 18)
        >>> bucket.value, query.to_dict()
        ('must', {'range': {'age': {'gte': 18}}})
    """
    op = parse_operator(operator)
    bucket, query_type = _OPERATOR_TABLE[op]

    if op is Operator.MULTI_MATCH:
        fields = [field] if isinstance(field, str) else list(field)
        if not fields:
            raise ValidationError("multi_match 查询字段列表不能为空")
        return bucket, Q("multi_match", query=value, fields=fields)

    if not isinstance(field, str) or not field:
        raise ValidationError(f"操作符 {op.value} 需要单个字段名，当前值: {field!r}")

    if query_type == "exists":
        return bucket, Q("exists", field=field)

    if query_type == "range":
        if op in (Operator.BETWEEN, Operator.NOT_BETWEEN):
            bounds = _range_bounds(value, op)
        else:
            bounds = {_RANGE_KEYS[op]: value}
        return bucket, _field_query("range", field, bounds)

    if query_type == "terms":
        if isinstance(value, (set, frozenset, tuple)):
            value = list(value)
        elif not isinstance(value, list):
            value = [value]
        return bucket, _field_query("terms", field, value)

    if query_type == "match_phrase":
        params = {"query": value, "slop": DEFAULT_PHRASE_SLOP}
        params.update(options or {})
        return bucket, _field_query("match_phrase", field, params)

    return bucket, _field_query(query_type, field, value)


def geo_distance_clause(
    field: str,
    longitude: float,
    latitude: float,
    distance: str = DEFAULT_GEO_DISTANCE,
) -> tuple[Bucket, Query]:
    """
    构建地理距离过滤子句，总是放在 filter 中.

    Args:
        field: geo_point 字段名
        longitude: 经度
        latitude: 纬度
        distance: 距离范围，如 "50km"

    Returns:
        (Bucket.FILTER, geo_distance 查询对象)
    """
    point = GeoPoint(lat=latitude, lon=longitude)
    return Bucket.FILTER, Q({"geo_distance": {"distance": distance, field: point.to_es_format()}})


class BoolQuery:
    """
    bool 查询累加器.

    按调用顺序记录各子句，序列化时按位置分组。

    使用示例:
        query = BoolQuery()
        query.add(*translate("status", "=", 1))
        query.to_dict()
        # {'bool': {'must': [{'term': {'status': 1}}]}}
    """

    def __init__(self) -> None:
        self._clauses: list[tuple[Bucket, Query]] = []

    def add(self, bucket: Bucket, query: Query) -> BoolQuery:
        """追加子句."""
        self._clauses.append((bucket, query))
        return self

    def is_empty(self) -> bool:
        """是否没有任何子句."""
        return not self._clauses

    def clauses(self, bucket: Bucket) -> list[Query]:
        """返回指定位置的子句（按添加顺序）."""
        return [query for b, query in self._clauses if b is bucket]

    def clear(self) -> None:
        """清空所有子句."""
        self._clauses.clear()

    def to_query(self) -> Query | None:
        """转换为 elasticsearch.dsl 的 bool 查询对象，无子句时返回 None."""
        if self.is_empty():
            return None
        params = {}
        for bucket in Bucket:
            queries = self.clauses(bucket)
            if queries:
                params[bucket.value] = queries
        return Q("bool", **params)

    def to_dict(self) -> dict[str, Any]:
        """序列化为查询 DSL 字典，无子句时返回空字典."""
        query = self.to_query()
        return query.to_dict() if query is not None else {}

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __len__(self) -> int:
        return len(self._clauses)
