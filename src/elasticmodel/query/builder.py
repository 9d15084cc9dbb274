"""查询构建器模块.

Builder 以链式调用累积查询条件、排序、高亮和分页状态，在终结操作
（page / get / count / create / update ...）中组装请求、调用 Elasticsearch
客户端，并将结果映射为模型实例。

使用示例:
    context = QueryContext(client=Elasticsearch("http://localhost:9200"))

    paged = (
        Article.query(context)
        .where("status", 1)
        .where_between("views", [100, 1000])
        .where_match("title", "elasticsearch")
        .select_highlight(["title"])
        .order_by("created_at", "desc")
        .page(page=1, size=20)
    )
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from elastic_transport import ObjectApiResponse
from elasticsearch import ApiError, TransportError

from elasticmodel.core.clauses import BoolQuery, geo_distance_clause, translate
from elasticmodel.core.field_types import build_properties
from elasticmodel.core.operators import Operator
from elasticmodel.core.utils import coerce_id, compact, root_field
from elasticmodel.exceptions import (
    ConfigurationError,
    LogicError,
    UnsupportedOperatorError,
    ValidationError,
)
from elasticmodel.geo.models import GeoDistanceUnit, GeoPoint
from elasticmodel.pagination.cursor import MATCH_ALL, PaginationCursor
from elasticmodel.query.results import BulkErrorItem, PagedResponse

if TYPE_CHECKING:
    from elasticmodel.context import QueryContext
    from elasticmodel.model.base import Model

# 模块级别日志记录器
logger = logging.getLogger(__name__)

ALL_FIELDS = ("*",)

# create 时从文档中分离的元数据字段
METADATA_FIELDS = ("id", "routing", "timestamp")

# 默认索引分片数
DEFAULT_NUMBER_OF_SHARDS = 3

_UNSET: Any = object()


class Builder:
    """
    ES 查询构建器.

    一个构建器在生命周期内只绑定一个模型，状态不在线程间共享。

    Attributes:
        query: bool 查询累加器
        sort: 排序子句列表
        highlight: 高亮配置，空字典表示不高亮
        search_after: 深度分页时上一页最后一条记录的 sort 值
        last_request: 最近一次发送的请求（方法名与参数），便于排查
    """

    def __init__(self, context: QueryContext):
        """
        初始化构建器.

        Args:
            context: 查询上下文（ES 客户端、游标缓存、日志记录器）
        """
        self.client = context.client
        self.logger = context.logger or logger
        self._cursor = PaginationCursor(context.cache, context.cache_prefix)

        self.model: Model | None = None
        self.query = BoolQuery()
        self.sort: list[dict[str, Any]] = []
        self.highlight: dict[str, Any] = {}
        self.search_after: list[Any] = []
        self._take: int = 0
        self.last_request: dict[str, Any] = {}

    def set_model(self, model: Model) -> Builder:
        """
        绑定模型并重置查询状态.

        Args:
            model: 文档模型

        Returns:
            self，支持链式调用
        """
        self.model = model
        self.query = BoolQuery()
        self.sort = []
        self.highlight = {}
        self.search_after = []
        self._take = 0
        return self

    def _require_model(self) -> Model:
        if self.model is None:
            raise ConfigurationError("查询构建器未绑定模型，请先调用 set_model()")
        return self.model

    # ============================================================
    # 查询条件
    # ============================================================

    def where(
        self, field: str, operator: str | Operator, value: Any = _UNSET
    ) -> Builder:
        """
        条件查询.

        只传两个参数时按等于处理: where("status", 1) 等价于 where("status", "=", 1)。
        不支持的操作符会记录错误日志并忽略该条件。

        Args:
            field: 字段名
            operator: 操作符，见 Operator
            value: 条件值

        Returns:
            self，支持链式调用

        Raises:
            ValidationError: between / not_between 缺少起止值
        """
        if value is _UNSET:
            operator, value = Operator.EQUAL, operator
        try:
            self._add(field, operator, value)
        except UnsupportedOperatorError as e:
            self.logger.error(str(e))
        return self

    def _add(
        self,
        field: str | Sequence[str],
        operator: str | Operator,
        value: Any,
        options: dict[str, Any] | None = None,
    ) -> Builder:
        bucket, clause = translate(field, operator, value, options)
        self.query.add(bucket, clause)
        return self

    def where_exists_field(self, field: str) -> Builder:
        """字段存在."""
        return self._add(field, Operator.EXISTS, None)

    def where_not_exists_field(self, field: str) -> Builder:
        """字段不存在."""
        return self._add(field, Operator.NOT_EXISTS, None)

    def where_in(self, field: str, value: Sequence[Any]) -> Builder:
        """字段值在给定集合中（terms）."""
        return self._add(field, Operator.IN, value)

    def where_not_in(self, field: str, value: Sequence[Any]) -> Builder:
        """字段值不在给定集合中."""
        return self._add(field, Operator.NOT_IN, value)

    def where_between(self, field: str, value: Sequence[Any]) -> Builder:
        """范围查询，包含起止值."""
        return self._add(field, Operator.BETWEEN, value)

    def where_not_between(self, field: str, value: Sequence[Any]) -> Builder:
        """不在范围内."""
        return self._add(field, Operator.NOT_BETWEEN, value)

    def where_match(self, field: str, value: Any) -> Builder:
        """必须匹配（全文检索）."""
        return self._add(field, Operator.MATCH, value)

    def where_should_match(self, field: str, value: Any) -> Builder:
        """应该匹配."""
        return self._add(field, Operator.SHOULD_MATCH, value)

    def where_not_match(self, field: str, value: Any) -> Builder:
        """不能匹配."""
        return self._add(field, Operator.NOT_MATCH, value)

    def where_multi_match(self, fields: Sequence[str], value: Any) -> Builder:
        """多字段匹配."""
        return self._add(fields, Operator.MULTI_MATCH, value)

    def where_match_phrase(self, field: str, value: Any, slop: int = 100) -> Builder:
        """必须匹配短语."""
        return self._add(field, Operator.MATCH_PHRASE, value, {"slop": slop})

    def where_should_match_phrase(
        self, field: str, value: Any, slop: int = 100
    ) -> Builder:
        """应该匹配短语."""
        return self._add(field, Operator.SHOULD_MATCH_PHRASE, value, {"slop": slop})

    def where_not_match_phrase(
        self, field: str, value: Any, slop: int = 100
    ) -> Builder:
        """不能匹配短语."""
        return self._add(field, Operator.NOT_MATCH_PHRASE, value, {"slop": slop})

    def where_term(self, field: str, value: Any) -> Builder:
        """
        精确匹配.

        Args:
            field: 字段名，text 类型字段需使用 field.raw
            value: 条件值
        """
        return self._add(field, Operator.TERM, value)

    def where_not_term(self, field: str, value: Any) -> Builder:
        """精确不匹配."""
        return self._add(field, Operator.NOT_TERM, value)

    def where_regex(self, field: str, value: str) -> Builder:
        """正则匹配."""
        return self._add(field, Operator.REGEX, value)

    def where_prefix(self, field: str, value: Any) -> Builder:
        """前缀匹配."""
        return self._add(field, Operator.PREFIX, value)

    def where_not_prefix(self, field: str, value: Any) -> Builder:
        """前缀不匹配."""
        return self._add(field, Operator.NOT_PREFIX, value)

    def where_wildcard(self, field: str, value: str) -> Builder:
        """通配符匹配，支持 * 和 ?."""
        return self._add(field, Operator.WILDCARD, value)

    def where_filter_distance(
        self,
        field: str,
        longitude: float,
        latitude: float,
        distance: str = "50km",
    ) -> Builder:
        """
        地理距离过滤，保留距离给定坐标 distance 范围内的文档.

        Args:
            field: geo_point 字段名
            longitude: 经度
            latitude: 纬度
            distance: 距离范围，如 "50km"、"500m"

        Returns:
            self，支持链式调用
        """
        self.query.add(*geo_distance_clause(field, longitude, latitude, distance))
        return self

    # ============================================================
    # 排序 / 高亮 / 数量
    # ============================================================

    def order_by(self, field: str, direction: str = "asc", mode: str = "min") -> Builder:
        """
        排序.

        Args:
            field: 字段名，text 类型字段可使用 field.raw
            direction: asc 或 desc
            mode: 数组字段取值方式 min / max / sum / avg / median

        Returns:
            self，支持链式调用
        """
        self.sort.append(
            {field: {"order": _direction(direction), "mode": mode}}
        )
        return self

    def order_by_distance(
        self,
        field: str,
        longitude: float,
        latitude: float,
        direction: str = "asc",
        unit: str = "km",
        mode: str = "min",
    ) -> Builder:
        """
        按与给定坐标的距离排序.

        Args:
            field: geo_point 字段名
            longitude: 经度
            latitude: 纬度
            direction: asc 或 desc
            unit: 距离单位 m / km / mi / yd
            mode: 多个坐标时的取值方式

        Returns:
            self，支持链式调用
        """
        point = GeoPoint(lat=latitude, lon=longitude)
        self.sort.append(
            {
                "_geo_distance": {
                    field: point.to_es_format(),
                    "order": _direction(direction),
                    "unit": GeoDistanceUnit.parse(unit).value,
                    "mode": mode,
                    "distance_type": "arc",
                    # 字段未映射时不报错
                    "ignore_unmapped": True,
                }
            }
        )
        return self

    def select_highlight(
        self,
        fields: Sequence[str],
        pre_tags: Sequence[str] = ("<em>",),
        post_tags: Sequence[str] = ("</em>",),
    ) -> Builder:
        """
        搜索结果高亮.

        Args:
            fields: 高亮字段列表，为空时不做处理
            pre_tags: 高亮前置标签
            post_tags: 高亮后置标签

        Returns:
            self，支持链式调用
        """
        if not fields:
            return self
        self.highlight = {
            "pre_tags": list(pre_tags),
            "post_tags": list(post_tags),
            "fields": [{field: {}} for field in fields],
        }
        return self

    def take(self, take: int) -> Builder:
        """限制返回条数，大于 0 时覆盖 get() 的 size."""
        self._take = take
        return self

    def clear(self) -> Builder:
        """清空所有查询参数."""
        self.query.clear()
        self.sort = []
        self.highlight = {}
        self.search_after = []
        self._take = 0
        return self

    def to_dict(self) -> dict[str, Any]:
        """
        导出当前查询条件.

        Returns:
            字典格式的查询 DSL，无条件时为 match_all
        """
        return self.query.to_dict() or dict(MATCH_ALL)

    # ============================================================
    # 查询
    # ============================================================

    def page(
        self,
        page: int = 1,
        size: int = 50,
        fields: Sequence[str] = ALL_FIELDS,
        deep: bool = False,
    ) -> PagedResponse[Model]:
        """
        分页查询.

        Args:
            page: 页码，从 1 开始
            size: 每页大小
            fields: 返回字段
            deep: 是否使用 search_after 深度分页，需配合 order_by 使用；
                上一页最后一条记录的 sort 值保存在缓存中

        Returns:
            分页结果

        Raises:
            ValidationError: page / size 不合法
            LogicError: 深度分页未设置排序，或 ES 返回 404 以外的错误
        """
        model = self._require_model()
        if page < 1 or size < 1:
            raise ValidationError(f"page 必须 >= 1 且 size 必须 >= 1，当前值: page={page}, size={size}")
        fields = list(fields)

        from_ = 0
        cache_key = None
        if deep:
            if not self.sort:
                raise LogicError(
                    "page method deep attribute must be used in conjunction with orderBy, "
                    "which needs to be used in conjunction with a set of sorted values "
                    "from the previous page.",
                    400,
                )
            cache_key = self.get_cache_key(size)
            self.search_after = (self._cursor.load(cache_key) or []) if page > 1 else []
        else:
            from_ = (page - 1) * size

        body = self._search_body(
            fields,
            **{
                "from": from_,
                "size": size,
                "search_after": self.search_after if deep else None,
            },
        )
        result = self._call(
            "search",
            index=model.get_index(),
            version=True,
            seq_no_primary_term=True,
            body=body,
        )
        hits, total = _extract_hits(result)

        if deep and hits:
            self._cursor.save(cache_key, hits[-1].get("sort"))

        return PagedResponse(
            items=self._map_hits(hits, fields),
            total=total,
            page=page,
            page_size=size,
        )

    def get(
        self, fields: Sequence[str] = ALL_FIELDS, size: int = 50
    ) -> list[Model] | None:
        """
        查询文档列表.

        Args:
            fields: 返回字段
            size: 返回条数，take() 设置的值优先

        Returns:
            模型列表；索引不存在（404）时返回 None

        Raises:
            LogicError: ES 返回 404 以外的错误
        """
        model = self._require_model()
        fields = list(fields)
        body = self._search_body(
            fields, **{"from": 0, "size": self._take if self._take > 0 else size}
        )
        result = self._call(
            "search",
            index=model.get_index(),
            version=True,
            seq_no_primary_term=True,
            body=body,
        )
        if result is None:
            return None
        hits, _ = _extract_hits(result)
        return self._map_hits(hits, fields)

    def first(self, fields: Sequence[str] = ALL_FIELDS) -> Model | None:
        """返回第一条文档，不存在时返回 None."""
        items = self.take(1).get(fields)
        return items[0] if items else None

    def find(self, id: str | int) -> Model | None:
        """
        按 ID 查找单条文档.

        找到时替换绑定模型的 attributes / original 并返回该模型。

        Args:
            id: 文档 ID

        Returns:
            模型，不存在时返回 None
        """
        model = self._require_model()
        result = self._call("get", index=model.get_index(), id=id)
        if result is None:
            return None

        attributes = dict(result.get("_source") or {})
        doc_id = result.get("_id")
        if attributes and doc_id:
            attributes["id"] = coerce_id(doc_id)
        model.set_attributes(attributes)
        model.set_original(result)
        return model

    def count(self) -> int:
        """匹配的文档数，索引不存在时为 0."""
        model = self._require_model()
        result = self._call(
            "count",
            index=model.get_index(),
            body=compact({"query": self.to_dict()}),
        )
        return int((result or {}).get("count", 0))

    def exists(self) -> bool:
        """
        根据查询条件检查是否存在数据.

        Raises:
            LogicError: 没有设置查询条件
        """
        self._require_model()
        if self.query.is_empty():
            raise LogicError("Missing query criteria.", 400)
        return self.count() > 0

    # ============================================================
    # 写入
    # ============================================================

    def increment(self, field: str, count: int = 1) -> bool:
        """按查询条件递增字段值."""
        result = self.update_by_query_script(
            f"ctx._source.{field} += params.count", {"count": count}
        )
        return _affected(result, "updated")

    def decrement(self, field: str, count: int = 1) -> bool:
        """按查询条件递减字段值."""
        result = self.update_by_query_script(
            f"ctx._source.{field} -= params.count", {"count": count}
        )
        return _affected(result, "updated")

    def update(self, values: Mapping[str, Any]) -> bool:
        """
        按查询条件更新字段.

        Args:
            values: {字段名: 新值}

        Returns:
            是否有文档被更新

        Raises:
            LogicError: 没有设置查询条件
            ValidationError: 数据为空或不是以字段名为键的字典
        """
        self._require_model()
        if self.query.is_empty():
            raise LogicError("Missing query criteria.", 400)
        if (
            not values
            or not isinstance(values, Mapping)
            or any(not isinstance(key, str) or key.isdigit() for key in values)
        ):
            raise ValidationError(
                "Data cannot be empty and can only be non-numeric subscripts."
            )

        script = "".join(f"ctx._source.{field} = params.{field};" for field in values)
        result = self.update_by_query_script(script, dict(values))
        return _affected(result, "updated")

    def update_by_query_script(
        self, script: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """
        执行 painless 脚本按查询更新.

        Args:
            script: 脚本内容
            params: 脚本参数

        Returns:
            ES 响应，索引不存在时返回 None
        """
        model = self._require_model()
        body = compact(
            {
                "script": {
                    "source": script,
                    "lang": "painless",
                    "params": params or {},
                },
                "query": self.query.to_dict(),
            }
        )
        return self._call("update_by_query", index=model.get_index(), body=body)

    def delete(self) -> bool:
        """
        按查询条件删除文档.

        Returns:
            是否有文档被删除；没有匹配文档时返回 False

        Raises:
            LogicError: 没有设置查询条件或 ES 返回错误
        """
        model = self._require_model()
        if self.query.is_empty():
            raise LogicError("Missing query criteria.", 400)

        try:
            result = self._run(
                "delete_by_query",
                index=model.get_index(),
                # 版本冲突时继续执行，默认值为 abort
                conflicts="proceed",
                refresh=True,
                slices=5,
                body={"query": self.query.to_dict()},
            )
        except ApiError as e:
            if e.status_code == 404 or "but no document was found" in str(e):
                self.logger.warning(f"按条件删除未找到文档: index={model.get_index()}")
                return False
            raise LogicError(_error_message(e), e.status_code) from e
        except TransportError as e:
            raise LogicError(str(e)) from e
        return _affected(result, "deleted")

    def insert(self, values: Sequence[Mapping[str, Any]]) -> list[Model | BulkErrorItem]:
        """
        批量写入文档.

        文档包含 id 时作为文档 ID，重复写入相同 ID 会更新而不是新增。

        Args:
            values: 文档列表

        Returns:
            与输入位置一一对应的结果：成功为模型，失败为 BulkErrorItem
        """
        model = self._require_model()
        index = model.get_index()
        if not values:
            return []

        operations: list[dict[str, Any]] = []
        for value in values:
            operations.append({"index": compact({"_index": index, "_id": value.get("id")})})
            operations.append(dict(value))

        result = self._call("bulk", operations=operations) or {}
        items = result.get("items", [])

        outcome: list[Model | BulkErrorItem] = []
        for position, value in enumerate(values):
            item = items[position] if position < len(items) else {}
            action = item.get("index", {})
            if action.get("result") in ("created", "updated"):
                instance = model.new_instance()
                instance.set_attributes({**value, "id": coerce_id(action.get("_id"))})
                instance.set_original(item)
                outcome.append(instance)
            else:
                outcome.append(BulkErrorItem.from_item(action, index))

        failed = sum(1 for entry in outcome if isinstance(entry, BulkErrorItem))
        if failed:
            self.logger.warning(f"批量写入部分失败: index={index}, 成功 {len(outcome) - failed}, 失败 {failed}")
        return outcome

    def create(self, value: Mapping[str, Any]) -> Model:
        """
        创建文档.

        id / routing / timestamp 作为元数据从文档中分离，id 与 routing 作为请求参数发送。

        Args:
            value: 文档数据

        Returns:
            绑定的模型；创建成功时 attributes 为文档数据加上 id

        Raises:
            LogicError: ES 返回 404 以外的错误或网络异常
        """
        model = self._require_model()
        index = model.get_index()
        body = {key: val for key, val in value.items() if key not in METADATA_FIELDS}
        params: dict[str, Any] = {"index": index, "document": body}
        for key in ("id", "routing"):
            if value.get(key) is not None:
                params[key] = value[key]

        try:
            result = self._run("index", **params)
        except ApiError as e:
            if e.status_code == 404:
                self.logger.error(f"ES 创建文档失败（404），已忽略: {_error_message(e)}, index: {index}")
                return model
            if e.status_code < 500:
                self.logger.error(f"ES 创建文档客户端错误: {_error_message(e)}, index: {index}")
            else:
                self.logger.error(f"ES 创建文档服务端错误: {_error_message(e)}, index: {index}")
            raise LogicError(_error_message(e), e.status_code) from e
        except TransportError as e:
            self.logger.error(f"ES 创建文档异常: {e}, index: {index}")
            raise LogicError(str(e)) from e

        if result.get("result") == "created":
            model.set_original(result)
            model.set_attributes({**body, "id": coerce_id(result.get("_id", ""))})
        return model

    def update_by_id(self, value: Mapping[str, Any], id: str | int) -> str | int | bool:
        """
        按 ID 局部更新文档.

        Returns:
            更新成功（含 noop）时返回文档 ID，否则返回 False
        """
        model = self._require_model()
        try:
            result = self._run("update", index=model.get_index(), id=id, doc=dict(value))
        except ApiError as e:
            if e.status_code < 500:
                self.logger.warning(f"按 ID 更新文档失败: id={id}, error={_error_message(e)}")
                return False
            raise LogicError(_error_message(e), e.status_code) from e
        except TransportError as e:
            raise LogicError(str(e)) from e

        if result.get("result") in ("updated", "noop") and result.get("_id") is not None:
            return coerce_id(result["_id"])
        return False

    def delete_by_id(self, id: str | int) -> bool:
        """按 ID 删除文档，文档不存在时返回 False."""
        model = self._require_model()
        result = self._call("delete", index=model.get_index(), id=id)
        return bool(result) and result.get("result") == "deleted"

    # ============================================================
    # 索引管理
    # ============================================================

    def update_index_mapping(self, mappings: Mapping[str, Any]) -> bool:
        """
        更新索引映射.

        Args:
            mappings: {字段名: ES 类型名或完整映射配置}，如 {"tags": "keyword"}

        Returns:
            是否被确认
        """
        model = self._require_model()
        properties = compact(
            {field: _normalize_mapping(value) for field, value in mappings.items()}
        )
        result = self._call(
            "indices.put_mapping", index=model.get_index(), properties=properties
        )
        return _acknowledged(result)

    def update_index_setting(self, settings: Mapping[str, Any]) -> bool:
        """更新索引设置."""
        model = self._require_model()
        result = self._call(
            "indices.put_settings", index=model.get_index(), settings=dict(settings)
        )
        return _acknowledged(result)

    def exists_index(self) -> bool:
        """索引是否存在."""
        model = self._require_model()
        response = self._call("indices.exists", index=model.get_index())
        return _status_code(response) == 200

    def create_index(
        self,
        mappings: Mapping[str, Any] | None = None,
        settings: Mapping[str, Any] | None = None,
    ) -> bool:
        """
        创建索引.

        mapping 由模型 casts 推导，并与调用方提供的 mappings 合并（调用方优先）。

        Args:
            mappings: {字段名: 源字段类型或完整映射配置}
            settings: 索引设置，默认 number_of_shards=3

        Returns:
            是否创建成功；索引已存在或客户端错误时返回 False
        """
        model = self._require_model()
        properties = build_properties(model.get_casts(), dict(mappings or {}))

        if self.exists_index():
            return False

        index_settings = {"number_of_shards": DEFAULT_NUMBER_OF_SHARDS, **(settings or {})}
        index_mappings = compact({"_source": {"enabled": True}, "properties": properties})
        try:
            result = self._run(
                "indices.create",
                index=model.get_index(),
                settings=index_settings,
                mappings=index_mappings,
            )
        except ApiError as e:
            if e.status_code < 500:
                self.logger.warning(f"创建索引失败: index={model.get_index()}, error={_error_message(e)}")
                return False
            raise LogicError(_error_message(e), e.status_code) from e
        except TransportError as e:
            raise LogicError(str(e)) from e
        return _acknowledged(result)

    def delete_index(self) -> bool:
        """删除索引."""
        model = self._require_model()
        result = self._call("indices.delete", index=model.get_index())
        return _acknowledged(result)

    # ============================================================
    # 深度分页游标
    # ============================================================

    def get_cache_key(self, size: int) -> str:
        """获取完整查询的游标缓存键（带前缀）."""
        model = self._require_model()
        return self._cursor.key_for(self.query.to_dict(), model.get_index(), size)

    def generate_cache_key(self, size: int) -> str:
        """为查询生成唯一标识（不带前缀）."""
        model = self._require_model()
        return self._cursor.signature(self.query.to_dict(), model.get_index(), size)

    # ============================================================
    # 内部方法
    # ============================================================

    def _search_body(self, fields: list[str], **extra: Any) -> dict[str, Any]:
        """组装 search 请求体，移除空值."""
        return compact(
            {
                "_source": {"includes": fields},
                "query": self.to_dict(),
                "highlight": self.highlight,
                "sort": self.sort,
                **extra,
            }
        )

    def _map_hits(self, hits: list[dict[str, Any]], fields: list[str]) -> list[Model]:
        """将命中结果映射为模型实例."""
        model = self._require_model()
        with_id = fields == list(ALL_FIELDS) or "id" in fields

        items = []
        for hit in hits:
            attributes = dict(hit.get("_source") or {})
            if attributes and with_id:
                attributes["id"] = coerce_id(hit.get("_id"))
            # 高亮结果覆盖原字段，多字段名取根字段
            for name, fragments in (hit.get("highlight") or {}).items():
                if fragments:
                    attributes[root_field(name)] = fragments[0]

            instance = model.new_instance()
            instance.set_attributes(attributes)
            instance.set_original(hit)
            items.append(instance)
        return items

    def _run(self, method: str, **params: Any) -> Any:
        """
        统一执行 ES 请求入口.

        method 含点号时先取子客户端，如 "indices.create"。

        Args:
            method: 客户端方法名
            **params: 请求参数

        Returns:
            响应体字典；HEAD 类请求返回原始响应
        """
        target = self.client
        name = method
        if "." in method:
            namespace, name = method.split(".", 1)
            target = getattr(self.client, namespace)

        self.last_request = {"method": method, "params": params}
        self.logger.info(
            json.dumps(self.last_request, ensure_ascii=False, default=str)
        )

        response = getattr(target, name)(**params)
        if isinstance(response, ObjectApiResponse):
            return response.body
        return response

    def _call(self, method: str, **params: Any) -> Any:
        """
        执行请求，404 时返回 None，其余上游错误转换为 LogicError.

        Raises:
            LogicError: ES 返回 404 以外的错误或网络异常
        """
        try:
            return self._run(method, **params)
        except ApiError as e:
            if e.status_code == 404:
                self.logger.warning(f"ES 请求返回 404: method={method}, error={_error_message(e)}")
                return None
            raise LogicError(_error_message(e), e.status_code) from e
        except TransportError as e:
            raise LogicError(str(e)) from e


def _direction(direction: str) -> str:
    return "asc" if direction.lower() == "asc" else "desc"


def _normalize_mapping(value: Any) -> dict[str, Any]:
    """类型名转为 {"type": 类型名}，映射配置原样保留."""
    if isinstance(value, str):
        return {"type": value}
    if isinstance(value, Mapping):
        return dict(value)
    return {}


def _extract_hits(result: dict[str, Any] | None) -> tuple[list[dict[str, Any]], int]:
    """提取命中列表和总数."""
    hits = (result or {}).get("hits") or {}
    total = hits.get("total", 0)
    if isinstance(total, Mapping):
        total = total.get("value", 0)
    return list(hits.get("hits") or []), int(total or 0)


def _affected(result: dict[str, Any] | None, key: str) -> bool:
    return bool(result) and int(result.get(key) or 0) > 0


def _acknowledged(result: Any) -> bool:
    return bool(result) and bool(result.get("acknowledged", False))


def _status_code(response: Any) -> int | None:
    """HEAD 类请求的 HTTP 状态码."""
    if response is None:
        return None
    if isinstance(response, bool):
        return 200 if response else 404
    meta = getattr(response, "meta", None)
    return getattr(meta, "status", None)


def _error_message(error: ApiError) -> str:
    return str(error.message) if error.message else str(error)
