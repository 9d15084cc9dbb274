"""文档模型模块.

Model 表示绑定到单个索引的一类文档，声明索引名和字段类型（casts），
查询通过 new_query() / query() 得到的 Builder 完成。

使用示例:
    class Article(Model):
        index = "articles"
        casts = {
            "title": FieldType.VARCHAR,
            "views": FieldType.INT,
            "created_at": FieldType.DATETIME,
        }

    context = QueryContext(client=Elasticsearch("http://localhost:9200"))
    articles = Article.query(context).where_match("title", "elasticsearch").get()
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from elasticmodel.core.field_types import FieldType
from elasticmodel.exceptions import ConfigurationError

if TYPE_CHECKING:
    from elasticmodel.context import QueryContext
    from elasticmodel.query.builder import Builder


class QueryableModel(ABC):
    """可查询模型接口."""

    @abstractmethod
    def new_query(self) -> Builder:
        """创建绑定到当前模型的查询构建器."""
        pass


class Model(QueryableModel):
    """文档模型基类.

    Attributes:
        index: 索引名，由子类声明
        casts: 字段名 -> 源字段类型，用于生成索引 mapping
        connection: 连接分组名
    """

    index: ClassVar[str] = ""
    casts: ClassVar[dict[str, str | FieldType]] = {}
    connection: ClassVar[str] = "default"

    def __init__(
        self,
        context: QueryContext | None = None,
        attributes: dict[str, Any] | None = None,
    ):
        self.context = context
        self._attributes: dict[str, Any] = dict(attributes or {})
        self._original: dict[str, Any] = {}

    # ============================================================
    # 查询入口
    # ============================================================

    @classmethod
    def query(cls, context: QueryContext) -> Builder:
        """创建新的模型实例并返回其查询构建器."""
        return cls(context).new_query()

    def new_query(self) -> Builder:
        from elasticmodel.query.builder import Builder

        if self.context is None:
            raise ConfigurationError(
                f"{type(self).__name__} 未设置 QueryContext，无法创建查询构建器"
            )
        return Builder(self.context).set_model(self)

    def new_instance(self) -> Model:
        """创建同类型、共享上下文的新实例."""
        return type(self)(self.context)

    # ============================================================
    # 索引与字段类型
    # ============================================================

    def get_index(self) -> str:
        if not self.index:
            raise ConfigurationError(f"{type(self).__name__} 未声明 index")
        return self.index

    def get_casts(self) -> dict[str, str | FieldType]:
        return dict(self.casts)

    @staticmethod
    def get_cast_types() -> dict[str, str]:
        """源字段类型 -> ES 字段类型映射表."""
        return FieldType.search_types()

    # ============================================================
    # 属性
    # ============================================================

    @property
    def attributes(self) -> dict[str, Any]:
        return self._attributes

    @property
    def original(self) -> dict[str, Any]:
        return self._original

    def get_attributes(self) -> dict[str, Any]:
        return self._attributes

    def set_attributes(self, attributes: dict[str, Any]) -> None:
        self._attributes = dict(attributes)

    def get_original(self) -> dict[str, Any]:
        return self._original

    def set_original(self, original: dict[str, Any]) -> None:
        self._original = dict(original)

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.index == other.index
            and self._attributes == other._attributes
        )

    __hash__ = None  # type: ignore[assignment]

    # ============================================================
    # 序列化
    # ============================================================

    def to_dict(self) -> dict[str, Any]:
        return dict(self._attributes)

    def to_json(self, **kwargs: Any) -> str:
        kwargs.setdefault("ensure_ascii", False)
        return json.dumps(self.to_dict(), default=str, **kwargs)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"
