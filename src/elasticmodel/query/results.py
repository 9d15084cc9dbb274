"""查询结果数据模型定义模块."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class PagedResponse(Generic[T]):
    """
    分页响应封装.

    Attributes:
        items: 数据项列表
        total: 总文档数
        page: 当前页码（从1开始）
        page_size: 每页大小
        total_pages: 总页数
        has_next: 是否有下一页
        has_prev: 是否有上一页

    示例:
        paged = Article.query(context).order_by("id").page(1, 20)

        for article in paged:
            print(article["title"])

        if paged.has_next:
            print(f"共 {paged.total_pages} 页")
    """

    items: list[T]
    total: int
    page: int
    page_size: int
    total_pages: int = field(init=False)
    has_next: bool = field(init=False)
    has_prev: bool = field(init=False)

    def __post_init__(self) -> None:
        """计算分页相关字段."""
        if self.page_size > 0:
            self.total_pages = math.ceil(self.total / self.page_size)
        else:
            self.total_pages = 0
        self.has_next = self.page < self.total_pages
        self.has_prev = self.page > 1

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict[str, Any]:
        """
        转换为字典格式.

        数据项带有 to_dict 方法时会一并转换.
        """
        return {
            "items": [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self.items
            ],
            "total": self.total,
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }


@dataclass
class BulkErrorItem:
    """批量写入失败项.

    insert 结果中与失败文档位置对应的占位标记，布尔值恒为 False。

    Attributes:
        index_name: 索引名称
        doc_id: 文档ID
        result: ES 返回的 result 字段（如 "noop"），失败时可能为空
        status: HTTP 状态码
        error_type: 错误类型
        error_reason: 错误原因
    """

    index_name: str
    doc_id: str | None
    result: str | None = None
    status: int = 0
    error_type: str | None = None
    error_reason: str | None = None

    def __bool__(self) -> bool:
        return False

    @classmethod
    def from_item(cls, item: dict[str, Any], index_name: str) -> BulkErrorItem:
        """从 bulk 响应的单项结果构建.

        Args:
            item: 单项结果中 action 对应的内容，如 {"_id": "1", "status": 400, "error": {...}}
            index_name: 默认索引名
        """
        error = item.get("error") or {}
        if isinstance(error, str):
            error = {"reason": error}
        return cls(
            index_name=item.get("_index", index_name),
            doc_id=item.get("_id"),
            result=item.get("result"),
            status=item.get("status", 0),
            error_type=error.get("type"),
            error_reason=error.get("reason"),
        )
