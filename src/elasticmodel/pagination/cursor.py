"""深度分页游标模块.

search_after 分页需要上一页最后一条记录的 sort 值。该模块按
(查询条件, 索引名, 每页大小) 生成缓存键，并读写对应的 sort 值。

游标是尽力而为的缓存项（后写覆盖），共享相同查询签名的并发分页会互相覆盖，
需要隔离时应使用不同的缓存前缀。
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any

from elasticmodel.pagination.cache import CacheStore

logger = logging.getLogger(__name__)

MATCH_ALL: dict[str, Any] = {"match_all": {}}


class PaginationCursor:
    """search_after 游标读写.

    Args:
        cache: 缓存存储
        prefix: 缓存键前缀

    Examples:
        >>> cursor = PaginationCursor(MemoryCache(), prefix="app")
        >>> key = cursor.key_for({}, "articles", 20)
        >>> cursor.save(key, [1700000000, "42"])
        >>> cursor.load(key)
        [1700000000, '42']
    """

    def __init__(self, cache: CacheStore, prefix: str = ""):
        self.cache = cache
        self.prefix = prefix

    @staticmethod
    def signature(query: dict[str, Any], index: str, size: int) -> str:
        """为查询生成唯一标识.

        Args:
            query: 查询 DSL，为空时按 match_all 计算
            index: 索引名
            size: 每页大小

        Returns:
            md5 十六进制字符串
        """
        serialized = json.dumps(
            query or MATCH_ALL, sort_keys=True, ensure_ascii=False, default=str
        )
        return hashlib.md5(f"{serialized}{index}{size}".encode("utf-8")).hexdigest()

    def key_for(self, query: dict[str, Any], index: str, size: int) -> str:
        """生成带前缀的缓存键."""
        return f"{self.prefix}:{self.signature(query, index, size)}"

    def load(self, key: str) -> list[Any] | None:
        """读取上一页最后一条记录的 sort 值，不存在时返回 None."""
        raw = self.cache.get(key)
        if not raw:
            return None
        try:
            values = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"分页游标无法解析，已忽略: key={key}, value={raw!r}")
            return None
        return values if isinstance(values, list) and values else None

    def save(self, key: str, sort_values: list[Any] | None) -> None:
        """写入 sort 值，空值不写入."""
        if not sort_values:
            return
        self.cache.set(key, json.dumps(list(sort_values), ensure_ascii=False))
