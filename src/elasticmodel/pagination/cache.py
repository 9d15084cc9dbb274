"""分页游标缓存模块."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from typing import Any


class CacheStore(ABC):
    """缓存存储抽象基类.

    深度分页的 search_after 游标通过该接口读写，可对接 Redis 等外部缓存。
    实现需保证多个调用方并发使用时的安全性。
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """
        读取缓存.

        Args:
            key: 缓存键

        Returns:
            缓存值，不存在时返回 None
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """
        写入缓存.

        Args:
            key: 缓存键
            value: 缓存值
        """
        pass


class MemoryCache(CacheStore):
    """进程内缓存.

    Args:
        ttl: 过期时间（秒），None 表示不过期（条目数量不受限制）；
            设置后每次写入会清理已过期的条目
    """

    def __init__(self, ttl: float | None = None):
        self.ttl = ttl
        self._data: dict[str, tuple[Any, float | None]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and expires_at <= time.monotonic():
                del self._data[key]
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        now = time.monotonic()
        expires_at = now + self.ttl if self.ttl is not None else None
        with self._lock:
            if self.ttl is not None:
                self._purge(now)
            self._data[key] = (value, expires_at)

    def _purge(self, now: float) -> None:
        """移除已过期的条目，调用方需持有锁."""
        expired = [
            key
            for key, (_, expires_at) in self._data.items()
            if expires_at is not None and expires_at <= now
        ]
        for key in expired:
            del self._data[key]

    def clear(self) -> None:
        """清空缓存."""
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
