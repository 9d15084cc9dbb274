"""深度分页模块 - search_after 游标的缓存与读写.

主要组件:
    - CacheStore: 缓存存储抽象接口
    - MemoryCache: 进程内缓存实现
    - PaginationCursor: 游标读写
"""

from .cache import CacheStore, MemoryCache
from .cursor import PaginationCursor

__all__ = [
    "CacheStore",
    "MemoryCache",
    "PaginationCursor",
]
