"""查询构建模块.

主要组件:
    - Builder: 链式查询构建器
    - PagedResponse: 分页结果
    - BulkErrorItem: 批量写入失败项
"""

from .builder import Builder
from .results import BulkErrorItem, PagedResponse

__all__ = [
    "Builder",
    "PagedResponse",
    "BulkErrorItem",
]
