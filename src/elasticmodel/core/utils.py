"""
elasticmodel 工具函数模块

提供请求体清理、文档 ID 转换等工具函数
"""

import re
from typing import Any

_NUMERIC_ID = re.compile(r"^-?\d+$")


def compact(data: dict[str, Any]) -> dict[str, Any]:
    """
    移除字典顶层的空值（None、空字典、空列表、空字符串）。

    0 和 False 是有效值，会被保留。

    示例:
        >>> compact({"query": {"match_all": {}}, "sort": [], "highlight": None, "from": 0})
        {'query': {'match_all': {}}, 'from': 0}
    """
    return {
        key: value
        for key, value in data.items()
        if value is not None and not (isinstance(value, (dict, list, tuple, str)) and not value)
    }


def coerce_id(doc_id: Any) -> Any:
    """
    纯数字的文档 ID 转为 int，其余原样返回。

    示例:
        >>> coerce_id("7")
        7
        >>> coerce_id("a7")
        'a7'
    """
    if isinstance(doc_id, str) and _NUMERIC_ID.match(doc_id):
        return int(doc_id)
    return doc_id


def root_field(name: str) -> str:
    """
    取多字段名称的根字段，如 "title.keyword" -> "title"。
    """
    return name.split(".", 1)[0]
