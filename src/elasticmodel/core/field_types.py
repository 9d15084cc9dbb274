"""字段类型映射模块.

将数据库（MySQL）字段类型映射为 Elasticsearch 字段类型，并生成索引 mapping 配置。

使用示例:
    >>> FieldType.VARCHAR.search_type
    'text'
    >>> convert_field_type("bigint")
    {'type': 'long'}
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any

from elasticmodel.exceptions import ValidationError

# 中文分词器
DEFAULT_ANALYZER = "ik_max_word"
DEFAULT_SEARCH_ANALYZER = "ik_smart"

# 日期字段接受的格式
DATE_FORMATS = (
    "yyyy-MM-dd HH:mm:ss",
    "yyyy-MM-dd",
    "yyyy/MM/dd HH:mm:ss",
    "yyyy/MM/dd",
    "epoch_millis",
    "epoch_second",
)

# 文本字段的多字段配置
TEXT_SUB_FIELDS: dict[str, dict[str, str]] = {
    "raw": {"type": "keyword"},
    "keyword": {"type": "text", "analyzer": "keyword"},
    "english": {"type": "text", "analyzer": "english"},
    "standard": {"type": "text", "analyzer": "standard"},
    "smart": {"type": "text", "analyzer": DEFAULT_SEARCH_ANALYZER},
}


class FieldType(str, Enum):
    """源字段类型（MySQL 列类型）."""

    INT = "int"
    INT_UNSIGNED = "int_unsigned"
    VARCHAR = "varchar"
    DECIMAL = "decimal"
    DECIMAL_UNSIGNED = "decimal_unsigned"
    TINYINT = "tinyint"
    TINYINT_UNSIGNED = "tinyint_unsigned"
    MEDIUMINT = "mediumint"
    MEDIUMINT_UNSIGNED = "mediumint_unsigned"
    SMALLINT = "smallint"
    SMALLINT_UNSIGNED = "smallint_unsigned"
    BIGINT = "bigint"
    BIGINT_UNSIGNED = "bigint_unsigned"
    DOUBLE = "double"
    DOUBLE_UNSIGNED = "double_unsigned"
    FLOAT = "float"
    FLOAT_UNSIGNED = "float_unsigned"
    CHAR = "char"
    LONGTEXT = "longtext"
    MEDIUMTEXT = "mediumtext"
    TINYTEXT = "tinytext"
    DATE = "date"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    YEAR = "year"
    TEXT = "text"
    JSON = "json"
    POINT = "point"  # 经纬度
    # 不常用
    BLOB = "blob"
    BINARY = "binary"
    BIT = "bit"
    REAL = "real"
    GEOMETRY = "geometry"
    LINESTRING = "linestring"
    POLYGON = "polygon"
    MULTIPOINT = "multipoint"
    MULTILINESTRING = "multilinestring"
    MULTIPOLYGON = "multipolygon"
    GEOMETRYCOLLECTION = "geometrycollection"

    @property
    def search_type(self) -> str:
        """对应的 Elasticsearch 字段类型."""
        return _SEARCH_TYPES[self]

    @classmethod
    def search_types(cls) -> dict[str, str]:
        """返回 {源类型名: ES 类型} 映射表."""
        return {member.value: member.search_type for member in cls}

    @classmethod
    def parse(cls, value: str | FieldType) -> FieldType:
        """解析字段类型.

        Args:
            value: 类型名或 FieldType

        Returns:
            FieldType

        Raises:
            ValidationError: 不支持的类型
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValidationError(f"不支持的字段类型: {value}") from None


_SEARCH_TYPES: dict[FieldType, str] = {
    FieldType.INT: "integer",
    FieldType.INT_UNSIGNED: "long",
    FieldType.VARCHAR: "text",
    FieldType.DECIMAL: "double",
    FieldType.DECIMAL_UNSIGNED: "double",
    FieldType.TINYINT: "short",
    FieldType.TINYINT_UNSIGNED: "integer",
    FieldType.MEDIUMINT: "integer",
    FieldType.MEDIUMINT_UNSIGNED: "integer",
    FieldType.SMALLINT: "short",
    FieldType.SMALLINT_UNSIGNED: "integer",
    FieldType.BIGINT: "long",
    FieldType.BIGINT_UNSIGNED: "long",
    FieldType.DOUBLE: "double",
    FieldType.DOUBLE_UNSIGNED: "double",
    FieldType.FLOAT: "float",
    FieldType.FLOAT_UNSIGNED: "float",
    FieldType.CHAR: "text",
    FieldType.LONGTEXT: "text",
    FieldType.MEDIUMTEXT: "text",
    FieldType.TINYTEXT: "text",
    FieldType.DATE: "date",
    FieldType.DATETIME: "date",
    FieldType.TIMESTAMP: "date",
    FieldType.TIME: "date",
    FieldType.YEAR: "date",
    FieldType.TEXT: "text",
    FieldType.JSON: "object",
    FieldType.POINT: "geo_point",
    FieldType.BLOB: "binary",
    FieldType.BINARY: "binary",
    FieldType.BIT: "long",
    FieldType.REAL: "double",
    FieldType.GEOMETRY: "geo_shape",
    FieldType.LINESTRING: "geo_shape",
    FieldType.POLYGON: "geo_shape",
    FieldType.MULTIPOINT: "geo_shape",
    FieldType.MULTILINESTRING: "geo_shape",
    FieldType.MULTIPOLYGON: "geo_shape",
    FieldType.GEOMETRYCOLLECTION: "geo_shape",
}


def convert_field_type(value: str | FieldType | dict[str, Any]) -> dict[str, Any]:
    """将字段类型转换为 ES mapping 配置.

    - 已是映射配置（字典）时原样返回（副本）
    - text 类型附加中文分词器和多字段配置
    - date 类型附加可接受的日期格式

    Args:
        value: 源字段类型名、FieldType 或完整映射配置

    Returns:
        字段 mapping 配置

    Raises:
        ValidationError: 类型名不受支持时抛出

    Examples:
        >>> convert_field_type("datetime")["type"]
        'date'
        >>> convert_field_type({"type": "keyword"})
        {'type': 'keyword'}
    """
    if isinstance(value, dict):
        return copy.deepcopy(value)

    search_type = FieldType.parse(value).search_type
    mapping: dict[str, Any] = {"type": search_type}

    if search_type == "text":
        mapping["analyzer"] = DEFAULT_ANALYZER
        mapping["search_analyzer"] = DEFAULT_SEARCH_ANALYZER
        mapping["fields"] = copy.deepcopy(TEXT_SUB_FIELDS)
    elif search_type == "date":
        mapping["format"] = "||".join(DATE_FORMATS)

    return mapping


def build_properties(
    casts: dict[str, Any], mappings: dict[str, Any] | None = None
) -> dict[str, dict[str, Any]]:
    """合并模型 casts 与调用方 mappings 生成 properties.

    调用方声明的字段优先于 casts 推导结果。

    Args:
        casts: 模型字段类型声明 {字段名: 源类型}
        mappings: 调用方提供的映射 {字段名: 源类型或映射配置}

    Returns:
        ES mapping properties
    """
    properties = {field: convert_field_type(value) for field, value in casts.items()}
    for field, value in (mappings or {}).items():
        properties[field] = convert_field_type(value)
    return properties
