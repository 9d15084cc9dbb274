"""核心模块导出."""

from elasticmodel.core.clauses import BoolQuery, geo_distance_clause, parse_operator, translate
from elasticmodel.core.field_types import FieldType, build_properties, convert_field_type
from elasticmodel.core.operators import Bucket, Operator
from elasticmodel.core.utils import coerce_id, compact, root_field

__all__ = [
    "Bucket",
    "Operator",
    "FieldType",
    "BoolQuery",
    "translate",
    "parse_operator",
    "geo_distance_clause",
    "convert_field_type",
    "build_properties",
    "compact",
    "coerce_id",
    "root_field",
]
