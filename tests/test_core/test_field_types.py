"""字段类型映射单元测试."""

import pytest

from elasticmodel.core.field_types import (
    DATE_FORMATS,
    FieldType,
    build_properties,
    convert_field_type,
)
from elasticmodel.exceptions import ValidationError


class TestFieldType:
    """FieldType 枚举测试."""

    @pytest.mark.parametrize(
        "field_type,search_type",
        [
            (FieldType.INT, "integer"),
            (FieldType.INT_UNSIGNED, "long"),
            (FieldType.BIGINT, "long"),
            (FieldType.TINYINT, "short"),
            (FieldType.DECIMAL, "double"),
            (FieldType.FLOAT, "float"),
            (FieldType.VARCHAR, "text"),
            (FieldType.LONGTEXT, "text"),
            (FieldType.DATETIME, "date"),
            (FieldType.YEAR, "date"),
            (FieldType.JSON, "object"),
            (FieldType.POINT, "geo_point"),
            (FieldType.BLOB, "binary"),
            (FieldType.BIT, "long"),
            (FieldType.POLYGON, "geo_shape"),
        ],
    )
    def test_search_type(self, field_type, search_type):
        assert field_type.search_type == search_type

    def test_every_member_has_search_type(self):
        table = FieldType.search_types()
        assert len(table) == len(FieldType)
        assert table["varchar"] == "text"

    def test_parse_case_insensitive(self):
        assert FieldType.parse("BigInt") is FieldType.BIGINT

    def test_parse_unknown(self):
        with pytest.raises(ValidationError):
            FieldType.parse("uuid")


class TestConvertFieldType:
    """convert_field_type 测试."""

    def test_numeric(self):
        assert convert_field_type("bigint") == {"type": "long"}

    def test_text_has_analyzers_and_sub_fields(self):
        mapping = convert_field_type(FieldType.VARCHAR)
        assert mapping["type"] == "text"
        assert mapping["analyzer"] == "ik_max_word"
        assert mapping["search_analyzer"] == "ik_smart"
        assert mapping["fields"]["raw"] == {"type": "keyword"}
        assert set(mapping["fields"]) == {"raw", "keyword", "english", "standard", "smart"}

    def test_date_has_format(self):
        mapping = convert_field_type("datetime")
        assert mapping == {"type": "date", "format": "||".join(DATE_FORMATS)}
        assert "epoch_millis" in mapping["format"]

    def test_dict_returned_as_copy(self):
        config = {"type": "keyword", "fields": {"x": {"type": "text"}}}
        mapping = convert_field_type(config)
        assert mapping == config
        mapping["fields"]["x"]["type"] = "keyword"
        assert config["fields"]["x"]["type"] == "text"

    def test_text_sub_fields_not_shared(self):
        first = convert_field_type("text")
        first["fields"]["raw"]["type"] = "changed"
        assert convert_field_type("text")["fields"]["raw"]["type"] == "keyword"


class TestBuildProperties:
    """build_properties 测试."""

    def test_from_casts(self):
        properties = build_properties({"id": "bigint", "status": FieldType.TINYINT})
        assert properties == {"id": {"type": "long"}, "status": {"type": "short"}}

    def test_caller_mappings_override_casts(self):
        properties = build_properties(
            {"title": "varchar"},
            {"title": {"type": "keyword"}, "location": "point"},
        )
        assert properties["title"] == {"type": "keyword"}
        assert properties["location"] == {"type": "geo_point"}

    def test_empty(self):
        assert build_properties({}) == {}
