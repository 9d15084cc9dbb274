"""工具函数单元测试."""

import pytest

from elasticmodel.core.utils import coerce_id, compact, root_field


class TestCompact:
    """compact 测试."""

    def test_drops_empty_values(self):
        data = {
            "query": {"match_all": {}},
            "sort": [],
            "highlight": {},
            "search_after": None,
            "name": "",
        }
        assert compact(data) == {"query": {"match_all": {}}}

    def test_keeps_zero_and_false(self):
        assert compact({"from": 0, "version": False}) == {"from": 0, "version": False}

    def test_only_top_level(self):
        data = {"_source": {"includes": []}}
        assert compact(data) == data


class TestCoerceId:
    """coerce_id 测试."""

    @pytest.mark.parametrize(
        "value,expected",
        [("7", 7), ("-3", -3), ("0012", 12), ("a7", "a7"), ("1.5", "1.5"), (9, 9), (None, None)],
    )
    def test_coerce(self, value, expected):
        assert coerce_id(value) == expected


def test_root_field():
    assert root_field("title.keyword") == "title"
    assert root_field("title") == "title"
