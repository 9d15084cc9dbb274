"""条件子句转换单元测试."""

import pytest

from elasticmodel.core.clauses import BoolQuery, geo_distance_clause, parse_operator, translate
from elasticmodel.core.operators import Bucket, Operator
from elasticmodel.exceptions import UnsupportedOperatorError, ValidationError


class TestParseOperator:
    """parse_operator 测试."""

    def test_parse_string(self):
        assert parse_operator(">=") is Operator.GTE

    def test_parse_enum(self):
        assert parse_operator(Operator.MATCH) is Operator.MATCH

    def test_unknown_operator(self):
        with pytest.raises(UnsupportedOperatorError) as exc_info:
            parse_operator("like")
        assert "[like]" in str(exc_info.value)

    def test_unsupported_is_validation_error(self):
        with pytest.raises(ValidationError):
            parse_operator("~")


class TestTranslate:
    """translate 子句位置与内容测试."""

    @pytest.mark.parametrize(
        "operator,bucket",
        [
            ("=", Bucket.MUST),
            ("term", Bucket.MUST),
            ("!=", Bucket.MUST_NOT),
            ("<>", Bucket.MUST_NOT),
            ("not_term", Bucket.MUST_NOT),
            ("match", Bucket.MUST),
            ("should_match", Bucket.SHOULD),
            ("not_match", Bucket.MUST_NOT),
            ("match_phrase", Bucket.MUST),
            ("should_match_phrase", Bucket.SHOULD),
            ("not_match_phrase", Bucket.MUST_NOT),
            (">", Bucket.MUST),
            ("in", Bucket.MUST),
            ("not_in", Bucket.MUST_NOT),
            ("regex", Bucket.MUST),
            ("prefix", Bucket.MUST),
            ("not_prefix", Bucket.MUST_NOT),
            ("wildcard", Bucket.MUST),
        ],
    )
    def test_bucket(self, operator, bucket):
        result_bucket, _ = translate("status", operator, "x")
        assert result_bucket is bucket

    def test_equal_is_term(self):
        _, query = translate("status", "=", 1)
        assert query.to_dict() == {"term": {"status": 1}}

    def test_not_equal_is_term(self):
        _, query = translate("status", "!=", 1)
        assert query.to_dict() == {"term": {"status": 1}}

    @pytest.mark.parametrize(
        "operator,key",
        [(">", "gt"), ("<", "lt"), (">=", "gte"), ("<=", "lte")],
    )
    def test_range(self, operator, key):
        _, query = translate("views", operator, 10)
        assert query.to_dict() == {"range": {"views": {key: 10}}}

    def test_between(self):
        bucket, query = translate("views", "between", [1, 10])
        assert bucket is Bucket.MUST
        assert query.to_dict() == {"range": {"views": {"gte": 1, "lte": 10}}}

    def test_not_between(self):
        bucket, query = translate("views", "not_between", (1, 10))
        assert bucket is Bucket.MUST_NOT
        assert query.to_dict() == {"range": {"views": {"gte": 1, "lte": 10}}}

    @pytest.mark.parametrize("value", [[1], [None, 10], [1, None], "ab", 5])
    def test_between_requires_start_and_end(self, value):
        with pytest.raises(ValidationError):
            translate("views", "between", value)

    def test_in_wraps_scalar(self):
        _, query = translate("tags", "in", "python")
        assert query.to_dict() == {"terms": {"tags": ["python"]}}

    def test_in_list(self):
        _, query = translate("tags", "in", ["a", "b"])
        assert query.to_dict() == {"terms": {"tags": ["a", "b"]}}

    def test_match(self):
        _, query = translate("title", "match", "hello")
        assert query.to_dict() == {"match": {"title": "hello"}}

    def test_multi_match(self):
        bucket, query = translate(["title", "content"], "multi_match", "hello")
        assert bucket is Bucket.MUST
        assert query.to_dict() == {
            "multi_match": {"query": "hello", "fields": ["title", "content"]}
        }

    def test_multi_match_empty_fields(self):
        with pytest.raises(ValidationError):
            translate([], "multi_match", "hello")

    def test_field_list_for_single_field_operator(self):
        with pytest.raises(ValidationError):
            translate(["title", "content"], "match", "hello")

    def test_match_phrase_default_slop(self):
        _, query = translate("title", "match_phrase", "quick fox")
        assert query.to_dict() == {
            "match_phrase": {"title": {"query": "quick fox", "slop": 100}}
        }

    def test_match_phrase_options(self):
        _, query = translate("title", "match_phrase", "quick fox", {"slop": 2})
        assert query.to_dict()["match_phrase"]["title"]["slop"] == 2

    def test_regex(self):
        _, query = translate("code", "regex", "a.*")
        assert query.to_dict() == {"regexp": {"code": "a.*"}}

    def test_prefix(self):
        _, query = translate("code", "prefix", "ab")
        assert query.to_dict() == {"prefix": {"code": "ab"}}

    def test_wildcard(self):
        _, query = translate("code", "wildcard", "a?c*")
        assert query.to_dict() == {"wildcard": {"code": "a?c*"}}

    @pytest.mark.parametrize(
        "operator,value,expected",
        [
            ("=", "x", {"term": {"user__name": "x"}}),
            (">=", 1, {"range": {"user__name": {"gte": 1}}}),
            ("between", [1, 2], {"range": {"user__name": {"gte": 1, "lte": 2}}}),
            ("in", ["a"], {"terms": {"user__name": ["a"]}}),
            ("match", "x", {"match": {"user__name": "x"}}),
            ("match_phrase", "x y", {"match_phrase": {"user__name": {"query": "x y", "slop": 100}}}),
        ],
    )
    def test_double_underscore_field_kept(self, operator, value, expected):
        _, query = translate("user__name", operator, value)
        assert query.to_dict() == expected

    def test_exists(self):
        bucket, query = translate("deleted_at", "exists")
        assert bucket is Bucket.MUST
        assert query.to_dict() == {"exists": {"field": "deleted_at"}}

    def test_not_exists(self):
        bucket, query = translate("deleted_at", "not_exists")
        assert bucket is Bucket.MUST_NOT
        assert query.to_dict() == {"exists": {"field": "deleted_at"}}


class TestGeoDistanceClause:
    """geo_distance_clause 测试."""

    def test_filter_bucket(self):
        bucket, query = geo_distance_clause("location", 116.40, 39.90, "10km")
        assert bucket is Bucket.FILTER
        assert query.to_dict() == {
            "geo_distance": {
                "distance": "10km",
                "location": {"lat": 39.90, "lon": 116.40},
            }
        }

    def test_default_distance(self):
        _, query = geo_distance_clause("location", 116.40, 39.90)
        assert query.to_dict()["geo_distance"]["distance"] == "50km"

    def test_double_underscore_field_kept(self):
        _, query = geo_distance_clause("__location", 116.40, 39.90)
        assert "__location" in query.to_dict()["geo_distance"]

    def test_invalid_latitude(self):
        with pytest.raises(ValidationError):
            geo_distance_clause("location", 116.40, 91.0)


class TestBoolQuery:
    """BoolQuery 累加器测试."""

    def test_empty(self):
        query = BoolQuery()
        assert query.is_empty()
        assert not query
        assert query.to_query() is None
        assert query.to_dict() == {}

    def test_groups_by_bucket_in_order(self):
        query = BoolQuery()
        query.add(*translate("status", "=", 1))
        query.add(*translate("title", "should_match", "a"))
        query.add(*translate("views", ">", 5))
        query.add(*translate("deleted", "!=", 1))

        assert len(query) == 4
        assert query.to_dict() == {
            "bool": {
                "must": [{"term": {"status": 1}}, {"range": {"views": {"gt": 5}}}],
                "should": [{"match": {"title": "a"}}],
                "must_not": [{"term": {"deleted": 1}}],
            }
        }

    def test_clauses(self):
        query = BoolQuery()
        query.add(*translate("title", "should_match", "a"))
        query.add(*translate("title", "should_match", "b"))
        assert len(query.clauses(Bucket.SHOULD)) == 2
        assert query.clauses(Bucket.MUST) == []

    def test_clear(self):
        query = BoolQuery()
        query.add(*translate("status", "=", 1))
        query.clear()
        assert query.is_empty()
