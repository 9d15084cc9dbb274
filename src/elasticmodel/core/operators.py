"""查询操作符定义模块."""

from enum import Enum


class Bucket(str, Enum):
    """bool 查询中的子句位置."""

    MUST = "must"
    SHOULD = "should"
    MUST_NOT = "must_not"
    FILTER = "filter"


class Operator(str, Enum):
    """where 条件支持的操作符."""

    EQUAL = "="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    NOT_EQUAL = "!="
    NOT_EQUAL_ALT = "<>"
    IN = "in"
    NOT_IN = "not_in"
    BETWEEN = "between"
    NOT_BETWEEN = "not_between"
    MATCH = "match"
    SHOULD_MATCH = "should_match"
    NOT_MATCH = "not_match"
    MULTI_MATCH = "multi_match"
    MATCH_PHRASE = "match_phrase"
    SHOULD_MATCH_PHRASE = "should_match_phrase"
    NOT_MATCH_PHRASE = "not_match_phrase"
    TERM = "term"
    NOT_TERM = "not_term"
    REGEX = "regex"
    PREFIX = "prefix"
    NOT_PREFIX = "not_prefix"
    WILDCARD = "wildcard"
    EXISTS = "exists"
    NOT_EXISTS = "not_exists"

    @classmethod
    def values(cls) -> list[str]:
        """返回全部操作符字符串."""
        return [member.value for member in cls]
