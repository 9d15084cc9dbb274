"""深度分页游标与缓存单元测试."""

from unittest.mock import patch

from elasticmodel.pagination import MemoryCache, PaginationCursor


class TestMemoryCache:
    """MemoryCache 测试."""

    def test_get_set(self):
        cache = MemoryCache()
        cache.set("k", "v")
        assert cache.get("k") == "v"
        assert cache.get("missing") is None
        assert len(cache) == 1

    def test_ttl_expiry(self):
        cache = MemoryCache(ttl=10)
        with patch("elasticmodel.pagination.cache.time.monotonic", return_value=100.0):
            cache.set("k", "v")
        with patch("elasticmodel.pagination.cache.time.monotonic", return_value=105.0):
            assert cache.get("k") == "v"
        with patch("elasticmodel.pagination.cache.time.monotonic", return_value=110.0):
            assert cache.get("k") is None
        assert len(cache) == 0

    def test_set_purges_expired_entries(self):
        cache = MemoryCache(ttl=10)
        with patch("elasticmodel.pagination.cache.time.monotonic", return_value=100.0):
            cache.set("old", "v")
        with patch("elasticmodel.pagination.cache.time.monotonic", return_value=200.0):
            cache.set("new", "v")
        assert len(cache) == 1
        assert cache.get("new") == "v"

    def test_clear(self):
        cache = MemoryCache()
        cache.set("k", "v")
        cache.clear()
        assert cache.get("k") is None


class TestPaginationCursor:
    """PaginationCursor 测试."""

    def test_signature_is_stable(self):
        query_a = {"bool": {"must": [{"term": {"status": 1}}], "should": []}}
        query_b = {"bool": {"should": [], "must": [{"term": {"status": 1}}]}}
        assert PaginationCursor.signature(query_a, "articles", 20) == PaginationCursor.signature(
            query_b, "articles", 20
        )

    def test_signature_depends_on_query_index_and_size(self):
        base = PaginationCursor.signature({"term": {"status": 1}}, "articles", 20)
        assert base != PaginationCursor.signature({"term": {"status": 2}}, "articles", 20)
        assert base != PaginationCursor.signature({"term": {"status": 1}}, "posts", 20)
        assert base != PaginationCursor.signature({"term": {"status": 1}}, "articles", 10)

    def test_empty_query_is_match_all(self):
        assert PaginationCursor.signature({}, "articles", 20) == PaginationCursor.signature(
            {"match_all": {}}, "articles", 20
        )

    def test_key_has_prefix(self):
        cursor = PaginationCursor(MemoryCache(), prefix="app")
        key = cursor.key_for({}, "articles", 20)
        assert key == "app:" + PaginationCursor.signature({}, "articles", 20)

    def test_save_and_load(self):
        cursor = PaginationCursor(MemoryCache(), prefix="app")
        cursor.save("app:k", [1700000000, "42"])
        assert cursor.load("app:k") == [1700000000, "42"]

    def test_save_empty_is_ignored(self):
        cache = MemoryCache()
        cursor = PaginationCursor(cache)
        cursor.save("k", [])
        cursor.save("k", None)
        assert len(cache) == 0

    def test_load_invalid_value(self, caplog):
        cache = MemoryCache()
        cache.set("k", "not json")
        assert PaginationCursor(cache).load("k") is None
        assert "无法解析" in caplog.text
