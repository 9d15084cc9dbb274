"""地理位置数据模型单元测试."""

import pytest

from elasticmodel.exceptions import ValidationError
from elasticmodel.geo.models import GeoDistanceUnit, GeoPoint


class TestGeoDistanceUnit:
    """GeoDistanceUnit 枚举测试."""

    def test_values(self) -> None:
        assert [unit.value for unit in GeoDistanceUnit] == ["m", "km", "mi", "yd"]

    def test_parse(self) -> None:
        assert GeoDistanceUnit.parse("km") is GeoDistanceUnit.KILOMETERS
        assert GeoDistanceUnit.parse(GeoDistanceUnit.MILES) is GeoDistanceUnit.MILES

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValidationError):
            GeoDistanceUnit.parse("ft")


class TestGeoPoint:
    """GeoPoint 数据模型测试."""

    def test_create_normal_point(self) -> None:
        point = GeoPoint(lat=39.9042, lon=116.4074)
        assert point.lat == 39.9042
        assert point.lon == 116.4074

    @pytest.mark.parametrize("lat,lon", [(90.0, 180.0), (-90.0, -180.0), (0.0, 0.0)])
    def test_boundaries(self, lat, lon) -> None:
        point = GeoPoint(lat=lat, lon=lon)
        assert point.to_es_format() == {"lat": lat, "lon": lon}

    @pytest.mark.parametrize("lat,lon", [(90.1, 0.0), (-90.1, 0.0), (0.0, 180.1), (0.0, -180.1)])
    def test_out_of_range(self, lat, lon) -> None:
        with pytest.raises(ValidationError):
            GeoPoint(lat=lat, lon=lon)

    def test_frozen(self) -> None:
        point = GeoPoint(lat=1.0, lon=2.0)
        with pytest.raises(AttributeError):
            point.lat = 3.0
