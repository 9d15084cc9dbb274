"""地理位置数据模型模块.

提供地理坐标点（GeoPoint）和距离单位枚举（GeoDistanceUnit），
用于地理距离过滤和按距离排序。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from elasticmodel.exceptions import ValidationError


class GeoDistanceUnit(str, Enum):
    """地理距离单位枚举.

    Attributes:
        METERS: 米 ("m")
        KILOMETERS: 千米 ("km")
        MILES: 英里 ("mi")
        YARDS: 码 ("yd")
    """

    METERS = "m"
    KILOMETERS = "km"
    MILES = "mi"
    YARDS = "yd"

    @classmethod
    def parse(cls, value: str | GeoDistanceUnit) -> GeoDistanceUnit:
        """解析距离单位.

        Raises:
            ValidationError: 不支持的单位
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"不支持的距离单位: {value}") from None


@dataclass(frozen=True)
class GeoPoint:
    """地理坐标点数据模型.

    创建时会自动校验经纬度范围的合法性。

    Attributes:
        lat: 纬度，范围 [-90, 90]
        lon: 经度，范围 [-180, 180]

    Raises:
        ValidationError: 当经纬度超出合法范围时抛出

    Examples:
        >>> point = GeoPoint(lat=39.9042, lon=116.4074)
        >>> point.to_es_format()
        {'lat': 39.9042, 'lon': 116.4074}
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        """校验经纬度范围."""
        if not -90 <= self.lat <= 90:
            raise ValidationError(f"纬度值 {self.lat} 超出合法范围 [-90, 90]")
        if not -180 <= self.lon <= 180:
            raise ValidationError(f"经度值 {self.lon} 超出合法范围 [-180, 180]")

    def to_es_format(self) -> dict[str, float]:
        """转换为 Elasticsearch 格式的字典.

        Returns:
            包含 lat 和 lon 的字典，如 {"lat": 39.9042, "lon": 116.4074}
        """
        return {"lat": self.lat, "lon": self.lon}
