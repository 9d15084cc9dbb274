"""地理位置模型模块.

主要组件:
    - GeoPoint: 地理坐标点
    - GeoDistanceUnit: 距离单位枚举
"""

from .models import GeoDistanceUnit, GeoPoint

__all__ = [
    "GeoPoint",
    "GeoDistanceUnit",
]
