"""文档模型模块."""

from .base import Model, QueryableModel

__all__ = [
    "Model",
    "QueryableModel",
]
