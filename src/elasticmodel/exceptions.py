"""elasticmodel 异常定义模块."""


class ElasticModelError(Exception):
    """elasticmodel 基础异常类."""

    pass


class ValidationError(ElasticModelError):
    """参数校验异常.

    查询条件或写入数据不合法时抛出，例如 between 缺少起止值、
    update 数据为空或为位置下标数组、经纬度超出范围等。
    """

    pass


class UnsupportedOperatorError(ValidationError):
    """不支持的操作符异常."""

    pass


class ConfigurationError(ElasticModelError):
    """配置异常.

    连接配置缺失或为空、查询构建器未绑定模型时抛出。
    """

    pass


class LogicError(ElasticModelError):
    """逻辑异常.

    封装 Elasticsearch 返回的客户端 (4xx) / 服务端 (5xx) 错误以及
    不满足调用前置条件的情况（如缺少查询条件）。

    Attributes:
        message: 错误信息
        code: 错误码，通常为上游 HTTP 状态码
    """

    def __init__(self, message: str, code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message
