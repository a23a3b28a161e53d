"""领域层异常定义

- DomainError 表示业务规则违反，不是技术错误
- DomainValidationError 携带结构化错误列表，供 API 层转换为 4xx 响应

注意：图校验本身从不抛异常，所有结构问题都以 issue 的形式返回；
只有显式调用 validate_or_raise() 的调用方才会收到 DomainValidationError。
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """领域层异常基类

    用途：
    - 表示业务规则违反（如：step key 不能为空）

    示例：
        if not key:
            raise DomainError("key 不能为空")
    """

    pass


class DomainValidationError(DomainError):
    """结构化校验失败

    参数：
        message: 人类可读的概要信息
        code: 机器可读的错误码（如 "graph_invalid"）
        errors: 结构化错误列表（每项至少包含 code / message）
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.code = code
        self.errors = errors or []
        super().__init__(message)
