from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class AppError(Exception):
    """
    统一的业务异常（调度器绑定层抛出，入口层捕获并转换）。

    - HTTP 入口：由全局 exception handler 转为 {"error": {...}} JSON 响应；
    - CLI 入口：打印错误面板并以非零退出码结束。
    """

    code: str
    message: str
    status_code: int
    details: Optional[dict] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
