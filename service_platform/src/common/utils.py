from __future__ import annotations

import os
from typing import Optional


def env_text(name: str, default: str = "") -> str:
    """读取环境变量文本；空白视为未设置。"""
    raw = str(os.getenv(name, "") or "").strip()
    return raw or default


def env_enabled(name: str, default: bool = True) -> bool:
    raw = str(os.getenv(name, "") or "").strip().lower()
    if not raw:
        return bool(default)
    return raw in {"1", "true", "yes", "on"}


def normalize_prefix(value: Optional[str]) -> str:
    """
    规范化路由前缀：保证以 "/" 开头、不以 "/" 结尾；空值返回 ""。
    """
    text = str(value or "").strip().rstrip("/")
    if not text:
        return ""
    if not text.startswith("/"):
        text = "/" + text
    return text


def error_response(code: str, message: str, status_code: int) -> "JSONResponse":
    """
    统一错误响应结构：{"error": {"code": "...", "message": "..."}}。
    """
    # 懒导入：core 层与 CLI 入口不应因为这里而强依赖 fastapi。
    from fastapi.responses import JSONResponse

    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


def apply_log_level(logger_name: str, env_name: str, default: str = "INFO") -> int:
    """
    按环境变量设置指定 logger 的级别；无法识别的取值回退到 default。
    """
    import logging

    text = env_text(env_name, default).upper()
    level = logging.getLevelName(text)
    if not isinstance(level, int):
        level = logging.getLevelName(default.upper())
    logging.getLogger(logger_name).setLevel(level)
    return level
