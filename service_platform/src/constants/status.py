# -*- coding: utf-8 -*-
"""
错误码与 HTTP 状态码常量。

包含：
- ERROR_CODE_*: AppError.code 取值
- HTTP_STATUS_*: 常用 HTTP 状态码
- EXIT_CODE_*: CLI 退出码
"""

from typing import Final

# 错误码
ERROR_CODE_INVALID_REQUEST: Final = "invalid_request"
ERROR_CODE_NOT_FOUND: Final = "not_found"
ERROR_CODE_RESOURCE_NOT_FOUND: Final = "resource_not_found"
ERROR_CODE_RESOURCE_CYCLE: Final = "resource_cycle"

# HTTP 状态码
HTTP_STATUS_OK: Final = 200
HTTP_STATUS_BAD_REQUEST: Final = 400
HTTP_STATUS_NOT_FOUND: Final = 404
HTTP_STATUS_INTERNAL_ERROR: Final = 500

# 健康检查
HEALTH_STATUS_OK: Final = "ok"

# CLI 退出码
EXIT_CODE_ERROR: Final = 1
EXIT_CODE_USAGE: Final = 2
EXIT_CODE_INTERRUPTED: Final = 130
