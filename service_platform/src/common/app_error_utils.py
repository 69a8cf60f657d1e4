from __future__ import annotations

from typing import Optional

from service_platform.src.common.errors import AppError
from service_platform.src.common.utils import error_response
from service_platform.src.constants import (
    ERROR_CODE_INVALID_REQUEST,
    ERROR_CODE_NOT_FOUND,
    ERROR_CODE_RESOURCE_CYCLE,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_INTERNAL_ERROR,
    HTTP_STATUS_NOT_FOUND,
)


def invalid_request_error(message: str, details: Optional[dict] = None) -> AppError:
    return AppError(
        code=ERROR_CODE_INVALID_REQUEST,
        message=str(message),
        status_code=HTTP_STATUS_BAD_REQUEST,
        details=details,
    )


def not_found_error(message: str) -> AppError:
    return AppError(
        code=ERROR_CODE_NOT_FOUND,
        message=str(message),
        status_code=HTTP_STATUS_NOT_FOUND,
    )


def resource_not_found_error(name: str) -> AppError:
    return AppError(
        code=ERROR_CODE_RESOURCE_NOT_FOUND,
        message=f"未注册的资源: {name}",
        status_code=HTTP_STATUS_INTERNAL_ERROR,
        details={"resource": name},
    )


def resource_cycle_error(chain: list) -> AppError:
    return AppError(
        code=ERROR_CODE_RESOURCE_CYCLE,
        message="资源依赖存在环: " + " -> ".join(chain),
        status_code=HTTP_STATUS_INTERNAL_ERROR,
        details={"chain": list(chain)},
    )


def app_error_response(exc: AppError):
    return error_response(exc.code, exc.message, exc.status_code)
