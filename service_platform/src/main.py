import logging
from typing import Optional

from fastapi import FastAPI, Request

from service_platform.src.common.app_error_utils import app_error_response
from service_platform.src.common.errors import AppError
from service_platform.src.common.utils import apply_log_level, env_text, normalize_prefix
from service_platform.src.constants import (
    APP_TITLE,
    DEFAULT_API_PREFIX,
    DEFAULT_INIT_TYPE,
    DEFAULT_LOG_LEVEL,
    PLATFORM_ENV_API_PREFIX,
    PLATFORM_ENV_INIT_TYPE,
    PLATFORM_ENV_LOG_LEVEL,
)
from service_platform.src.services.app_platform import AppPlatform, create_platform

logger = logging.getLogger(__name__)


def install_app_error_handler(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _handle_app_error(request: Request, exc: AppError):
        # 绑定层只 raise AppError；这里统一转为 {"error": {...}} 响应
        return app_error_response(exc)


def create_app(platform: Optional[AppPlatform] = None, init_type: Optional[str] = None) -> FastAPI:
    apply_log_level("service_platform", PLATFORM_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    if platform is None:
        platform = create_platform()
    if init_type is None:
        init_type = env_text(PLATFORM_ENV_INIT_TYPE, DEFAULT_INIT_TYPE)

    # 注册必须先于任何请求：在 app 构建阶段完成，而不是放到 lifespan
    platform.init(init_type)

    app = FastAPI(title=APP_TITLE)
    app.state.platform = platform
    install_app_error_handler(app)

    prefix = normalize_prefix(env_text(PLATFORM_ENV_API_PREFIX, DEFAULT_API_PREFIX))
    app.include_router(platform.http.api_router, prefix=prefix)
    logger.info("app created: init_type=%s prefix=%s services=%s", init_type, prefix or "/", len(platform.get_services()))
    return app


app = create_app()
