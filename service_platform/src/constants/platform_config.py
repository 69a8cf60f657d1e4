# -*- coding: utf-8 -*-
"""
平台注册相关常量。

包含：
- SERVICE_TYPE_*: 服务类型（与 ServiceType 枚举取值一致）
- INIT_TYPE_ALL: init() 的全量初始化取值
- ACTION_TYPE_*: Action 钩子类型
- HTTP_METHOD_*: HTTP 方法
- PLATFORM_ENV_*: 环境变量名与默认值
"""

from typing import Final, Tuple

# 服务类型
SERVICE_TYPE_HTTP: Final = "http"
SERVICE_TYPE_CLI: Final = "cli"
SERVICE_TYPE_GRAPHQL: Final = "graphql"
INIT_TYPE_ALL: Final = "all"

# Action 钩子类型（仅作元数据，不影响注册流程）
ACTION_TYPE_DEFAULT: Final = "default"
ACTION_TYPE_ERROR: Final = "error"
ACTION_TYPE_INIT: Final = "init"
ACTION_TYPE_SHUTDOWN: Final = "shutdown"
ACTION_TYPE_OPTIONS: Final = "options"

# HTTP 方法
HTTP_METHOD_GET: Final = "GET"
HTTP_METHOD_POST: Final = "POST"
HTTP_METHOD_PUT: Final = "PUT"
HTTP_METHOD_PATCH: Final = "PATCH"
HTTP_METHOD_DELETE: Final = "DELETE"
HTTP_METHOD_OPTIONS: Final = "OPTIONS"
HTTP_METHOD_HEAD: Final = "HEAD"
HTTP_METHODS: Final[Tuple[str, ...]] = (
    HTTP_METHOD_GET,
    HTTP_METHOD_POST,
    HTTP_METHOD_PUT,
    HTTP_METHOD_PATCH,
    HTTP_METHOD_DELETE,
    HTTP_METHOD_OPTIONS,
    HTTP_METHOD_HEAD,
)

# 路由元数据
OPENAPI_LABELS_KEY: Final = "x-labels"
RESOURCE_NAME_REQUEST: Final = "request"

# 环境变量
PLATFORM_ENV_INIT_TYPE: Final = "PLATFORM_INIT_TYPE"
PLATFORM_ENV_LOG_LEVEL: Final = "PLATFORM_LOG_LEVEL"
PLATFORM_ENV_API_PREFIX: Final = "PLATFORM_API_PREFIX"
PLATFORM_ENV_REGISTER_ALIASES: Final = "PLATFORM_REGISTER_ALIASES"

DEFAULT_INIT_TYPE: Final = INIT_TYPE_ALL
DEFAULT_LOG_LEVEL: Final = "INFO"
DEFAULT_API_PREFIX: Final = "/api"

APP_TITLE: Final = "Service Platform"
