# -*- coding: utf-8 -*-
"""
HTTP 路由契约的 FastAPI 实现。

add_route 返回 Route 构建器，Platform 逐步调用 groups/alias/param/inject/label，
最后 action(callback) 时挂载到内部的 APIRouter。应用侧只需：

    app.include_router(router.api_router, prefix="/api")

请求处理：
- 参数值依次取自 path 参数、query string、JSON 对象 body（后者覆盖前者）；
- alias 路由会把 alias params 强制写入参数值；
- 校验失败/缺少必填参数抛 AppError，由应用的全局 handler 转为统一错误响应。
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

from fastapi import APIRouter, Request

from service_platform.src.common.app_error_utils import invalid_request_error, not_found_error
from service_platform.src.common.utils import env_enabled
from service_platform.src.constants import (
    HTTP_METHOD_GET,
    HTTP_METHOD_HEAD,
    OPENAPI_LABELS_KEY,
    PLATFORM_ENV_REGISTER_ALIASES,
    RESOURCE_NAME_REQUEST,
)
from service_platform.src.dispatchers.params import ParamSpec, make_param_spec, resolve_params
from service_platform.src.dispatchers.resources import ResourceRegistry

logger = logging.getLogger(__name__)

_BODYLESS_METHODS = {HTTP_METHOD_GET, HTTP_METHOD_HEAD}


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple, set)):
        return [_json_safe(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    return str(value)


class Route:
    """单条路由的增量配置。action() 之前的调用只记录元数据，不影响已挂载的路由。"""

    def __init__(self, router: "FastApiHttpRouter", method: str, path: str) -> None:
        self._router = router
        self.method = str(method or HTTP_METHOD_GET).upper()
        self.path = str(path or "")
        self.group_tags: List[str] = []
        self.alias_path = ""
        self.alias_params: Dict[str, Any] = {}
        self.params: Dict[str, ParamSpec] = {}
        self.injections: List[str] = []
        self.labels: Dict[str, Any] = {}
        self.callback: Optional[Callable[..., Any]] = None
        self.mounted = False

    def groups(self, groups: Iterable[str]) -> "Route":
        self.group_tags = list(groups or [])
        return self

    def alias(self, path: str, params: Optional[Dict[str, Any]] = None) -> "Route":
        self.alias_path = str(path or "")
        self.alias_params = dict(params or {})
        return self

    def param(
        self,
        key: str,
        default: Any = None,
        validator: Any = None,
        description: str = "",
        optional: bool = False,
        injections: Iterable[str] = (),
    ) -> "Route":
        self.params[key] = make_param_spec(key, default, validator, description, optional, injections)
        return self

    def inject(self, name: str) -> "Route":
        self.injections.append(name)
        return self

    def label(self, key: str, value: Any) -> "Route":
        self.labels[key] = value
        return self

    def action(self, callback: Optional[Callable[..., Any]]) -> "Route":
        self.callback = callback
        if not self.mounted:
            self._router.mount(self)
        return self

    def describe(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "path": self.path,
            "alias": self.alias_path or None,
            "groups": list(self.group_tags),
            "params": list(self.params),
            "injections": list(self.injections),
            "labels": _json_safe(self.labels),
        }


class FastApiHttpRouter:
    def __init__(
        self,
        api_router: Optional[APIRouter] = None,
        resources: Optional[ResourceRegistry] = None,
        register_aliases: Optional[bool] = None,
    ) -> None:
        self.api_router = api_router if api_router is not None else APIRouter()
        self.resources = resources if resources is not None else ResourceRegistry()
        if register_aliases is None:
            register_aliases = env_enabled(PLATFORM_ENV_REGISTER_ALIASES, default=True)
        self._register_aliases = bool(register_aliases)
        self._routes: List[Route] = []
        self._mounted_keys: Set[Tuple[str, str]] = set()

    @property
    def routes(self) -> List[Route]:
        return list(self._routes)

    def add_route(self, method: str, path: str) -> Route:
        route = Route(self, method, path)
        self._routes.append(route)
        return route

    def mount(self, route: Route) -> None:
        self._add_api_route(route, route.path, forced={}, include_in_schema=True)
        if route.alias_path and self._register_aliases:
            self._add_api_route(route, route.alias_path, forced=route.alias_params, include_in_schema=False)
        route.mounted = True

    def _add_api_route(self, route: Route, path: str, forced: Dict[str, Any], include_in_schema: bool) -> None:
        key = (route.method, path)
        if key in self._mounted_keys:
            # FastAPI 按注册顺序匹配，重复路由只有第一条生效
            logger.warning("duplicate route %s %s: earlier registration takes precedence", route.method, path)
        self._mounted_keys.add(key)
        self.api_router.add_api_route(
            path,
            self._build_endpoint(route, forced),
            methods=[route.method],
            name=f"{route.method.lower()}:{path}",
            tags=list(route.group_tags) or None,
            include_in_schema=include_in_schema,
            openapi_extra={OPENAPI_LABELS_KEY: _json_safe(route.labels)} if route.labels else None,
        )

    def _build_endpoint(self, route: Route, forced: Dict[str, Any]):
        resources = self.resources

        async def endpoint(request: Request):
            values: Dict[str, Any] = dict(request.path_params)
            values.update(request.query_params)
            values.update(await _read_json_body(request))
            values.update(forced)

            context: Dict[str, Any] = {RESOURCE_NAME_REQUEST: request}
            kwargs = resolve_params(route.params, values, resources, context)
            for name in route.injections:
                kwargs[name] = resources.resolve(name, context)

            callback = route.callback
            if callback is None:
                raise not_found_error(f"路由未绑定 action: {route.method} {route.path}")
            result = callback(**kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result

        return endpoint


async def _read_json_body(request: Request) -> Dict[str, Any]:
    if request.method.upper() in _BODYLESS_METHODS:
        return {}
    content_type = str(request.headers.get("content-type") or "").lower()
    if "application/json" not in content_type:
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = await request.json()
    except ValueError:
        raise invalid_request_error("请求体不是合法 JSON")
    if not isinstance(data, dict):
        raise invalid_request_error("请求体必须是 JSON 对象")
    return data
