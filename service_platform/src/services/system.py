from __future__ import annotations

from functools import partial
from typing import Any, Dict, List

from service_platform.src.common.app_error_utils import not_found_error
from service_platform.src.constants import HEALTH_STATUS_OK, HTTP_METHOD_GET
from service_platform.src.core.action import Action
from service_platform.src.core.platform import Platform
from service_platform.src.core.service import Service, ServiceType

RESOURCE_NAME_PLATFORM = "platform"
SYSTEM_GROUP = "system"


class NonEmptyText:
    description = "必须是非空字符串"

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and bool(value.strip())


def _safe_default(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def describe_action(key: str, action: Action) -> Dict[str, Any]:
    return {
        "key": key,
        "method": action.http_method,
        "path": action.http_path,
        "alias": action.http_alias_path or None,
        "description": action.description,
        "groups": action.group_tags,
        "params": [
            {
                "key": param_key,
                "optional": param.optional,
                "default": _safe_default(param.default),
                "description": param.description,
            }
            for param_key, param in action.params.items()
        ],
        "injections": action.injections,
        "labels": {k: _safe_default(v) for k, v in action.labels.items()},
    }


def describe_service(key: str, service: Service, with_actions: bool = False) -> Dict[str, Any]:
    item: Dict[str, Any] = {"key": key, "type": service.type.value, "actions": len(service)}
    if with_actions:
        item["items"] = [describe_action(action_key, action) for action_key, action in service]
    return item


def list_services(platform: Platform) -> List[Dict[str, Any]]:
    return [describe_service(key, service) for key, service in platform.get_services().items()]


def get_service_detail(platform: Platform, key: str) -> Dict[str, Any]:
    service = platform.get_service(key)
    if service is None:
        raise not_found_error(f"服务不存在: {key}")
    return describe_service(key, service, with_actions=True)


def list_routes(platform: Platform) -> List[Dict[str, Any]]:
    # 只有 FastAPI 绑定记录路由清单；注入的其他路由器返回空
    routes = getattr(platform.http, "routes", None) or []
    return [route.describe() for route in routes]


# ── HTTP ──


def _health() -> Dict[str, Any]:
    return {"status": HEALTH_STATUS_OK}


def _http_list_services(platform: Platform) -> Dict[str, Any]:
    return {"items": list_services(platform)}


def _http_get_service(key: str, platform: Platform) -> Dict[str, Any]:
    return get_service_detail(platform, key)


def build_system_http_service() -> Service:
    health = (
        Action()
        .http(HTTP_METHOD_GET, "/health")
        .desc("健康检查")
        .groups([SYSTEM_GROUP])
        .label("scope", "public")
        .callback(_health)
    )
    services = (
        Action()
        .http(HTTP_METHOD_GET, "/services")
        .alias("/platform/services")
        .desc("列出已注册的服务")
        .groups([SYSTEM_GROUP])
        .inject(RESOURCE_NAME_PLATFORM)
        .label("scope", "admin")
        .callback(_http_list_services)
    )
    service_detail = (
        Action()
        .http(HTTP_METHOD_GET, "/services/{key}")
        .desc("查看单个服务及其 actions")
        .groups([SYSTEM_GROUP])
        .param("key", None, NonEmptyText(), "服务 key")
        .inject(RESOURCE_NAME_PLATFORM)
        .label("scope", "admin")
        .callback(_http_get_service)
    )
    return (
        Service(ServiceType.HTTP)
        .add_action("health", health)
        .add_action("services.list", services)
        .add_action("services.get", service_detail)
    )


# ── CLI ──


def _cli_describe(platform: Platform, key: str) -> Dict[str, Any]:
    return get_service_detail(platform, key)


def build_system_cli_service(platform: Platform) -> Service:
    """CLI 任务不经过 injections：直接绑定 platform。"""
    services = Action().desc("列出已注册的服务").callback(partial(list_services, platform))
    routes = Action().desc("列出已挂载的 HTTP 路由").callback(partial(list_routes, platform))
    describe = (
        Action()
        .desc("查看单个服务及其 actions")
        .param("key", None, NonEmptyText(), "服务 key")
        .label("output", "detail")
        .callback(partial(_cli_describe, platform))
    )
    return (
        Service(ServiceType.CLI)
        .add_action("services", services)
        .add_action("routes", routes)
        .add_action("describe", describe)
    )
