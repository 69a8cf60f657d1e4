from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Union

from service_platform.src.constants import INIT_TYPE_ALL
from service_platform.src.core.service import Service, ServiceType
from service_platform.src.dispatchers.protocols import HttpRouter, TaskRunner

logger = logging.getLogger(__name__)


class Platform:
    """
    服务注册表 + 启动期注册编排。

    用法：子类在 __init__ 中 add_service(...) 声明自己的服务，应用启动时调用 init(type)，
    把各服务中的 Action 翻译成对应调度器的原生注册调用。

    说明：
    - all 是权威注册表（key 全局唯一，重复 key 直接覆盖）；
    - 每种类型只保留“最近一次 add_service 的服务”作为 init 时使用的代表；
    - init 不做幂等保护：重复调用会向调度器重复注册。
    """

    def __init__(
        self,
        http_router: Optional[HttpRouter] = None,
        cli_factory: Optional[Callable[[], TaskRunner]] = None,
    ) -> None:
        if http_router is None:
            # 懒导入：只有在未注入路由器时才依赖 fastapi 绑定
            from service_platform.src.dispatchers.http_router import FastApiHttpRouter

            http_router = FastApiHttpRouter()
        if cli_factory is None:
            from service_platform.src.dispatchers.cli_runner import ClickTaskRunner

            cli_factory = ClickTaskRunner
        self._http = http_router
        self._cli_factory = cli_factory
        self._cli: Optional[TaskRunner] = None
        self._cli_lock = threading.Lock()
        self._services: Dict[str, Service] = {}
        self._representatives: Dict[ServiceType, Service] = {}
        self._initializers: Dict[ServiceType, Callable[[], None]] = {
            ServiceType.HTTP: self._init_http,
            ServiceType.CLI: self._init_cli,
            ServiceType.GRAPHQL: self._init_graphql,
        }

    @property
    def http(self) -> HttpRouter:
        return self._http

    @property
    def cli(self) -> Optional[TaskRunner]:
        """CLI 任务运行器；首次 init("cli") 之前为 None。"""
        return self._cli

    # ── 注册表 ──

    def add_service(self, key: str, service: Service) -> "Platform":
        self._services[key] = service
        self._representatives[service.type] = service
        return self

    def remove_service(self, key: str) -> "Platform":
        """只从 all 中移除；若该服务仍是其类型的代表，init 时依然会被注册。"""
        self._services.pop(key, None)
        return self

    def get_service(self, key: str) -> Optional[Service]:
        return self._services.get(key)

    def get_services(self) -> Mapping[str, Service]:
        return MappingProxyType(self._services)

    # ── 初始化 ──

    def init(self, init_type: Union[str, ServiceType] = INIT_TYPE_ALL) -> None:
        """
        按类型把服务注册到调度器。

        取值 http / cli / graphql 只初始化对应类型（大小写敏感）；
        "all" 以及任何无法识别的取值都按 HTTP -> CLI -> GraphQL 的固定顺序全量初始化。
        """
        try:
            service_type = ServiceType(init_type)
        except ValueError:
            if init_type != INIT_TYPE_ALL:
                logger.debug("unknown init type %r, falling back to %s", init_type, INIT_TYPE_ALL)
            for initializer in self._initializers.values():
                initializer()
            return
        self._initializers[service_type]()

    def _init_http(self) -> None:
        service = self._representatives.get(ServiceType.HTTP)
        if service is None:
            return
        count = 0
        for action in service.get_actions():
            route = self._http.add_route(action.http_method, action.http_path)
            route.groups(action.group_tags).alias(action.http_alias_path, action.http_alias_params)

            for key, param in action.params.items():
                route.param(key, param.default, param.validator, param.description, param.optional, param.injections)

            for injection in action.injections:
                route.inject(injection)

            for key, label in action.labels.items():
                route.label(key, label)

            route.action(action.handler)
            count += 1
            logger.debug("registered route %s %s", action.http_method, action.http_path)
        logger.info("http init: %s route(s) registered", count)

    def _ensure_cli(self) -> TaskRunner:
        if self._cli is None:
            with self._cli_lock:
                if self._cli is None:
                    self._cli = self._cli_factory()
        return self._cli

    def _init_cli(self) -> None:
        cli = self._ensure_cli()
        service = self._representatives.get(ServiceType.CLI)
        if service is None:
            return
        count = 0
        for key, action in service:
            task = cli.task(key)
            task.desc(action.description).action(action.handler)

            for param_key, param in action.params.items():
                task.param(param_key, param.default, param.validator, param.description, param.optional, param.injections)

            for label_key, label in action.labels.items():
                task.label(label_key, label)
            count += 1
            logger.debug("registered task %s", key)
        logger.info("cli init: %s task(s) registered", count)

    def _init_graphql(self) -> None:
        # GraphQL 注册尚未接入：保留与 HTTP 相同的翻译入口
        pass
