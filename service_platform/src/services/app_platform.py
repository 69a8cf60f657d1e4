from __future__ import annotations

from typing import Optional

from service_platform.src.core.platform import Platform
from service_platform.src.dispatchers.cli_runner import ClickTaskRunner
from service_platform.src.dispatchers.http_router import FastApiHttpRouter
from service_platform.src.dispatchers.resources import ResourceRegistry
from service_platform.src.services.system import (
    RESOURCE_NAME_PLATFORM,
    build_system_cli_service,
    build_system_http_service,
)

SYSTEM_HTTP_SERVICE_KEY = "system.http"
SYSTEM_CLI_SERVICE_KEY = "system.cli"


class AppPlatform(Platform):
    """
    应用平台：FastAPI 路由与 click 任务共享同一个资源注册表，并预置系统服务。
    """

    def __init__(self, resources: Optional[ResourceRegistry] = None, register_aliases: Optional[bool] = None) -> None:
        self.resources = resources if resources is not None else ResourceRegistry()
        super().__init__(
            http_router=FastApiHttpRouter(resources=self.resources, register_aliases=register_aliases),
            cli_factory=lambda: ClickTaskRunner(resources=self.resources, name="platform"),
        )
        self.resources.set(RESOURCE_NAME_PLATFORM, lambda: self)
        self.add_service(SYSTEM_HTTP_SERVICE_KEY, build_system_http_service())
        self.add_service(SYSTEM_CLI_SERVICE_KEY, build_system_cli_service(self))


def create_platform(register_aliases: Optional[bool] = None) -> AppPlatform:
    return AppPlatform(register_aliases=register_aliases)
