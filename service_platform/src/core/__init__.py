"""
注册核心：Action / Service 数据模型与 Platform 编排。

说明：
- core 只负责“翻译 + 注册”，从不执行 Action；
- 具体调度器（FastAPI / click）的实现位于 dispatchers 包，core 仅依赖其 Protocol。
"""

from service_platform.src.core.action import Action, ActionParam
from service_platform.src.core.platform import Platform
from service_platform.src.core.service import Service, ServiceType

__all__ = ["Action", "ActionParam", "Platform", "Service", "ServiceType"]
