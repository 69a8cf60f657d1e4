from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from service_platform.src.common.app_error_utils import resource_cycle_error, resource_not_found_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resource:
    name: str
    factory: Callable[..., Any]
    injections: Tuple[str, ...] = field(default_factory=tuple)


class ResourceRegistry:
    """
    注入资源注册表：name -> 工厂函数。

    工厂以关键字参数接收自身声明的 injections；resolve 时按调用粒度缓存，
    同一次请求/任务内同名资源只构造一次。
    """

    def __init__(self) -> None:
        self._resources: Dict[str, Resource] = {}

    def set(self, name: str, factory: Callable[..., Any], injections: Iterable[str] = ()) -> "ResourceRegistry":
        if name in self._resources:
            logger.debug("resource %s overridden", name)
        self._resources[name] = Resource(name=name, factory=factory, injections=tuple(injections or ()))
        return self

    def has(self, name: str) -> bool:
        return name in self._resources

    def names(self) -> List[str]:
        return list(self._resources)

    def resolve(self, name: str, context: Optional[Dict[str, Any]] = None) -> Any:
        """
        解析单个资源。

        context 既是调用方预置值（如 HTTP 的 request），也是本次调用的缓存。
        """
        cache = context if context is not None else {}
        return self._resolve(name, cache, [])

    def resolve_many(self, names: Iterable[str], context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        cache = context if context is not None else {}
        return {name: self._resolve(name, cache, []) for name in names}

    def _resolve(self, name: str, cache: Dict[str, Any], chain: List[str]) -> Any:
        if name in cache:
            return cache[name]
        if name in chain:
            raise resource_cycle_error(chain + [name])
        resource = self._resources.get(name)
        if resource is None:
            raise resource_not_found_error(name)
        chain.append(name)
        try:
            kwargs = {dep: self._resolve(dep, cache, chain) for dep in resource.injections}
        finally:
            chain.pop()
        value = resource.factory(**kwargs)
        cache[name] = value
        return value
