# -*- coding: utf-8 -*-
"""
调度器注册契约。

Platform 只依赖这里的 Protocol：任何提供同形方法的对象（FastAPI/click 绑定、测试里的 fake）都可以接入。
GraphQL 契约暂留空，Platform 的 GraphQL 初始化目前不发起任何调用。
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Protocol, runtime_checkable


@runtime_checkable
class RouteBuilder(Protocol):
    def groups(self, groups: Iterable[str]) -> "RouteBuilder": ...

    def alias(self, path: str, params: Dict[str, Any]) -> "RouteBuilder": ...

    def param(
        self,
        key: str,
        default: Any,
        validator: Any,
        description: str,
        optional: bool,
        injections: Iterable[str],
    ) -> "RouteBuilder": ...

    def inject(self, name: str) -> "RouteBuilder": ...

    def label(self, key: str, value: Any) -> "RouteBuilder": ...

    def action(self, callback: Callable[..., Any]) -> "RouteBuilder": ...


@runtime_checkable
class HttpRouter(Protocol):
    def add_route(self, method: str, path: str) -> RouteBuilder: ...


@runtime_checkable
class TaskBuilder(Protocol):
    def desc(self, text: str) -> "TaskBuilder": ...

    def action(self, callback: Callable[..., Any]) -> "TaskBuilder": ...

    def param(
        self,
        key: str,
        default: Any,
        validator: Any,
        description: str,
        optional: bool,
        injections: Iterable[str],
    ) -> "TaskBuilder": ...

    def label(self, key: str, value: Any) -> "TaskBuilder": ...


@runtime_checkable
class TaskRunner(Protocol):
    def task(self, name: str) -> TaskBuilder: ...
