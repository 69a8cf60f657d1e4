from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from service_platform.src.constants import SERVICE_TYPE_CLI, SERVICE_TYPE_GRAPHQL, SERVICE_TYPE_HTTP
from service_platform.src.core.action import Action


class ServiceType(str, Enum):
    HTTP = SERVICE_TYPE_HTTP
    CLI = SERVICE_TYPE_CLI
    GRAPHQL = SERVICE_TYPE_GRAPHQL


class Service:
    """
    同一目标调度器下的一组 Action（key -> Action，保持插入顺序）。

    type 在构造时确定，之后不可修改。
    """

    def __init__(self, service_type: ServiceType) -> None:
        self._type = ServiceType(service_type)
        self._actions: Dict[str, Action] = {}

    @property
    def type(self) -> ServiceType:
        return self._type

    def add_action(self, key: str, action: Action) -> "Service":
        self._actions[key] = action
        return self

    def remove_action(self, key: str) -> "Service":
        self._actions.pop(key, None)
        return self

    def get_action(self, key: str) -> Optional[Action]:
        return self._actions.get(key)

    def get_actions(self) -> List[Action]:
        return list(self._actions.values())

    def __iter__(self) -> Iterator[Tuple[str, Action]]:
        return iter(list(self._actions.items()))

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, key: object) -> bool:
        return key in self._actions

    def __repr__(self) -> str:
        return f"Service(type={self._type.value!r}, actions={list(self._actions)!r})"
