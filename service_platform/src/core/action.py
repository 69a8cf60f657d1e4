from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from service_platform.src.constants import ACTION_TYPE_DEFAULT, HTTP_METHOD_GET


@dataclass(frozen=True)
class ActionParam:
    """
    Action 的单个参数声明。

    validator 对本模块是不透明的：原样交给调度器，由调度器决定如何校验。
    injections 非空时，validator 约定为“工厂”，由调度器注入这些资源后得到真正的校验器。
    """

    key: str
    default: Any = None
    validator: Any = None
    description: str = ""
    optional: bool = False
    injections: Tuple[str, ...] = field(default_factory=tuple)


class Action:
    """
    一个可注册的工作单元（HTTP 路由 / CLI 任务 / GraphQL resolver）。

    只保存元数据，不做任何校验与执行。配置方法返回 self 以便链式声明：

        Action().http("GET", "/health").desc("健康检查").label("scope", "public").callback(fn)
    """

    def __init__(self, action_type: str = ACTION_TYPE_DEFAULT) -> None:
        self._type = action_type
        self._http_method = HTTP_METHOD_GET
        self._http_path = ""
        self._http_alias_path = ""
        self._http_alias_params: Dict[str, Any] = {}
        self._desc = ""
        self._groups: Dict[str, None] = {}
        self._params: Dict[str, ActionParam] = {}
        self._injections: List[str] = []
        self._labels: Dict[str, Any] = {}
        self._callback: Optional[Callable[..., Any]] = None

    # ── 配置 ──

    def http(self, method: str, path: str) -> "Action":
        # 原样保存；大小写规范化由调度器负责
        self._http_method = str(method or HTTP_METHOD_GET)
        self._http_path = str(path or "")
        return self

    def alias(self, path: str, params: Optional[Dict[str, Any]] = None) -> "Action":
        self._http_alias_path = str(path or "")
        self._http_alias_params = dict(params or {})
        return self

    def desc(self, text: str) -> "Action":
        self._desc = str(text or "")
        return self

    def groups(self, groups: Iterable[str]) -> "Action":
        # 用 dict 保序去重
        self._groups = dict.fromkeys(str(g) for g in groups or [])
        return self

    def param(
        self,
        key: str,
        default: Any = None,
        validator: Any = None,
        description: str = "",
        optional: bool = False,
        injections: Iterable[str] = (),
    ) -> "Action":
        # 同名参数覆盖原声明，但保留其原有顺序位置
        self._params[key] = ActionParam(
            key=key,
            default=default,
            validator=validator,
            description=str(description or ""),
            optional=bool(optional),
            injections=tuple(injections or ()),
        )
        return self

    def inject(self, name: str) -> "Action":
        if name not in self._injections:
            self._injections.append(name)
        return self

    def label(self, key: str, value: Any) -> "Action":
        self._labels[key] = value
        return self

    def callback(self, callback: Callable[..., Any]) -> "Action":
        self._callback = callback
        return self

    # ── 读取 ──

    @property
    def type(self) -> str:
        return self._type

    @property
    def http_method(self) -> str:
        return self._http_method

    @property
    def http_path(self) -> str:
        return self._http_path

    @property
    def http_alias_path(self) -> str:
        return self._http_alias_path

    @property
    def http_alias_params(self) -> Dict[str, Any]:
        return dict(self._http_alias_params)

    @property
    def description(self) -> str:
        return self._desc

    @property
    def group_tags(self) -> List[str]:
        return list(self._groups)

    @property
    def params(self) -> Dict[str, ActionParam]:
        return dict(self._params)

    @property
    def injections(self) -> List[str]:
        return list(self._injections)

    @property
    def labels(self) -> Dict[str, Any]:
        return dict(self._labels)

    @property
    def handler(self) -> Optional[Callable[..., Any]]:
        return self._callback

    def get_label(self, key: str, default: Any = None) -> Any:
        return self._labels.get(key, default)

    def __repr__(self) -> str:
        return f"Action(type={self._type!r}, method={self._http_method!r}, path={self._http_path!r})"
