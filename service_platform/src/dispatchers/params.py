# -*- coding: utf-8 -*-
"""
参数解析与校验（HTTP / CLI 绑定共用）。

validator 约定：
- 可调用对象：validator(value) -> bool；
- 或带 is_valid(value) -> bool 的对象（可选 description 属性用于错误提示）；
- 参数声明了 injections 时，validator 视为工厂：validator(**resources) 返回真正的校验器。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from service_platform.src.common.app_error_utils import invalid_request_error
from service_platform.src.dispatchers.resources import ResourceRegistry


@dataclass(frozen=True)
class ParamSpec:
    key: str
    default: Any = None
    validator: Any = None
    description: str = ""
    optional: bool = False
    injections: Tuple[str, ...] = field(default_factory=tuple)


def make_param_spec(
    key: str,
    default: Any = None,
    validator: Any = None,
    description: str = "",
    optional: bool = False,
    injections: Iterable[str] = (),
) -> ParamSpec:
    return ParamSpec(
        key=key,
        default=default,
        validator=validator,
        description=str(description or ""),
        optional=bool(optional),
        injections=tuple(injections or ()),
    )


def _describe(validator: Any) -> str:
    text = getattr(validator, "description", None)
    if callable(text):
        text = text()
    return str(text or "").strip()


def check_value(validator: Any, value: Any) -> bool:
    if validator is None:
        return True
    is_valid = getattr(validator, "is_valid", None)
    if callable(is_valid):
        return bool(is_valid(value))
    if callable(validator):
        return bool(validator(value))
    raise TypeError(f"unsupported validator: {validator!r}")


def build_validator(spec: ParamSpec, resources: ResourceRegistry, context: Dict[str, Any]) -> Any:
    if not spec.injections or spec.validator is None:
        return spec.validator
    return spec.validator(**resources.resolve_many(spec.injections, context))


def resolve_params(
    specs: Mapping[str, ParamSpec],
    values: Mapping[str, Any],
    resources: ResourceRegistry,
    context: Optional[Dict[str, Any]] = None,
    on_error: Optional[Callable[[str, str], Exception]] = None,
) -> Dict[str, Any]:
    """
    按声明顺序解析参数值。

    - 提供了值：经 validator 校验；
    - 未提供且 optional：使用 default（不校验）；
    - 未提供且必填：报错。

    on_error(key, message) 可定制异常类型（CLI 绑定转为 click.BadParameter）；默认抛 AppError。
    """
    cache = context if context is not None else {}
    make_error = on_error or (lambda key, message: invalid_request_error(message, details={"param": key}))
    resolved: Dict[str, Any] = {}
    for key, spec in specs.items():
        if key not in values or values[key] is None:
            if spec.optional:
                resolved[key] = spec.default
                continue
            raise make_error(key, f"缺少必填参数: {key}")
        value = values[key]
        validator = build_validator(spec, resources, cache)
        if not check_value(validator, value):
            hint = _describe(validator)
            message = f"参数 {key} 不合法" + (f"：{hint}" if hint else "")
            raise make_error(key, message)
        resolved[key] = value
    return resolved
