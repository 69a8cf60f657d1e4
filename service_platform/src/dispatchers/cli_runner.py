# -*- coding: utf-8 -*-
"""
CLI 任务运行器契约的 click 实现。

task(name) 只记录声明；build_group() 时每个任务物化为一个 click 子命令：
- 每个 param 对应一个 --<name> 选项（下划线转为连字符），必填与否取决于 optional；
- 未提供的可选参数使用声明的 default（不经过校验）；
- 校验失败转为 click.BadParameter，由 click 输出用法错误。
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

import click

from service_platform.src.dispatchers.params import ParamSpec, make_param_spec, resolve_params
from service_platform.src.dispatchers.resources import ResourceRegistry

logger = logging.getLogger(__name__)


def _option_flag(key: str) -> str:
    return "--" + str(key).replace("_", "-")


class Task:
    def __init__(self, name: str) -> None:
        self.name = name
        self.description = ""
        self.callback: Optional[Callable[..., Any]] = None
        self.params: Dict[str, ParamSpec] = {}
        self.labels: Dict[str, Any] = {}

    def desc(self, text: str) -> "Task":
        self.description = str(text or "")
        return self

    def action(self, callback: Optional[Callable[..., Any]]) -> "Task":
        self.callback = callback
        return self

    def param(
        self,
        key: str,
        default: Any = None,
        validator: Any = None,
        description: str = "",
        optional: bool = False,
        injections: Iterable[str] = (),
    ) -> "Task":
        self.params[key] = make_param_spec(key, default, validator, description, optional, injections)
        return self

    def label(self, key: str, value: Any) -> "Task":
        self.labels[key] = value
        return self

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "params": list(self.params),
            "labels": dict(self.labels),
        }


class LabeledCommand(click.Command):
    """携带任务 labels 的 click 命令（labels 仅作元数据）。"""

    def __init__(self, *args: Any, labels: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.labels = dict(labels or {})


class ClickTaskRunner:
    def __init__(self, resources: Optional[ResourceRegistry] = None, name: str = "platform") -> None:
        self.resources = resources if resources is not None else ResourceRegistry()
        self.name = name
        self._tasks: Dict[str, Task] = {}

    @property
    def tasks(self) -> Dict[str, Task]:
        return dict(self._tasks)

    def get_task(self, name: str) -> Optional[Task]:
        return self._tasks.get(name)

    def task(self, name: str) -> Task:
        if name in self._tasks:
            logger.warning("task %s redeclared: previous declaration replaced", name)
        task = Task(name)
        self._tasks[name] = task
        return task

    def build_group(self, help_text: Optional[str] = None) -> click.Group:
        group = click.Group(name=self.name, help=help_text)
        for task in self._tasks.values():
            group.add_command(self._build_command(task))
        return group

    def run(self, args: Sequence[str], obj: Any = None) -> Any:
        """
        执行一条命令并返回任务回调的返回值。

        不走 click 的 standalone 流程：用法错误等 click 异常直接抛给调用方，
        --help 触发的 click.exceptions.Exit 也原样抛出，不会被当作任务返回值。
        """
        group = self.build_group()
        with group.make_context(self.name, list(args), obj=obj) as ctx:
            return group.invoke(ctx)

    def _build_command(self, task: Task) -> click.Command:
        resources = self.resources
        options: List[click.Parameter] = []
        # click 选项名 -> 声明的参数 key（key 不是合法标识符时由 click 自行推导选项名）
        option_keys: Dict[str, str] = {}
        for key, spec in task.params.items():
            decls = [_option_flag(key)] + ([key] if key.isidentifier() else [])
            option = click.Option(
                decls,
                default=None,
                required=not spec.optional,
                help=spec.description or None,
                show_default=str(spec.default) if spec.optional and spec.default is not None else False,
            )
            option_keys[option.name] = key
            options.append(option)

        def _bad_parameter(key: str, message: str) -> Exception:
            return click.BadParameter(message, param_hint=_option_flag(key))

        def _invoke(**values: Any) -> Any:
            if task.callback is None:
                raise click.UsageError(f"任务 {task.name} 未绑定 action")
            values = {option_keys.get(name, name): value for name, value in values.items()}
            kwargs = resolve_params(task.params, values, resources, {}, on_error=_bad_parameter)
            result = task.callback(**kwargs)
            if inspect.isawaitable(result):
                result = asyncio.run(_await(result))
            return result

        return LabeledCommand(
            name=task.name,
            callback=_invoke,
            params=options,
            help=task.description or None,
            labels=task.labels,
        )


async def _await(awaitable: Any) -> Any:
    return await awaitable
