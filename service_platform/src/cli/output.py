# -*- coding: utf-8 -*-
"""
终端输出格式化。

支持两种模式：
- rich 模式（默认）：使用表格/面板渲染
- JSON 模式（--json）：原始 JSON 输出，便于管道/脚本消费
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

# 服务类型颜色映射
_TYPE_COLORS = {
    "http": "green",
    "cli": "cyan",
    "graphql": "magenta",
}


def _type_style(service_type: str) -> str:
    return _TYPE_COLORS.get(str(service_type).lower(), "white")


def print_json(data: Any) -> None:
    """JSON 格式输出。"""
    console.print_json(json.dumps(data, ensure_ascii=False, default=str))


def print_error(message: str, code: Optional[str] = None) -> None:
    """错误信息输出。"""
    title = f"错误 [{code}]" if code else "错误"
    console.print(Panel(message, title=title, border_style="red"))


def print_warning(message: str) -> None:
    """警告信息输出。"""
    console.print(f"[yellow]{message}[/yellow]")


def print_summary(data: Dict[str, Any], title: str) -> None:
    """面板形式展示汇总信息。"""
    lines = []
    for key, value in data.items():
        lines.append(f"{key}: {value}")
    console.print(Panel("\n".join(lines), title=title, border_style="cyan"))


def print_services_table(items: List[Dict[str, Any]]) -> None:
    """表格形式展示服务列表。"""
    if not items:
        print_warning("暂无服务")
        return
    table = Table(title="服务列表")
    table.add_column("Key", style="cyan", min_width=16)
    table.add_column("类型", width=8)
    table.add_column("Actions", justify="right", width=8)
    for item in items:
        t = str(item.get("type", ""))
        table.add_row(
            str(item.get("key", "")),
            f"[{_type_style(t)}]{t}[/{_type_style(t)}]",
            str(item.get("actions", "")),
        )
    console.print(table)


def print_routes_table(items: List[Dict[str, Any]]) -> None:
    """表格形式展示 HTTP 路由。"""
    if not items:
        print_warning("暂无路由（HTTP 服务未初始化）")
        return
    table = Table(title="HTTP 路由")
    table.add_column("方法", style="green", width=8)
    table.add_column("路径", style="white", min_width=20)
    table.add_column("别名", style="dim")
    table.add_column("分组", style="dim")
    for item in items:
        table.add_row(
            str(item.get("method", "")),
            str(item.get("path", "")),
            str(item.get("alias") or ""),
            ", ".join(item.get("groups") or []),
        )
    console.print(table)


def print_service_detail(item: Dict[str, Any]) -> None:
    """面板 + 表格展示单个服务。"""
    lines = [
        f"Key:    {item.get('key', '')}",
        f"类型:   {item.get('type', '')}",
        f"Actions: {item.get('actions', 0)}",
    ]
    console.print(Panel("\n".join(lines), title="服务详情", border_style="cyan"))
    actions = item.get("items") or []
    if not actions:
        return
    table = Table()
    table.add_column("Key", style="cyan")
    table.add_column("方法", width=8)
    table.add_column("路径")
    table.add_column("参数", style="dim")
    table.add_column("说明", style="dim", max_width=40)
    for action in actions:
        table.add_row(
            str(action.get("key", "")),
            str(action.get("method", "")),
            str(action.get("path", "")),
            ", ".join(p.get("key", "") for p in action.get("params") or []),
            str(action.get("description", "")),
        )
    console.print(table)


def render_result(task_name: str, result: Any, output_json: bool = False) -> None:
    """按任务渲染返回值；未知任务按数据形态兜底。"""
    if result is None:
        return
    if output_json:
        print_json(result)
        return
    if task_name == "services":
        print_services_table(result)
    elif task_name == "routes":
        print_routes_table(result)
    elif task_name == "describe":
        print_service_detail(result)
    elif isinstance(result, dict):
        print_summary(result, task_name)
    else:
        console.print(str(result))
