# -*- coding: utf-8 -*-
"""
Service Platform CLI 入口。

用法：
    python -m service_platform.src.cli [--json] <任务> [任务选项]
    python scripts/platform_cli.py [--json] <任务> [任务选项]

任务由平台中 CLI 类型服务的 actions 动态生成（key 即任务名）。
"""

from __future__ import annotations

import sys

import click

from service_platform.src.common.errors import AppError
from service_platform.src.common.utils import apply_log_level, env_text
from service_platform.src.constants import (
    DEFAULT_INIT_TYPE,
    DEFAULT_LOG_LEVEL,
    EXIT_CODE_ERROR,
    EXIT_CODE_INTERRUPTED,
    PLATFORM_ENV_INIT_TYPE,
    PLATFORM_ENV_LOG_LEVEL,
)
from service_platform.src.cli.output import console, print_error, render_result
from service_platform.src.services.app_platform import create_platform


class CliError(Exception):
    """CLI 层统一异常，携带退出码。"""

    def __init__(self, message: str, exit_code: int = EXIT_CODE_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


def _run_task(args: tuple, output_json: bool) -> None:
    platform = create_platform()
    platform.init(env_text(PLATFORM_ENV_INIT_TYPE, DEFAULT_INIT_TYPE))
    runner = platform.cli
    if runner is None:
        raise CliError("CLI 服务未初始化（检查 PLATFORM_INIT_TYPE）")

    if not args or args[0] in ("-h", "--help"):
        group = runner.build_group(help_text="Service Platform 任务")
        with click.Context(group, info_name=runner.name) as ctx:
            click.echo(group.get_help(ctx))
        return

    try:
        result = runner.run(args)
    except click.exceptions.Exit as exc:
        # <任务> --help：click 已输出帮助，没有任务结果可渲染
        if exc.exit_code:
            sys.exit(exc.exit_code)
        return
    render_result(args[0], result, output_json=output_json)


@click.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    default=False,
    help="以 JSON 格式输出",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(output_json: bool, args: tuple) -> None:
    """Service Platform 命令行工具"""
    apply_log_level("service_platform", PLATFORM_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    try:
        _run_task(args, output_json)
    except click.ClickException as exc:
        exc.show()
        sys.exit(exc.exit_code)
    except AppError as exc:
        print_error(exc.message, code=exc.code)
        sys.exit(EXIT_CODE_ERROR)
    except CliError as exc:
        print_error(str(exc))
        sys.exit(exc.exit_code)
    except (KeyboardInterrupt, click.exceptions.Abort):
        console.print("\n[yellow]已中断[/yellow]")
        sys.exit(EXIT_CODE_INTERRUPTED)
