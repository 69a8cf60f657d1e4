# -*- coding: utf-8 -*-
"""click 任务运行器绑定测试。"""

import unittest

import click
from _fakes import FakeRouter

from service_platform.src.core.action import Action
from service_platform.src.core.platform import Platform
from service_platform.src.core.service import Service, ServiceType
from service_platform.src.dispatchers.cli_runner import ClickTaskRunner, LabeledCommand


def _greet_runner() -> ClickTaskRunner:
    runner = ClickTaskRunner()
    (
        runner.task("greet")
        .desc("打招呼")
        .action(lambda name, times: f"{name}x{times}")
        .param("name", None, None, "名字", False, [])
        .param("times", "1", str.isdigit, "次数", True, [])
        .label("group", "demo")
    )
    return runner


class TestClickTaskRunner(unittest.TestCase):
    def test_run_with_options_and_defaults(self):
        runner = _greet_runner()
        self.assertEqual("bobx1", runner.run(["greet", "--name", "bob"]))
        self.assertEqual("bobx3", runner.run(["greet", "--name", "bob", "--times", "3"]))

    def test_missing_required_option(self):
        with self.assertRaises(click.UsageError):
            _greet_runner().run(["greet"])

    def test_validator_failure_is_bad_parameter(self):
        with self.assertRaises(click.BadParameter) as ctx:
            _greet_runner().run(["greet", "--name", "bob", "--times", "many"])
        self.assertIn("times", ctx.exception.format_message())

    def test_underscore_keys_map_to_dashed_flags(self):
        runner = ClickTaskRunner()
        runner.task("purge").action(lambda dry_run: dry_run).param("dry_run", "no", None, "", True, [])
        self.assertEqual("yes", runner.run(["purge", "--dry-run", "yes"]))
        self.assertEqual("no", runner.run(["purge"]))

    def test_group_exposes_commands_with_labels_and_help(self):
        group = _greet_runner().build_group()
        command = group.commands["greet"]
        self.assertIsInstance(command, LabeledCommand)
        self.assertEqual({"group": "demo"}, command.labels)
        self.assertEqual("打招呼", command.help)
        self.assertEqual(["name", "times"], [p.name for p in command.params])

    def test_param_injections_build_validator(self):
        runner = ClickTaskRunner()
        runner.resources.set("allowed", lambda: {"a", "b"})
        (
            runner.task("pick")
            .action(lambda choice: choice)
            .param("choice", None, lambda allowed: (lambda v: v in allowed), "", False, ["allowed"])
        )
        self.assertEqual("a", runner.run(["pick", "--choice", "a"]))
        with self.assertRaises(click.BadParameter):
            runner.run(["pick", "--choice", "z"])

    def test_async_callback(self):
        async def compute():
            return 42

        runner = ClickTaskRunner()
        runner.task("answer").action(compute)
        self.assertEqual(42, runner.run(["answer"]))

    def test_help_raises_exit_instead_of_returning(self):
        with self.assertRaises(click.exceptions.Exit) as ctx:
            _greet_runner().run(["greet", "--help"])
        self.assertEqual(0, ctx.exception.exit_code)

    def test_task_without_action(self):
        runner = ClickTaskRunner()
        runner.task("empty")
        with self.assertRaises(click.UsageError):
            runner.run(["empty"])

    def test_redeclared_task_replaces_previous(self):
        runner = _greet_runner()
        with self.assertLogs("service_platform.src.dispatchers.cli_runner", level="WARNING"):
            runner.task("greet").action(lambda: "replaced")
        self.assertEqual("replaced", runner.run(["greet"]))
        self.assertEqual(["greet"], list(runner.tasks))

    def test_describe(self):
        task = _greet_runner().get_task("greet")
        self.assertEqual(
            {"name": "greet", "description": "打招呼", "params": ["name", "times"], "labels": {"group": "demo"}},
            task.describe(),
        )


class TestPlatformWithClick(unittest.TestCase):
    def test_platform_init_registers_runnable_tasks(self):
        service = Service(ServiceType.CLI).add_action(
            "add",
            Action()
            .desc("两数相加")
            .param("a", None, str.isdigit, "")
            .param("b", "0", str.isdigit, "", True)
            .callback(lambda a, b: int(a) + int(b)),
        )
        platform = Platform(http_router=FakeRouter())
        platform.add_service("math", service).init("cli")
        self.assertIsInstance(platform.cli, ClickTaskRunner)
        self.assertEqual(5, platform.cli.run(["add", "--a", "2", "--b", "3"]))
        self.assertEqual(2, platform.cli.run(["add", "--a", "2"]))


if __name__ == "__main__":
    unittest.main()
