# -*- coding: utf-8 -*-
"""测试用调度器 fake：把所有注册调用按顺序记录到共享 log。"""


class FakeRoute:
    def __init__(self, log: list):
        self._log = log

    def groups(self, groups):
        self._log.append(("groups", list(groups)))
        return self

    def alias(self, path, params):
        self._log.append(("alias", path, dict(params)))
        return self

    def param(self, key, default, validator, description, optional, injections):
        self._log.append(("param", key, default, validator, description, optional, tuple(injections)))
        return self

    def inject(self, name):
        self._log.append(("inject", name))
        return self

    def label(self, key, value):
        self._log.append(("label", key, value))
        return self

    def action(self, callback):
        self._log.append(("action", callback))
        return self


class FakeRouter:
    def __init__(self, log: list | None = None):
        self.log = log if log is not None else []

    def add_route(self, method, path):
        self.log.append(("add_route", method, path))
        return FakeRoute(self.log)


class FakeTask:
    def __init__(self, log: list):
        self._log = log

    def desc(self, text):
        self._log.append(("desc", text))
        return self

    def action(self, callback):
        self._log.append(("task_action", callback))
        return self

    def param(self, key, default, validator, description, optional, injections):
        self._log.append(("task_param", key, default, validator, description, optional, tuple(injections)))
        return self

    def label(self, key, value):
        self._log.append(("task_label", key, value))
        return self


class FakeTaskRunner:
    def __init__(self, log: list | None = None):
        self.log = log if log is not None else []

    def task(self, name):
        self.log.append(("task", name))
        return FakeTask(self.log)
