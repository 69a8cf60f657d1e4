"""
调度器契约与绑定实现。

说明：
- protocols：Platform 消费的注册契约（HTTP 路由 / CLI 任务）；
- http_router / cli_runner：基于 FastAPI / click 的具体实现；
- params / resources：两种绑定共用的参数校验与资源注入。
"""
