"""
通用工具与基础能力（与具体调度器解耦）。

说明：
- core 层不依赖这里的异常类型：注册编排本身不定义错误；
- dispatchers / 入口层通过 AppError 表达“错误是什么”，由 FastAPI handler 或 CLI 入口统一转换。
"""
