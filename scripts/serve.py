#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
启动 HTTP 服务（uvicorn + FastAPI app）。

环境变量：
- PLATFORM_HOST / PLATFORM_PORT：监听地址（默认 127.0.0.1:8123）
- PLATFORM_RELOAD=1：开发模式自动重载
- 其余 PLATFORM_* 见 service_platform/src/constants/platform_config.py
"""

import os
import sys

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

import uvicorn

from service_platform.src.common.utils import env_enabled, env_text


def _resolve_port() -> int:
    raw = env_text("PLATFORM_PORT", "8123")
    try:
        val = int(raw)
        if 1 <= val <= 65535:
            return val
    except ValueError:
        pass
    return 8123


def main() -> None:
    reload = env_enabled("PLATFORM_RELOAD", default=False)
    uvicorn.run(
        "service_platform.src.main:app",
        host=env_text("PLATFORM_HOST", "127.0.0.1"),
        port=_resolve_port(),
        reload=reload,
        reload_dirs=[os.path.join(_PROJECT_ROOT, "service_platform", "src")] if reload else None,
    )


if __name__ == "__main__":
    main()
