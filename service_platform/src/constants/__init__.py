# -*- coding: utf-8 -*-
"""
常量统一出口。

业务代码统一 `from service_platform.src.constants import XXX`，不直接依赖子模块路径。
"""

from service_platform.src.constants.platform_config import *  # noqa: F401,F403
from service_platform.src.constants.status import *  # noqa: F401,F403
