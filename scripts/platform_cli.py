#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Service Platform CLI 快捷入口。"""

import os
import sys

# 确保项目根目录在 sys.path 中
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from service_platform.src.cli.main import cli

if __name__ == "__main__":
    cli()
