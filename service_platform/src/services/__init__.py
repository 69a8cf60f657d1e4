"""
内置服务：平台自身的健康检查与服务清单（HTTP + CLI）。
"""
