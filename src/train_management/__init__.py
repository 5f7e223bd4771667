"""列车管理示例包"""

__version__ = "1.0.0"
