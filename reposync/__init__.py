"""reposync - 代码仓本地副本同步工具"""

__version__ = "0.1.0"
