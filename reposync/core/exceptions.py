"""统一异常体系

所有业务异常继承 RepoSyncError。
CLI 层据此映射退出码并输出友好提示。
"""

from __future__ import annotations


class RepoSyncError(Exception):
    """同步工具基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(RepoSyncError, NotImplementedError):
    """同步目标未配置或配置不完整（子类未实现访问器也属于此类）"""

    code = "CONFIG_ERROR"


class SyncError(RepoSyncError):
    """版本控制工具以非零状态退出

    message 即工具的合并输出（stdout + stderr），原样保留，不截断、不加前缀。
    工具根本无法启动时抛出子类 ToolUnavailableError。
    """

    code = "SYNC_ERROR"

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class ToolUnavailableError(SyncError):
    """版本控制工具无法启动（可执行文件不存在或 cwd 不可进入）

    没有子进程输出可报告，message 为操作系统错误描述，returncode 为 None。
    """

    code = "TOOL_UNAVAILABLE"
