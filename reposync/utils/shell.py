"""Shell 命令执行工具 — 统一子进程调用

通过 CommandExecutor 协议抽象子进程执行，方便测试替换。
stdout 与 stderr 合并为同一个文本流，作为完整的诊断输出。
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from reposync.core.exceptions import ToolUnavailableError

logger = logging.getLogger(__name__)


# =========================================================================
# 命令执行结果
# =========================================================================

@dataclass(frozen=True)
class CommandResult:
    """命令执行结果（与 subprocess 解耦）"""

    returncode: int
    output: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


# =========================================================================
# 命令执行器协议
# =========================================================================

class CommandExecutor(Protocol):
    """命令执行器协议 — 抽象子进程调用

    测试时可注入记录调用的实现，无需 patch subprocess。
    """

    def execute(
        self,
        args: list[str],
        *,
        cwd: str | Path | None = None,
    ) -> CommandResult:
        """执行命令并返回合并输出和退出码"""
        ...


# =========================================================================
# 默认实现: 本地执行器
# =========================================================================

class LocalExecutor:
    """本地子进程执行器（默认实现）

    cwd 以参数形式传给子进程，不修改当前进程的工作目录。
    """

    def execute(
        self,
        args: list[str],
        *,
        cwd: str | Path | None = None,
    ) -> CommandResult:
        logger.debug("exec: %s (cwd=%s)", " ".join(args), cwd or ".")
        try:
            r = subprocess.run(
                args, stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
                text=True, cwd=str(cwd) if cwd is not None else None, check=False,
            )
        except OSError as e:
            # 可执行文件不存在或 cwd 不可进入
            raise ToolUnavailableError(f"{args[0]}: {e}") from e
        return CommandResult(returncode=r.returncode, output=r.stdout or "")


# =========================================================================
# 全局默认执行器（可替换）
# =========================================================================

_default_executor: CommandExecutor = LocalExecutor()


def get_executor() -> CommandExecutor:
    """获取全局默认命令执行器"""
    return _default_executor


def set_executor(executor: CommandExecutor) -> None:
    """替换全局默认命令执行器（用于测试）"""
    global _default_executor  # noqa: PLW0603
    _default_executor = executor
