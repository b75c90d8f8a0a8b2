"""共享 fixture — 记录调用的命令执行器 + 配置隔离"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from reposync.core.config import reset_config
from reposync.utils.shell import CommandResult


@dataclass
class RecordingExecutor:
    """记录每次调用的 argv/cwd，按预设返回结果"""

    returncode: int = 0
    output: str = ""
    calls: list[tuple[list[str], str | Path | None]] = field(default_factory=list)

    def execute(self, args: list[str], *, cwd: str | Path | None = None) -> CommandResult:
        self.calls.append((list(args), cwd))
        return CommandResult(returncode=self.returncode, output=self.output)


@pytest.fixture()
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture(autouse=True)
def _isolated_config():
    reset_config()
    yield
    reset_config()
