"""代码仓同步器

目录不存在则 clone，已存在则 pull。版本控制工具的非零退出统一映射为 SyncError，
访问器未配置统一映射为 ConfigurationError，两者都不在此处捕获或重试。
"""

from __future__ import annotations

from pathlib import Path

from reposync.core.exceptions import ConfigurationError, SyncError
from reposync.core.models import SyncTarget
from reposync.utils.shell import CommandExecutor, get_executor


class RepositorySyncer:
    """代码仓同步基类

    子类提供 target_dir() 和 remote_url() 两个访问器；未覆盖时调用即抛
    ConfigurationError。
    """

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        git_bin: str | None = None,
    ) -> None:
        self._executor = executor
        self._git_bin = git_bin

    # ---- 子类需实现的访问器 ----

    def target_dir(self) -> str | Path:
        """本地工作目录"""
        raise ConfigurationError("Not implemented: target_dir")

    def remote_url(self) -> str:
        """远端 clone 地址"""
        raise ConfigurationError("Not implemented: remote_url")

    # ---- 同步流程 ----

    def needs_clone(self) -> bool:
        """本地工作目录不存在时需要 clone"""
        return not self._resolved_dir().is_dir()

    def sync(self) -> str:
        """clone 或 pull，返回工具的合并输出

        异常:
            ConfigurationError: 访问器未实现或返回空值（在启动子进程之前）
            SyncError: 工具以非零状态退出，message 为原样的合并输出
        """
        repo_dir = self._resolved_dir()
        if repo_dir.is_dir():
            return self.git("pull", cwd=repo_dir)

        url = self.remote_url()
        if not url:
            raise ConfigurationError("remote_url 不能为空")
        return self.git("clone", url, str(repo_dir))

    def git(self, *args: str, cwd: str | Path | None = None) -> str:
        """执行 git 子命令，非零退出抛 SyncError"""
        result = self.executor.execute([self.git_bin, *args], cwd=cwd)
        if not result.success:
            raise SyncError(result.output, returncode=result.returncode)
        return result.output

    @property
    def executor(self) -> CommandExecutor:
        return self._executor if self._executor is not None else get_executor()

    @property
    def git_bin(self) -> str:
        if self._git_bin:
            return self._git_bin
        from reposync.core.config import get_config
        return get_config().git_bin

    def _resolved_dir(self) -> Path:
        raw = self.target_dir()
        if not str(raw or "").strip():
            raise ConfigurationError("target_dir 不能为空")
        return Path(raw)


class TargetSyncer(RepositorySyncer):
    """由显式 SyncTarget 配置的同步器"""

    def __init__(
        self,
        target: SyncTarget,
        executor: CommandExecutor | None = None,
        git_bin: str | None = None,
    ) -> None:
        super().__init__(executor=executor, git_bin=git_bin)
        self.target = target

    def target_dir(self) -> Path:
        return self.target.target_dir

    def remote_url(self) -> str:
        return self.target.remote_url

    def __repr__(self) -> str:
        return f"TargetSyncer({self.target.remote_url!r} -> {str(self.target.target_dir)!r})"
