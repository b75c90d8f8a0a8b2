"""GitHub 代码仓与 Wiki 的同步器

本地布局: <root>/<owner>/<name> 与 <root>/<owner>/<name>.wiki
"""

from __future__ import annotations

import re
from pathlib import Path

from reposync.core.exceptions import ConfigurationError
from reposync.core.syncer import RepositorySyncer
from reposync.utils.shell import CommandExecutor

_SAFE_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_.\-]+$")

DEFAULT_HOST = "github.com"


def _check_segment(kind: str, value: str) -> str:
    if not value or not _SAFE_SEGMENT_RE.match(value) or value in (".", ".."):
        raise ConfigurationError(f"{kind} 非法: {value!r}")
    return value


class GitHubRepository(RepositorySyncer):
    """GitHub 代码仓"""

    suffix = ""

    def __init__(
        self,
        owner: str,
        name: str,
        root: str | Path,
        host: str = DEFAULT_HOST,
        executor: CommandExecutor | None = None,
        git_bin: str | None = None,
    ) -> None:
        super().__init__(executor=executor, git_bin=git_bin)
        self.owner = _check_segment("owner", owner)
        self.name = _check_segment("name", name)
        self.host = host
        self.root = Path(root)

    def target_dir(self) -> Path:
        return self.root / self.owner / f"{self.name}{self.suffix}"

    def remote_url(self) -> str:
        return f"https://{self.host}/{self.owner}/{self.name}{self.suffix}.git"

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}{self.suffix}"


class GitHubWiki(GitHubRepository):
    """GitHub 代码仓附带的 Wiki（独立的 .wiki.git 仓库）"""

    suffix = ".wiki"
