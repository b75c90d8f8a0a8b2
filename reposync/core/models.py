"""数据模型"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from reposync.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SyncTarget:
    """同步目标：远端地址 + 本地工作目录

    构造时校验两个字段均非空，配置缺失在创建阶段即失败。
    """

    target_dir: Path
    remote_url: str

    def __post_init__(self) -> None:
        if not str(self.target_dir or "").strip():
            raise ConfigurationError("target_dir 不能为空")
        if not (self.remote_url or "").strip():
            raise ConfigurationError("remote_url 不能为空")
        object.__setattr__(self, "target_dir", Path(self.target_dir))
