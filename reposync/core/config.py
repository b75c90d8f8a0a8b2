"""集中配置管理

从 YAML 文件加载 + 编程式覆盖。配置文件示例:

    git_bin: git
    root_dir: data/repos
    targets:
      docs:
        url: https://example.com/docs.git
        dir: docs          # 相对路径基于 root_dir
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from reposync.core.exceptions import ConfigurationError
from reposync.core.models import SyncTarget
from reposync.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "configs/reposync.yml"


@dataclass
class Config:
    """全局配置"""

    git_bin: str = "git"
    root_dir: str = "data/repos"
    targets: dict[str, dict[str, str]] = field(default_factory=dict)

    # 未识别的配置项
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        data = load_yaml(path)
        if not data:
            return cls()
        known = {f for f in cls.__dataclass_fields__ if f != "extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        if not isinstance(matched.get("targets", {}), dict):
            raise ConfigurationError(f"{path}: targets 必须是映射")
        for key in ("git_bin", "root_dir"):
            if key in matched and not (isinstance(matched[key], str) and matched[key].strip()):
                raise ConfigurationError(f"{path}: {key} 必须是非空字符串")
        cfg = cls(**matched)
        cfg.extra = extra
        return cfg

    def get_target(self, name: str) -> SyncTarget:
        """按名称取同步目标，相对目录基于 root_dir 解析"""
        if name not in self.targets:
            raise ConfigurationError(f"同步目标未配置: {name}")
        entry = self.targets[name]
        if entry is None:
            raise ConfigurationError(f"同步目标 {name} 内容为空")
        if not isinstance(entry, dict):
            raise ConfigurationError(f"同步目标 {name} 必须是映射")
        url = str(entry.get("url") or "")
        raw_dir = str(entry.get("dir") or name)
        target_dir = Path(raw_dir)
        if not target_dir.is_absolute():
            target_dir = Path(self.root_dir) / target_dir
        return SyncTarget(target_dir=target_dir, remote_url=url)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# 全局单例，首次 import 时不加载文件；由 CLI 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.info("配置已加载: %s", path)
    return _current


def reset_config() -> None:
    """丢弃已加载的配置（测试用）"""
    global _current  # noqa: PLW0603
    _current = None
