"""reposync 命令行接口

命令按领域拆分为子模块，每个模块注册自己的命令到 main group。
"""

from __future__ import annotations

import os

import click
import yaml

from reposync import __version__
from reposync.core.config import DEFAULT_CONFIG_PATH, init_config
from reposync.core.exceptions import ConfigurationError
from reposync.utils.logger import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path",
    default=lambda: os.getenv("REPOSYNC_CONFIG", DEFAULT_CONFIG_PATH),
    show_default=DEFAULT_CONFIG_PATH, help="配置文件路径",
)
def main(config_path: str) -> None:
    """reposync - 代码仓本地副本同步（不存在则 clone，存在则 pull）"""
    setup_logging(
        level=os.getenv("REPOSYNC_LOG_LEVEL", "INFO"),
        json_output=os.getenv("REPOSYNC_LOG_JSON", "") == "1",
    )
    try:
        init_config(config_path)
    except (ConfigurationError, yaml.YAMLError, ValueError) as e:
        raise click.UsageError(f"配置文件无效: {config_path}: {e}") from e


# 注册各领域子命令
from reposync.cli.cmd_sync import register as _reg_sync  # noqa: E402

_reg_sync(main)
