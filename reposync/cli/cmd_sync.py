"""CLI — 同步命令"""

from __future__ import annotations

import logging

import click

from reposync.core.config import get_config
from reposync.core.exceptions import ConfigurationError, SyncError
from reposync.core.github import GitHubRepository, GitHubWiki
from reposync.core.models import SyncTarget
from reposync.core.syncer import RepositorySyncer, TargetSyncer

logger = logging.getLogger(__name__)


def register(group: click.Group) -> None:
    group.add_command(sync)
    group.add_command(github)
    group.add_command(targets)


def _run(syncer: RepositorySyncer, label: str, dry_run: bool) -> None:
    """执行同步并把异常映射为退出码"""
    try:
        action = "clone" if syncer.needs_clone() else "pull"
        if dry_run:
            click.echo(f"{action} {label}")
            return
        logger.info("%s: %s", action, label, extra={"target": label})
        output = syncer.sync()
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    except SyncError as e:
        logger.error("同步失败: %s (rc=%s)", label, e.returncode, extra={"target": label})
        click.echo(e.message, nl=not e.message.endswith("\n"), err=True)
        raise SystemExit(1) from e
    click.echo(output, nl=False)


@click.command()
@click.argument("name", required=False)
@click.option("--url", default="", help="远端地址（与 --dir 一起使用，不读配置）")
@click.option("--dir", "target_dir", default="", help="本地工作目录")
@click.option("--dry-run", is_flag=True, help="只显示将执行 clone 还是 pull")
def sync(name: str | None, url: str, target_dir: str, dry_run: bool) -> None:
    """同步已配置的目标 NAME，或通过 --url/--dir 指定的目标"""
    try:
        if name:
            if url or target_dir:
                raise click.UsageError("NAME 与 --url/--dir 不能同时使用")
            target = get_config().get_target(name)
            label = name
        else:
            if not url or not target_dir:
                raise click.UsageError("需要 NAME，或同时指定 --url 和 --dir")
            target = SyncTarget(target_dir=target_dir, remote_url=url)
            label = target_dir
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    _run(TargetSyncer(target), label, dry_run)


@click.command()
@click.argument("owner")
@click.argument("name")
@click.option("--wiki", is_flag=True, help="同步该仓库的 Wiki")
@click.option("--root", default="", help="本地根目录（默认取配置 root_dir）")
@click.option("--host", default="github.com", show_default=True, help="GitHub 主机名")
@click.option("--dry-run", is_flag=True, help="只显示将执行 clone 还是 pull")
def github(owner: str, name: str, wiki: bool, root: str, host: str, dry_run: bool) -> None:
    """同步 GitHub 仓库 OWNER/NAME 到 <root>/OWNER/NAME"""
    cls = GitHubWiki if wiki else GitHubRepository
    try:
        repo = cls(owner, name, root or get_config().root_dir, host=host)
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    _run(repo, repo.full_name, dry_run)


@click.command()
def targets() -> None:
    """列出配置文件中的同步目标"""
    cfg = get_config()
    if not cfg.targets:
        click.echo("没有已配置的同步目标。")
        return
    for name in sorted(cfg.targets):
        try:
            t = cfg.get_target(name)
        except ConfigurationError as e:
            click.echo(f"  {name:20s} [无效] {e}")
            continue
        click.echo(f"  {name:20s} {t.remote_url}  ->  {t.target_dir}")
