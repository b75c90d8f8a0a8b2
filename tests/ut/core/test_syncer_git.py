"""使用真实 git 的同步测试（未安装 git 时跳过）"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from reposync.core.exceptions import SyncError
from reposync.core.models import SyncTarget
from reposync.core.syncer import TargetSyncer
from reposync.utils.shell import LocalExecutor

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git 不可用")


def _git(*args: str, cwd: Path) -> None:
    subprocess.run(
        ["git", "-c", "user.name=t", "-c", "user.email=t@example.com", *args],
        cwd=str(cwd), check=True, capture_output=True,
    )


@pytest.fixture()
def origin(tmp_path: Path) -> Path:
    """带一次提交的本地源仓库"""
    src = tmp_path / "origin"
    src.mkdir()
    _git("init", "-q", cwd=src)
    (src / "README").write_text("v1\n", encoding="utf-8")
    _git("add", "README", cwd=src)
    _git("commit", "-q", "-m", "init", cwd=src)
    return src


def test_clone_then_pull(origin: Path, tmp_path: Path) -> None:
    dest = tmp_path / "work"
    syncer = TargetSyncer(
        SyncTarget(target_dir=dest, remote_url=str(origin)), executor=LocalExecutor(),
    )

    syncer.sync()
    assert (dest / "README").read_text(encoding="utf-8") == "v1\n"

    (origin / "README").write_text("v2\n", encoding="utf-8")
    _git("commit", "-q", "-am", "update", cwd=origin)

    syncer.sync()
    assert (dest / "README").read_text(encoding="utf-8") == "v2\n"


def test_pull_outside_work_tree_fails(tmp_path: Path) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()
    syncer = TargetSyncer(
        SyncTarget(target_dir=plain, remote_url="unused"), executor=LocalExecutor(),
    )
    with pytest.raises(SyncError, match="not a git repository"):
        syncer.sync()
