from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)


class Host:
    """The live machine.

    Every probe and mutation the installer performs goes through one of these
    methods, so steps can be exercised against a stand-in object in tests.
    """

    def is_root(self) -> bool:
        return os.geteuid() == 0

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        cwd: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CmdResult:
        return run_cmd(argv, check=check, cwd=cwd, env=env)

    def make_dirs(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: str, contents: str) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(contents, encoding="utf-8")
        logger.info("Wrote %s", p)

    def move(self, src: str, dst: str) -> None:
        os.replace(src, dst)

    def remove_tree(self, path: str) -> None:
        p = Path(path)
        if not p.exists() and not p.is_symlink():
            return
        logger.info("Removing %s", p)
        if p.is_dir() and not p.is_symlink():
            shutil.rmtree(p)
        else:
            p.unlink()

    def symlink(self, link: str, target: str) -> None:
        p = Path(link)
        if p.is_symlink():
            # Dangling link left behind by an earlier package layout.
            p.unlink()
        p.symlink_to(target)
        logger.info("Linked %s -> %s", link, target)
