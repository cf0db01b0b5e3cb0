from __future__ import annotations

import pathlib
import posixpath
import sys
from typing import Dict, List, Optional

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from oci8_installer.config import InstallerConfig
from oci8_installer.errors import CommandError
from oci8_installer.lib.command import CmdResult
from oci8_installer.pipeline import InstallCtx

PROBES = (("ldconfig", "-p"), ("systemctl", "list-units"))


class FakeHost:
    """In-memory stand-in for lib.host.Host.

    Paths are plain strings. Commands that the installer shells out to have
    just enough behaviour to drive a full run: wget creates its output file,
    unzip creates the Instant Client tree, tar creates the source directory,
    ldconfig picks up the ld.so config file and phpenmod makes the extension
    show up in ``phpX.Y -m``.
    """

    def __init__(self, *, root: bool = True) -> None:
        self.root = root
        self.binaries: set[str] = set()
        self.files: set[str] = set()
        self.dirs: set[str] = set()
        self.links: Dict[str, str] = {}
        self.writes: Dict[str, str] = {}
        self.php_modules: Dict[str, set[str]] = {}
        self.ld_cache: List[str] = []
        self.units: List[str] = []
        self.failures: Dict[str, int] = {}
        self.commands: List[List[str]] = []
        self.mutations: List[tuple] = []
        self.unzip_creates_client = True
        self.enable_loads_extension = True

    # setup helpers

    def add_php(self, version: str, *modules: str) -> None:
        self.binaries.add(f"php{version}")
        self.php_modules[f"php{version}"] = {"core", "date", *modules}

    def add_unit(self, unit: str) -> None:
        self.binaries.add("systemctl")
        self.units.append(unit)

    def install_client(self, cfg: InstallerConfig, *, sdk: bool = True, linker: bool = True) -> None:
        self.dirs.add(cfg.instant_client_dir)
        self.files.add(cfg.client_library)
        if sdk:
            self.dirs.add(posixpath.dirname(cfg.sdk_include_dir))
            self.dirs.add(cfg.sdk_include_dir)
            self.files.add(cfg.client_header)
        if linker:
            self.files.add(cfg.ld_conf_path)
            self.ld_cache.append(self._cache_line(cfg.instant_client_dir))

    @staticmethod
    def _cache_line(client_dir: str) -> str:
        return f"\tlibclntsh.so.23.1 (libc6,x86-64) => {client_dir}/libclntsh.so.23.1"

    # Host interface

    def is_root(self) -> bool:
        return self.root

    def which(self, name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.binaries else None

    def exists(self, path: str) -> bool:
        return path in self.files or path in self.dirs or path in self.links

    def is_dir(self, path: str) -> bool:
        return path in self.dirs

    def make_dirs(self, path: str) -> None:
        self.mutations.append(("make_dirs", path))
        self.dirs.add(path)

    def write_text(self, path: str, contents: str) -> None:
        self.mutations.append(("write_text", path))
        self.files.add(path)
        self.writes[path] = contents

    def move(self, src: str, dst: str) -> None:
        self.mutations.append(("move", src, dst))
        self.files.discard(src)
        self.files.add(dst)

    def remove_tree(self, path: str) -> None:
        self.mutations.append(("remove_tree", path))
        prefix = path + "/"
        self.files = {p for p in self.files if p != path and not p.startswith(prefix)}
        self.dirs = {p for p in self.dirs if p != path and not p.startswith(prefix)}

    def symlink(self, link: str, target: str) -> None:
        self.mutations.append(("symlink", link, target))
        self.links[link] = target

    def run(self, argv, *, check: bool = True, cwd=None, env=None) -> CmdResult:
        argv = list(argv)
        self.commands.append(argv)
        if not any(tuple(argv[: len(p)]) == p for p in PROBES) and argv[1:] != ["-m"]:
            self.mutations.append(("run", *argv))

        line = " ".join(argv)
        rc = next((code for prefix, code in self.failures.items() if line.startswith(prefix)), 0)
        stdout = self._respond(argv) if rc == 0 else ""

        if check and rc != 0:
            raise CommandError(argv, rc, "simulated failure")
        return CmdResult(argv=argv, returncode=rc, stdout=stdout, stderr="")

    def _respond(self, argv: List[str]) -> str:
        prog = argv[0]
        if prog in self.php_modules and argv[1:] == ["-m"]:
            return "[PHP Modules]\n" + "\n".join(sorted(self.php_modules[prog])) + "\n\n[Zend Modules]\n\n"
        if argv[:2] == ["ldconfig", "-p"]:
            return "\n".join([f"{len(self.ld_cache)} libs found in cache `/etc/ld.so.cache'", *self.ld_cache]) + "\n"
        if argv == ["ldconfig"]:
            for conf in [p for p in self.writes if p.startswith("/etc/ld.so.conf.d/")]:
                self.ld_cache.append(self._cache_line(self.writes[conf].strip()))
            return ""
        if argv[:2] == ["systemctl", "list-units"]:
            return "".join(f"{u} loaded active running PHP FastCGI Process Manager\n" for u in self.units)
        if prog == "wget":
            self.files.add(argv[argv.index("-O") + 1])
        elif prog == "unzip" and self.unzip_creates_client:
            client_dir = posixpath.join(argv[-1], "instantclient_23_26")
            self.dirs.add(client_dir)
            if "-sdk-" in argv[3]:
                self.dirs.update({f"{client_dir}/sdk", f"{client_dir}/sdk/include"})
                self.files.add(f"{client_dir}/sdk/include/oci.h")
            else:
                self.files.add(f"{client_dir}/libclntsh.so")
        elif prog == "tar":
            archive = argv[argv.index("-xzf") + 1]
            name = posixpath.basename(archive)[: -len(".tgz")]
            self.dirs.add(posixpath.join(argv[argv.index("-C") + 1], name))
        elif prog == "phpenmod" and self.enable_loads_extension:
            self.php_modules[f"php{argv[2]}"].add(argv[3])
        return ""

    def ran(self, *argv: str) -> bool:
        return list(argv) in self.commands


class ScriptedPrompter:
    def __init__(self, answers=()) -> None:
        self.answers = list(answers)
        self.questions: List[str] = []
        self.said: List[str] = []

    def say(self, text: str) -> None:
        self.said.append(text)

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {question}")
        return self.answers.pop(0)


@pytest.fixture
def cfg():
    return InstallerConfig(raw={})


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def make_ctx(cfg):
    def _make(host, answers=()):
        return InstallCtx(cfg=cfg, host=host, prompter=ScriptedPrompter(answers))

    return _make
