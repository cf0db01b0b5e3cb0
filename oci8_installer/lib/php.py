from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from ..config import PhpRuntime
from .host import Host

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeScan:
    detected: List[str] = field(default_factory=list)
    installable: List[str] = field(default_factory=list)
    satisfied: List[str] = field(default_factory=list)


def is_installed(host: Host, runtime: PhpRuntime) -> bool:
    return host.which(runtime.binary) is not None


def loaded_modules(host: Host, runtime: PhpRuntime) -> List[str]:
    """Module names reported by ``phpX.Y -m``, lower-cased."""

    r = host.run([runtime.binary, "-m"], check=False)
    if r.returncode != 0:
        logger.warning("%s -m exited with %s", runtime.binary, r.returncode)
    modules: List[str] = []
    for line in r.stdout.splitlines():
        name = line.strip()
        # Section headers: [PHP Modules], [Zend Modules]
        if not name or name.startswith("["):
            continue
        modules.append(name.lower())
    return modules


def extension_loaded(host: Host, runtime: PhpRuntime, extension: str) -> bool:
    return extension.lower() in loaded_modules(host, runtime)


def scan_runtimes(host: Host, runtimes: Sequence[PhpRuntime], extension: str) -> RuntimeScan:
    scan = RuntimeScan()
    for runtime in runtimes:
        if not is_installed(host, runtime):
            continue
        scan.detected.append(runtime.version)
        if extension_loaded(host, runtime, extension):
            logger.info("PHP %s detected (%s already loaded)", runtime.version, extension)
            scan.satisfied.append(runtime.version)
        else:
            logger.info("PHP %s detected", runtime.version)
            scan.installable.append(runtime.version)
    return scan


def write_extension_ini(host: Host, runtime: PhpRuntime, extension: str) -> str:
    path = str(Path(runtime.mods_available) / f"{extension}.ini")
    host.write_text(path, f"extension={extension}.so\n")
    return path


def enable_extension(host: Host, runtime: PhpRuntime, extension: str) -> None:
    host.run(["phpenmod", "-v", runtime.version, extension])
