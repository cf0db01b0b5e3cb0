from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import InstallerConfig
from .host import Host

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstantClientStatus:
    ready: bool
    missing: Optional[str] = None


def linker_cache_has_client(host: Host, cfg: InstallerConfig) -> bool:
    r = host.run(["ldconfig", "-p"], check=False)
    for line in r.stdout.splitlines():
        if "libclntsh.so" in line and cfg.instant_client_dir in line:
            return True
    return False


def probe_instant_client(host: Host, cfg: InstallerConfig, *, include_linker: bool = True) -> InstantClientStatus:
    """Check the Instant Client install, stopping at the first missing piece.

    With include_linker=False only the extracted files are checked; that is
    what can be verified straight after unzipping, before ldconfig is set up.
    """

    checks = [
        ("directory", lambda: host.is_dir(cfg.instant_client_dir)),
        ("sdk headers", lambda: host.is_dir(cfg.sdk_include_dir)),
        ("client library", lambda: host.exists(cfg.client_library)),
        ("oci.h", lambda: host.exists(cfg.client_header)),
    ]
    if include_linker:
        checks += [
            ("ld.so config", lambda: host.exists(cfg.ld_conf_path)),
            ("linker cache", lambda: linker_cache_has_client(host, cfg)),
        ]

    for name, check in checks:
        if not check():
            logger.info("Instant Client incomplete: %s missing", name)
            return InstantClientStatus(ready=False, missing=name)
    return InstantClientStatus(ready=True)


def configure_linker(host: Host, cfg: InstallerConfig) -> None:
    host.write_text(cfg.ld_conf_path, cfg.instant_client_dir + "\n")
    host.run(["ldconfig"])
