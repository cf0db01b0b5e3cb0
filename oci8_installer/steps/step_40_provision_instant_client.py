from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import VerificationError
from ..lib.fetch import download_if_missing, extract_zip
from ..lib.oracle import configure_linker, probe_instant_client
from ..pipeline import CONTINUE, InstallCtx, StepResult

logger = logging.getLogger(__name__)


class ProvisionInstantClientStep:
    step_id = "40_provision_instant_client"

    def skip_reason(self, ctx: InstallCtx, state: Dict[str, Any]) -> Optional[str]:
        if (state.get("instant_client") or {}).get("ready"):
            return "Instant Client already installed"
        return None

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        cfg = ctx.cfg
        host = ctx.host
        base = cfg.oracle_base

        host.make_dirs(base)

        archives = []
        for url in (cfg.basic_zip_url, cfg.sdk_zip_url):
            dest = str(Path(base) / url.rsplit("/", 1)[-1])
            download_if_missing(host, url, dest)
            archives.append(dest)

        if host.is_dir(cfg.instant_client_dir):
            status = probe_instant_client(host, cfg, include_linker=False)
            if not status.ready:
                logger.info("Removing incomplete extraction (%s missing)", status.missing)
                host.remove_tree(cfg.instant_client_dir)

        if not host.is_dir(cfg.instant_client_dir):
            for archive in archives:
                extract_zip(host, archive, base)
        else:
            logger.info("Instant Client already extracted, skipping")

        status = probe_instant_client(host, cfg, include_linker=False)
        if not status.ready:
            raise VerificationError(
                f"Instant Client extraction incomplete at {cfg.instant_client_dir}: {status.missing} missing"
            )

        configure_linker(host, cfg)
        state.setdefault("instant_client", {})["ready"] = True
        state["instant_client"]["missing"] = None
        return CONTINUE
