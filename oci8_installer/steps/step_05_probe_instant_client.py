from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.oracle import probe_instant_client
from ..pipeline import CONTINUE, InstallCtx, StepResult

logger = logging.getLogger(__name__)


class ProbeInstantClientStep:
    step_id = "05_probe_instant_client"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        status = probe_instant_client(ctx.host, ctx.cfg)
        state["instant_client"] = {
            "dir": ctx.cfg.instant_client_dir,
            "ready": status.ready,
            "missing": status.missing,
        }
        if status.ready:
            logger.info("Oracle Instant Client already set up at %s", ctx.cfg.instant_client_dir)
        return CONTINUE
