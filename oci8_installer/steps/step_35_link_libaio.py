from __future__ import annotations

import logging
from typing import Any, Dict

from ..pipeline import CONTINUE, InstallCtx, StepResult

logger = logging.getLogger(__name__)


class LinkLibaioStep:
    """Ubuntu 24.04 ships libaio as libaio.so.1t64; Instant Client links against libaio.so.1."""

    step_id = "35_link_libaio"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        link = ctx.cfg.libaio_link
        if ctx.host.exists(link):
            logger.info("%s already present, skipping", link)
            return CONTINUE
        ctx.host.symlink(link, ctx.cfg.libaio_target)
        return CONTINUE
