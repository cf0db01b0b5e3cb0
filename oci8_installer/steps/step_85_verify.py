from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import EXTENSION_NAME
from ..lib.php import extension_loaded
from ..pipeline import CONTINUE, InstallCtx, StepResult, halt

logger = logging.getLogger(__name__)


class VerifyStep:
    step_id = "85_verify"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        runtime = ctx.cfg.runtime(state["php"]["selected"])
        if not extension_loaded(ctx.host, runtime, EXTENSION_NAME):
            return halt(
                1,
                f"{EXTENSION_NAME} installation failed: not loaded by {runtime.binary}. "
                "Please check the log above.",
            )
        logger.info("%s is installed and loaded for PHP %s", EXTENSION_NAME, runtime.version)
        logger.info("To check status: %s -m | grep %s", runtime.binary, EXTENSION_NAME)
        return CONTINUE
