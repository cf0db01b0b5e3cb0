from __future__ import annotations

import logging
from typing import Any, Dict

from ..pipeline import CONTINUE, InstallCtx, StepResult
from ..prompt import choose_version
from ..state_store import record_decision

logger = logging.getLogger(__name__)


class SelectVersionStep:
    step_id = "20_select_version"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        php = state["php"]
        installable = list(php["installable"])

        if len(installable) == 1:
            version = installable[0]
            logger.info("Only one PHP version needs OCI8. Using PHP %s", version)
            record_decision(state, "selection", "automatic")
        else:
            version = choose_version(ctx.prompter, installable)
            record_decision(state, "selection", "operator")

        php["selected"] = version
        logger.info("Selected PHP version: %s", version)
        return CONTINUE
