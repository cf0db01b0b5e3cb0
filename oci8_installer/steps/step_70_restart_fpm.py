from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.systemd import restart_unit, unit_exists
from ..pipeline import CONTINUE, InstallCtx, StepResult
from ..state_store import record_decision, record_warning

logger = logging.getLogger(__name__)


class RestartFpmStep:
    step_id = "70_restart_fpm"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        unit = ctx.cfg.runtime(state["php"]["selected"]).fpm_unit

        if not unit_exists(ctx.host, unit):
            logger.info("%s not found, skipping restart", unit)
            record_decision(state, "fpm_restart", "absent")
            return CONTINUE

        if restart_unit(ctx.host, unit):
            logger.info("%s restarted", unit)
            record_decision(state, "fpm_restart", "restarted")
        else:
            # Not fatal: the CLI check in the verify step decides the outcome.
            record_decision(state, "fpm_restart", "failed")
            record_warning(state, unit=unit, reason="restart_failed")
        return CONTINUE
