from __future__ import annotations

import logging
from typing import Any, Dict

from ..pipeline import CONTINUE, InstallCtx, StepResult, halt

logger = logging.getLogger(__name__)


class CheckPrivilegesStep:
    step_id = "00_check_privileges"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        if not ctx.host.is_root():
            return halt(1, "Please run as root or with sudo")
        return CONTINUE
