from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import EXTENSION_NAME
from ..pipeline import CONTINUE, InstallCtx, StepResult

logger = logging.getLogger(__name__)


class SummaryStep:
    step_id = "90_summary"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        satisfied = (state.get("php") or {}).get("satisfied") or []
        if satisfied:
            logger.info(
                "%s was already installed for: %s",
                EXTENSION_NAME,
                ", ".join(f"PHP {v}" for v in satisfied),
            )
        return CONTINUE
