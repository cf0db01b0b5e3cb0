from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import EXTENSION_NAME
from ..pipeline import CONTINUE, InstallCtx, StepResult, halt

logger = logging.getLogger(__name__)


class CheckRuntimesStep:
    step_id = "15_check_runtimes"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        php = state.get("php") or {}
        detected = php.get("detected") or []
        installable = php.get("installable") or []

        if not detected:
            return halt(
                1,
                f"No PHP versions ({', '.join(ctx.cfg.versions)}) found on this server. "
                "Please install PHP first.",
            )

        if not installable:
            for version in detected:
                logger.info("PHP %s: %s already installed", version, EXTENSION_NAME)
            return halt(0, f"{EXTENSION_NAME} is already installed for every detected PHP version")

        return CONTINUE
