from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import EXTENSION_NAME
from ..lib.php import scan_runtimes
from ..pipeline import CONTINUE, InstallCtx, StepResult

logger = logging.getLogger(__name__)


class DetectPhpStep:
    step_id = "10_detect_php"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        logger.info("Detecting installed PHP versions (%s)", ", ".join(ctx.cfg.versions))
        scan = scan_runtimes(ctx.host, ctx.cfg.runtimes, EXTENSION_NAME)
        php = state.setdefault("php", {})
        php["detected"] = list(scan.detected)
        php["installable"] = list(scan.installable)
        php["satisfied"] = list(scan.satisfied)
        return CONTINUE
