from __future__ import annotations

from typing import Any, Dict

from ..pipeline import CONTINUE, InstallCtx, StepResult


class CleanupStep:
    step_id = "80_cleanup"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        ctx.host.remove_tree(ctx.cfg.oci8_source_dir)
        return CONTINUE
