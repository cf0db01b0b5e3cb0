from __future__ import annotations

from typing import Any, Dict

from ..pipeline import CONTINUE, InstallCtx, StepResult, halt
from ..prompt import confirm
from ..state_store import record_decision


class ConfirmInstallStep:
    step_id = "25_confirm"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        accepted = confirm(ctx.prompter, "Continue with installation?")
        record_decision(state, "confirmed", accepted)
        if not accepted:
            return halt(0, "Installation cancelled.")
        return CONTINUE
