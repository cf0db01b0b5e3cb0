from __future__ import annotations

from typing import Any, Dict

from ..lib.pkg import apt_install, apt_update
from ..pipeline import CONTINUE, InstallCtx, StepResult


class InstallDependenciesStep:
    step_id = "30_install_dependencies"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        runtime = ctx.cfg.runtime(state["php"]["selected"])
        apt_update(ctx.host)
        apt_install(ctx.host, ctx.cfg.dependency_packages(runtime))
        return CONTINUE
