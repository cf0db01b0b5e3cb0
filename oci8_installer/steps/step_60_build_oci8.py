from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import EXTENSION_NAME
from ..lib.php import enable_extension, write_extension_ini
from ..lib.phpize import build_extension
from ..pipeline import CONTINUE, InstallCtx, StepResult

logger = logging.getLogger(__name__)


class BuildOci8Step:
    step_id = "60_build_oci8"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        cfg = ctx.cfg
        runtime = cfg.runtime(state["php"]["selected"])

        build_extension(
            ctx.host,
            runtime,
            cfg.oci8_source_dir,
            configure_args=[f"--with-oci8=instantclient,{cfg.instant_client_dir}"],
        )
        ini = write_extension_ini(ctx.host, runtime, EXTENSION_NAME)
        enable_extension(ctx.host, runtime, EXTENSION_NAME)
        logger.info("Enabled %s for PHP %s (%s)", EXTENSION_NAME, runtime.version, ini)
        return CONTINUE
