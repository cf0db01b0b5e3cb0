from __future__ import annotations

from typing import Any, Dict

from ..lib.fetch import download_if_missing, extract_tarball
from ..pipeline import CONTINUE, InstallCtx, StepResult


class FetchOci8SourceStep:
    step_id = "50_fetch_oci8_source"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        cfg = ctx.cfg
        ctx.host.make_dirs(cfg.oracle_base)
        download_if_missing(ctx.host, cfg.oci8_url, cfg.oci8_tarball)
        # Always start from a pristine tree; earlier builds leave objects behind.
        ctx.host.remove_tree(cfg.oci8_source_dir)
        extract_tarball(ctx.host, cfg.oci8_tarball, cfg.oracle_base)
        return CONTINUE
