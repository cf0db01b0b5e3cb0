from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional

from .config import INSTANT_CLIENT_RELEASE, load_installer_config
from .lib.host import Host
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import InstallCtx, PipelineResult, run_pipeline
from .prompt import ConsolePrompter
from .state_store import ensure_defaults, record_error, save_state
from .steps import (
    BuildOci8Step,
    CheckPrivilegesStep,
    CheckRuntimesStep,
    CleanupStep,
    ConfirmInstallStep,
    DetectPhpStep,
    FetchOci8SourceStep,
    InstallDependenciesStep,
    LinkLibaioStep,
    ProbeInstantClientStep,
    ProvisionInstantClientStep,
    RestartFpmStep,
    SelectVersionStep,
    SummaryStep,
    VerifyStep,
)

logger = logging.getLogger(__name__)


DEFAULT_STATE_PATH = "/var/lib/oci8-installer/last-run.json"


def build_steps():
    return [
        CheckPrivilegesStep(),
        ProbeInstantClientStep(),
        DetectPhpStep(),
        CheckRuntimesStep(),
        SelectVersionStep(),
        ConfirmInstallStep(),
        InstallDependenciesStep(),
        LinkLibaioStep(),
        ProvisionInstantClientStep(),
        FetchOci8SourceStep(),
        BuildOci8Step(),
        RestartFpmStep(),
        CleanupStep(),
        VerifyStep(),
        SummaryStep(),
    ]


def run_workflow(ctx: InstallCtx, state: Optional[Dict[str, Any]] = None) -> PipelineResult:
    return run_pipeline(ctx=ctx, state=state if state is not None else {}, steps=build_steps())


def run(
    *,
    config_path: Optional[str] = None,
    state_path: Optional[str] = DEFAULT_STATE_PATH,
    log_path: str = DEFAULT_LOG_PATH,
) -> int:
    """Run the installer once against this machine. Returns the process exit code."""

    actual_log_path = configure_logging(log_path=log_path)

    logger.info("OCI8 installer for Ubuntu 24.04 (Oracle Instant Client %s)", INSTANT_CLIENT_RELEASE)

    state: Dict[str, Any] = ensure_defaults({"execution": {"paths": {"log_path": actual_log_path}}})
    exit_code = 1

    try:
        ctx = InstallCtx(cfg=load_installer_config(config_path), host=Host(), prompter=ConsolePrompter())
        result = run_workflow(ctx, state)
        exit_code = result.exit_code
        if exit_code == 0 and result.halted_at is None:
            logger.info("Installation completed!")
        elif exit_code != 0:
            logger.error("%s", result.message)
    except Exception as e:
        logger.exception("Installer failed")
        record_error(state, state["execution"].get("current_step"), str(e))
        state["execution"]["exit_code"] = 1
    finally:
        if state_path:
            try:
                save_state(state_path, state)
            except OSError as e:
                logger.warning("Could not save run record to %s: %s", state_path, e)
    return exit_code


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="oci8-installer")
    p.add_argument("--config", default=None, help="Optional YAML overrides (paths, URLs, versions)")
    p.add_argument("--state", default=DEFAULT_STATE_PATH, help="Path to run record (json|yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer log")

    args = p.parse_args(argv)

    return run(config_path=args.config, state_path=args.state, log_path=args.log)
