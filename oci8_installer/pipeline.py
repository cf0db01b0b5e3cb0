from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .config import InstallerConfig
from .errors import InstallerError
from .lib.host import Host
from .prompt import Prompter
from .state_store import ensure_defaults, mark_step_completed, mark_step_skipped, record_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallCtx:
    cfg: InstallerConfig
    host: Host
    prompter: Prompter


@dataclass(frozen=True)
class StepResult:
    """Outcome of one step. ``exit_code`` set means the run ends here."""

    exit_code: Optional[int] = None
    message: str = ""

    @property
    def halted(self) -> bool:
        return self.exit_code is not None


CONTINUE = StepResult()


def halt(exit_code: int, message: str) -> StepResult:
    return StepResult(exit_code=exit_code, message=message)


class Step(Protocol):
    """A single idempotent step.

    Steps may also define ``skip_reason(ctx, state) -> Optional[str]``; a
    non-empty reason skips the step.
    """

    step_id: str

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> StepResult:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]
    skipped_steps: List[str]
    exit_code: int
    message: str = ""
    halted_at: Optional[str] = None


def run_pipeline(*, ctx: InstallCtx, state: Dict[str, Any], steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first halting result or failure."""

    state = ensure_defaults(state)
    ran: List[str] = []
    skipped: List[str] = []

    for step in steps:
        state["execution"]["current_step"] = step.step_id

        skip_reason = getattr(step, "skip_reason", None)
        reason = skip_reason(ctx, state) if skip_reason is not None else None
        if reason:
            logger.info("Skipping step %s (%s)", step.step_id, reason)
            mark_step_skipped(state, step.step_id)
            skipped.append(step.step_id)
            continue

        logger.info("Running step %s", step.step_id)
        try:
            result = step.run(ctx, state)
        except (InstallerError, OSError) as e:
            logger.error("Step %s failed: %s", step.step_id, e)
            record_error(state, step.step_id, str(e))
            state["execution"]["current_step"] = None
            state["execution"]["exit_code"] = 1
            return PipelineResult(
                state=state,
                ran_steps=ran,
                skipped_steps=skipped,
                exit_code=1,
                message=str(e),
                halted_at=step.step_id,
            )

        mark_step_completed(state, step.step_id)
        ran.append(step.step_id)

        if result.halted:
            level = logging.INFO if result.exit_code == 0 else logging.ERROR
            logger.log(level, "Stopping after %s: %s", step.step_id, result.message)
            state["execution"]["current_step"] = None
            state["execution"]["exit_code"] = result.exit_code
            return PipelineResult(
                state=state,
                ran_steps=ran,
                skipped_steps=skipped,
                exit_code=int(result.exit_code or 0),
                message=result.message,
                halted_at=step.step_id,
            )

    state["execution"]["current_step"] = None
    state["execution"]["exit_code"] = 0
    return PipelineResult(state=state, ran_steps=ran, skipped_steps=skipped, exit_code=0)
