from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"json", "yaml", "yml"}:
        return ext
    # Default to JSON for unknown extensions.
    return "json"


def save_state(path: str, state: Dict[str, Any]) -> None:
    """Write the run record. It is informational; nothing reads it back to decide work."""

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fmt = _detect_format(p)
    if fmt in {"yaml", "yml"}:
        try:
            import yaml  # type: ignore
        except Exception as e:  # pragma: no cover
            raise RuntimeError(
                "YAML run record requested but PyYAML is not available. "
                "Use a .json path or install PyYAML."
            ) from e
        p.write_text(yaml.safe_dump(state, sort_keys=False) + "\n", encoding="utf-8")
    else:
        p.write_text(json.dumps(state, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("Run record saved to %s", p)


def ensure_defaults(state: Dict[str, Any]) -> Dict[str, Any]:
    """Fill required keys with defaults (without overriding existing values)."""

    state.setdefault("instant_client", {})
    state.setdefault("php", {})
    state.setdefault("execution", {})

    php = state["php"]
    php.setdefault("detected", [])
    php.setdefault("installable", [])
    php.setdefault("satisfied", [])
    php.setdefault("selected", None)

    exe = state["execution"]
    exe.setdefault("current_step", None)
    exe.setdefault("completed_steps", [])
    exe.setdefault("skipped_steps", [])
    exe.setdefault("decisions", {})
    exe.setdefault("warnings", [])
    exe.setdefault("errors", [])

    return state


def mark_step_completed(state: Dict[str, Any], step_id: str) -> None:
    completed = state.setdefault("execution", {}).setdefault("completed_steps", [])
    if step_id not in completed:
        completed.append(step_id)


def mark_step_skipped(state: Dict[str, Any], step_id: str) -> None:
    skipped = state.setdefault("execution", {}).setdefault("skipped_steps", [])
    if step_id not in skipped:
        skipped.append(step_id)


def record_error(state: Dict[str, Any], step_id: str, error: str) -> None:
    state.setdefault("execution", {}).setdefault("errors", []).append({"step": step_id, "error": error})


def record_warning(state: Dict[str, Any], **warning: Any) -> None:
    state.setdefault("execution", {}).setdefault("warnings", []).append(warning)


def record_decision(state: Dict[str, Any], key: str, value: Any) -> None:
    state.setdefault("execution", {}).setdefault("decisions", {})[key] = value
