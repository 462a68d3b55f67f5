"""
Fire-and-forget policy for non-critical side steps.

A best-effort step runs, and whatever happens is logged and reported back as a
StepOutcome. Exceptions never escape, so the caller's result does not depend
on the step.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from hpworld.utils.logger import get_logger

logger = get_logger("best_effort")


@dataclass
class StepOutcome:
    step: str
    ok: bool
    skipped: bool = False
    error: Optional[str] = None
    value: Any = None


class StepSkipped(Exception):
    """Raised inside a step to report it did not run (e.g. missing config)."""


async def best_effort_async(step: str, fn: Callable[..., Awaitable[Any]], *args, **kwargs) -> StepOutcome:
    try:
        value = await fn(*args, **kwargs)
    except StepSkipped as e:
        logger.info("%s skipped: %s", step, e)
        return StepOutcome(step=step, ok=True, skipped=True)
    except Exception as e:
        logger.warning("%s failed (non-critical): %s", step, e)
        return StepOutcome(step=step, ok=False, error=str(e))
    return StepOutcome(step=step, ok=True, value=value)
