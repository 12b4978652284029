from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Protocol, List

from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    companies: list = field(default_factory=list)
    users: list = field(default_factory=list)
    top_ups: list = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            name = type(step).__name__
            logger.debug("step started", extra={"step": name, "status": "started"})
            started = time.monotonic()
            try:
                ctx = step.run(ctx)
            except Exception as exc:
                logger.error("step failed", extra={"step": name, "status": "error", "error": str(exc)})
                raise
            logger.debug(
                "step finished",
                extra={"step": name, "status": "ok", "duration_ms": int((time.monotonic() - started) * 1000)},
            )
        return ctx
