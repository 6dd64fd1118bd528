"""
Fan-out/join over child fields.

Every child is started before any is awaited. Values are collected under the
child's key, so callers can assemble results in input order no matter which
child settles first. The first failing child wins: the join stops waiting,
cancels whatever is still pending and returns that child's result.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping

from schemarules.engine.field import Field, FieldResult

logger = logging.getLogger(__name__)


@dataclass
class JoinOutcome:
    values: dict[Hashable, Any] = field(default_factory=dict)
    failure: FieldResult | None = None
    failed_key: Hashable | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


async def gather_fields(children: Mapping[Hashable, Field]) -> JoinOutcome:
    outcome = JoinOutcome()
    if not children:
        return outcome

    tasks: dict[asyncio.Task, Hashable] = {
        asyncio.ensure_future(child.validate()): key for key, child in children.items()
    }
    order = list(tasks)
    pending: set[asyncio.Task] = set(order)
    logger.debug("Fan-out of %d child field(s)", len(order))

    try:
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for task in (t for t in order if t in done):
                key = tasks[task]
                result = task.result()
                if not result.valid:
                    logger.debug("Child '%s' failed, discarding %d pending", key, len(pending))
                    outcome.failure = result
                    outcome.failed_key = key
                    return outcome
                outcome.values[key] = result.value
        return outcome
    finally:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
