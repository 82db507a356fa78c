"""Per-caller accounting of accepted provider generations."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from recipe_ai.observability.logging import get_logger


if TYPE_CHECKING:
    from recipe_ai.schemas.generation import TokenUsage


logger = get_logger(__name__)


@runtime_checkable
class UsageTracker(Protocol):
    """Receives one notification per accepted provider generation."""

    async def record_generation(
        self,
        caller_id: str,
        tokens: TokenUsage | None,
        cost: float,
    ) -> None: ...


@dataclass(slots=True)
class CallerUsage:
    """Running totals for one caller."""

    generations: int = 0
    prompt_tokens: int = 0
    completion_tokens: int = 0
    cost_cents: float = 0.0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


class InMemoryUsageTracker:
    """UsageTracker that aggregates totals per caller in process memory."""

    def __init__(self) -> None:
        self._usage: dict[str, CallerUsage] = {}
        self._lock = asyncio.Lock()

    async def record_generation(
        self,
        caller_id: str,
        tokens: TokenUsage | None,
        cost: float,
    ) -> None:
        async with self._lock:
            usage = self._usage.setdefault(caller_id, CallerUsage())
            usage.generations += 1
            usage.cost_cents += cost
            if tokens is not None:
                usage.prompt_tokens += tokens.prompt_tokens
                usage.completion_tokens += tokens.completion_tokens
        logger.debug(
            "Recorded generation usage",
            caller_id=caller_id,
            cost_cents=cost,
        )

    def usage_for(self, caller_id: str) -> CallerUsage:
        """Totals for a caller (zeroes if the caller has none)."""
        return self._usage.get(caller_id, CallerUsage())

    def totals(self) -> CallerUsage:
        """Totals across every caller."""
        total = CallerUsage()
        for usage in self._usage.values():
            total.generations += usage.generations
            total.prompt_tokens += usage.prompt_tokens
            total.completion_tokens += usage.completion_tokens
            total.cost_cents += usage.cost_cents
        return total
