"""Stepped animation of displayed result values.

Each displayed number moves from its current value to a new target in a
fixed number of equal steps spread over a fixed duration. The animation is
purely cosmetic: cancelling it never changes the computed result.

    idle --start()--> animating --last tick()--> settled
                          |
                          +------cancel()------> idle
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Dict, Optional

from sipcalc import config
from sipcalc.core.errors import InvalidParameter
from sipcalc.core.projection import ProjectionResult
from sipcalc.core.validation import require_finite
from sipcalc.presentation.formatting import format_field

logger = logging.getLogger(__name__)

DISPLAY_FIELDS = (
    "total_invested",
    "total_returns",
    "total_value",
    "inflation_adjusted_value",
    "wealth_multiple",
    "required_monthly_contribution",
)


class AnimationState(str, Enum):
    IDLE = "idle"
    ANIMATING = "animating"
    SETTLED = "settled"


class ValueAnimation:
    def __init__(
        self,
        value: float = 0.0,
        steps: int = config.ANIMATION_STEPS,
        duration_ms: float = config.ANIMATION_DURATION_MS,
    ):
        if steps <= 0:
            raise InvalidParameter(f"steps must be greater than zero, got {steps}", "steps")
        if duration_ms < 0:
            raise InvalidParameter(f"duration_ms must not be negative, got {duration_ms}", "duration_ms")
        self.value = require_finite(value, "value")
        self.target = self.value
        self.steps = steps
        self.duration_ms = duration_ms
        self.state = AnimationState.IDLE
        self._step = 0
        self._increment = 0.0

    @property
    def step_interval(self) -> float:
        """Seconds between two ticks."""
        return self.duration_ms / self.steps / 1000

    @property
    def animating(self) -> bool:
        return self.state is AnimationState.ANIMATING

    def start(self, target: float) -> None:
        """Begin moving from the value currently shown; restarts any run in flight."""
        self.target = require_finite(target, "target")
        self._increment = (self.target - self.value) / self.steps
        self._step = 0
        self.state = AnimationState.ANIMATING

    def tick(self) -> float:
        if not self.animating:
            return self.value
        self._step += 1
        if self._step >= self.steps:
            self.value = self.target
            self.state = AnimationState.SETTLED
        else:
            self.value += self._increment
        return self.value

    def cancel(self) -> None:
        # the value stays wherever the last tick left it
        if self.animating:
            self.state = AnimationState.IDLE


class DisplayAnimator:
    """Animates every result field of one calculator panel."""

    def __init__(
        self,
        symbol: str = config.CURRENCY_SYMBOL,
        steps: int = config.ANIMATION_STEPS,
        duration_ms: float = config.ANIMATION_DURATION_MS,
    ):
        self.symbol = symbol
        self.steps = steps
        self.duration_ms = duration_ms
        self.fields: Dict[str, ValueAnimation] = {}
        self._cancelled = False

    @property
    def animating(self) -> bool:
        return any(animation.animating for animation in self.fields.values())

    def show(self, result: ProjectionResult) -> None:
        """
        Retarget the display at a new result.

        In-flight animations are cancelled first, then every field present in
        the result starts again from whatever it currently shows. Fields the
        result leaves out (the required contribution outside goal mode) keep
        their last value.
        """
        self.cancel()
        self._cancelled = False
        for field in DISPLAY_FIELDS:
            target: Optional[float] = getattr(result, field)
            if target is None:
                continue
            animation = self.fields.get(field)
            if animation is None:
                animation = ValueAnimation(steps=self.steps, duration_ms=self.duration_ms)
                self.fields[field] = animation
            animation.start(target)

    def cancel(self) -> None:
        if self.animating:
            logger.debug("cancelling in-flight display animation")
        self._cancelled = True
        for animation in self.fields.values():
            animation.cancel()

    def frame(self) -> Dict[str, str]:
        return {
            field: format_field(field, animation.value, self.symbol)
            for field, animation in self.fields.items()
        }

    def tick(self) -> Dict[str, str]:
        for animation in self.fields.values():
            animation.tick()
        return self.frame()

    def run(
        self,
        render: Callable[[Dict[str, str]], None],
        sleep: Callable[[float], None] = time.sleep,
    ) -> bool:
        """
        Drive the animation to completion, handing each frame to ``render``.

        Returns True when every field settled and False when ``cancel()`` (for
        example from inside ``render``) stopped it early.
        """
        interval = self.duration_ms / self.steps / 1000
        while self.animating:
            sleep(interval)
            if self._cancelled:
                break
            render(self.tick())
        return not self._cancelled
