"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning for the three-reel game.

    Attributes:
        default_cash: Balance a new session starts with, and the refill
            amount once the balance is depleted.
        bet: Amount debited per spin.
        values: Symbols printed on every reel, in drum order.
        spin_step_ms: Spin duration of the first reel.
        spin_decay: Each following reel adds this fraction of the previous
            reel's step to the running duration.
        cash_fade_ms: Duration of the balance fade-out/fade-in.
        settle_threshold: Progress above which a reel counts as stopped.
    """

    default_cash: float = 100
    bet: float = 10
    values: tuple[int, ...] = tuple(range(8))
    spin_step_ms: float = 1500.0
    spin_decay: float = 0.9
    cash_fade_ms: float = 800.0
    settle_threshold: float = 0.99

    def reel_durations(self, count: int = 3) -> list[float]:
        """Cumulative spin duration of each reel, first reel first."""
        durations = []
        duration = 0.0
        step = self.spin_step_ms
        for _ in range(count):
            duration += step
            step *= self.spin_decay
            durations.append(duration)
        return durations
