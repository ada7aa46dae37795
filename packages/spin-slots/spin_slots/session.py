"""Mutable per-player game state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable

from spin_reel import Reel

from spin_slots.config import GameConfig
from spin_slots.payout import ComboResult


@dataclass
class CashDisplay:
    """What the balance widget shows. Lags ``GameSession.cash`` during fades."""

    amount: float = 0
    opacity: float = 1.0


@dataclass
class GameSession:
    """Everything one spin reads or writes. Passed to the game functions."""

    config: GameConfig
    cash: float
    bet: float
    reels: list[Reel] = field(default_factory=list)
    targets: list[int] = field(default_factory=list)
    spinning: bool = False
    spins: int = 0
    last_combo: tuple[Hashable, ...] | None = None
    last_result: ComboResult | None = None
    last_winnings: float = 0
    cash_display: CashDisplay = field(default_factory=CashDisplay)

    @property
    def can_spin(self) -> bool:
        return not self.spinning
