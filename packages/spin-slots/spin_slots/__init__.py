"""spin-slots - Three-reel slot game built on spin and spin-reel."""
from __future__ import annotations

from spin_slots.config import GameConfig
from spin_slots.game import (
    apply_layout,
    change_cash_by_progress,
    new_session,
    render_reels,
    settle,
    spin,
)
from spin_slots.payout import (
    JACKPOT_SYMBOL,
    PAYOUT_TABLE,
    ComboResult,
    check_combo,
    get_winnings,
)
from spin_slots.session import CashDisplay, GameSession

__all__ = [
    "GameConfig",
    "GameSession",
    "CashDisplay",
    "ComboResult",
    "JACKPOT_SYMBOL",
    "PAYOUT_TABLE",
    "check_combo",
    "get_winnings",
    "new_session",
    "apply_layout",
    "render_reels",
    "change_cash_by_progress",
    "spin",
    "settle",
]
