"""Combination rules and payout table.

A spin's three settled values are ranked by match strength ("weight"):

    3  all three reels equal
    2  the middle reel matches a neighbour
    1  a jackpot symbol shows anywhere
    0  nothing

The payout is ``table[weight][value] * bet * 0.1``; missing entries pay 0.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Hashable, Mapping, Sequence

JACKPOT_SYMBOL = 7

PayoutTable = Mapping[int, Mapping[Hashable, float]]

PAYOUT_TABLE: PayoutTable = MappingProxyType({
    1: MappingProxyType({7: 10}),
    2: MappingProxyType({
        1: 100, 2: 200, 3: 300, 4: 400,
        5: 500, 6: 750, 7: 1000,
    }),
    3: MappingProxyType({
        1: 2500, 2: 5000, 3: 15000, 4: 25000,
        5: 50000, 6: 75000, 7: 1000000,
    }),
})


@dataclass(frozen=True)
class ComboResult:
    weight: int = 0
    value: Hashable | None = None


def check_combo(combo: Sequence[Hashable]) -> ComboResult:
    """Rank three reel values by match strength."""
    first, middle, last = combo
    if first == middle == last:
        return ComboResult(weight=3, value=middle)
    if first == middle or middle == last:
        return ComboResult(weight=2, value=middle)
    if JACKPOT_SYMBOL in combo:
        return ComboResult(weight=1, value=JACKPOT_SYMBOL)
    return ComboResult()


def get_winnings(
    combo: Sequence[Hashable],
    bet: float = 10,
    table: PayoutTable = PAYOUT_TABLE,
) -> float:
    """Amount won by ``combo`` for a given bet. 0 when nothing matches."""
    result = check_combo(combo)
    if result.weight < 1:
        return 0
    multiplier = table.get(result.weight, {}).get(result.value)
    if not multiplier:
        return 0
    return multiplier * bet / 10
