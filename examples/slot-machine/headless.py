"""Slot Machine — headless run with a manual frame clock.

Plays a number of spins without a window: frames are advanced by hand at a
fixed step and the reels paint onto a RecordingSurface. Prints one line per
spin and a summary.

Run:
    python headless.py --spins 50 --seed 7
"""
from __future__ import annotations

import argparse
import logging
import random

from spin import ManualFrameClock
from spin_reel import ReelSettings
from spin_slots import GameConfig, apply_layout, new_session, spin


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Slot Machine — headless spins")
    p.add_argument("--spins", type=int, default=20, help="Number of spins (default: 20)")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--cash", type=float, default=100, help="Starting balance (default: 100)")
    p.add_argument("--bet", type=float, default=10, help="Bet per spin (default: 10)")
    p.add_argument("--frame-ms", type=float, default=1000 / 60,
                   help="Milliseconds per simulated frame (default: 16.7)")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = new_session(GameConfig(default_cash=args.cash, bet=args.bet))
    apply_layout(session, [ReelSettings(x=i * 200, y=0, w=200, h=210) for i in range(3)])
    clock = ManualFrameClock()
    rng = random.Random(args.seed)

    total_won = 0.0
    frames = 0
    for n in range(1, args.spins + 1):
        spin(session, clock, rng)
        while clock.pending:
            clock.advance(args.frame_ms)
            frames += 1
        total_won += session.last_winnings
        result = session.last_result
        weight = result.weight if result is not None else 0
        print(
            f"spin {n:3d}  {session.last_combo}  weight {weight}  "
            f"won {session.last_winnings:>10,.0f}  cash {session.cash:>12,.0f}"
        )

    print("-" * 60)
    print(f"spins: {args.spins}  frames: {frames}  total won: {total_won:,.0f}")
    print(f"final cash: {session.cash:,.0f}")


if __name__ == "__main__":
    main()
