"""Spin orchestration: reels, balance fade and payout for one session."""
from __future__ import annotations

import logging
import random
from typing import Callable, Literal, Sequence

from spin import FrameSource, Scheduler
from spin_reel import DrawingSurface, RecordingSurface, Reel, ReelSettings

from spin_slots.config import GameConfig
from spin_slots.payout import check_combo, get_winnings
from spin_slots.session import CashDisplay, GameSession

log = logging.getLogger(__name__)

REEL_COUNT = 3


def new_session(
    config: GameConfig | None = None,
    surface: DrawingSurface | None = None,
) -> GameSession:
    """Create a session with unplaced reels and a full balance.

    Reels start zero-sized; call ``apply_layout`` once the host knows its
    dimensions. Without a surface the reels draw onto a RecordingSurface.
    """
    config = config if config is not None else GameConfig()
    surface = surface if surface is not None else RecordingSurface()
    reels = [
        Reel(surface, x=0, y=0, w=0, h=0, values=config.values)
        for _ in range(REEL_COUNT)
    ]
    return GameSession(
        config=config,
        cash=config.default_cash,
        bet=config.bet,
        reels=reels,
        cash_display=CashDisplay(amount=config.default_cash),
    )


def apply_layout(session: GameSession, settings: Sequence[ReelSettings]) -> None:
    """Reposition reels in order. Extra entries on either side are ignored."""
    for reel, reel_settings in zip(session.reels, settings):
        reel.setting(reel_settings)


def render_reels(session: GameSession) -> None:
    for reel in session.reels:
        reel.draw()


def change_cash_by_progress(session: GameSession, progress: float) -> None:
    """Fade the balance out, swap in the new amount, fade back in."""
    display = session.cash_display
    if progress <= 0.5:
        display.opacity = 1 - progress * 2
    else:
        display.amount = session.cash
        display.opacity = progress * 2 - 1


def start_cash_fade(session: GameSession, clock: FrameSource) -> Scheduler:
    scheduler = Scheduler(clock)
    scheduler.schedule(
        lambda progress: change_cash_by_progress(session, progress),
        session.config.cash_fade_ms,
    )
    return scheduler.start()


def make_reel_turn(reel: Reel, target: float, threshold: float) -> Callable[[float], None]:
    """Progress callback rotating ``reel`` toward ``target`` value steps."""

    def reel_turn(progress: float) -> None:
        reel.turn(target * progress)
        reel.stopped = progress > threshold

    return reel_turn


def spin(
    session: GameSession,
    clock: FrameSource,
    rng: random.Random | None = None,
    render: Callable[[], None] | None = None,
) -> Scheduler | Literal[False]:
    """Debit the bet and start spinning every reel.

    Returns the reel scheduler, or False while a previous spin is still
    running. ``render`` is called once per frame until the last reel stops;
    by default it redraws the reels.
    """
    if session.spinning:
        log.debug("spin ignored: previous spin still running")
        return False

    config = session.config
    rng = rng if rng is not None else random.Random()
    render = render if render is not None else (lambda: render_reels(session))

    session.spinning = True
    if session.cash <= 0:
        log.info("balance depleted, refilling to %s", config.default_cash)
        session.cash = config.default_cash
    session.cash -= session.bet
    start_cash_fade(session, clock)

    scheduler = Scheduler(clock)
    durations = config.reel_durations(len(session.reels))
    session.targets = []
    for i, (reel, duration) in enumerate(zip(session.reels, durations), start=1):
        count = len(reel.values)
        # At least i full revolutions, so later reels spin further.
        target = rng.randrange(count) + count * i
        session.targets.append(target)
        scheduler.schedule(
            make_reel_turn(reel, target, config.settle_threshold),
            duration,
            timing="ease-out",
        )

    scheduler.schedule(lambda progress: render(), durations[-1] if durations else 0)
    scheduler.on_completion(lambda: settle(session, clock))
    log.info(
        "spin %d: bet %s, targets %s, balance %s",
        session.spins + 1, session.bet, session.targets, session.cash,
    )
    return scheduler.start()


def settle(session: GameSession, clock: FrameSource) -> float:
    """Score the reels' settled values, credit winnings and re-enable spins."""
    combo = tuple(reel.current_value for reel in session.reels)
    result = check_combo(combo)
    winnings = get_winnings(combo, session.bet)

    session.cash += winnings
    session.spins += 1
    session.last_combo = combo
    session.last_result = result
    session.last_winnings = winnings
    start_cash_fade(session, clock)
    session.spinning = False

    log.info(
        "spin %d settled on %s: weight %d, won %s, balance %s",
        session.spins, combo, result.weight, winnings, session.cash,
    )
    return winnings
