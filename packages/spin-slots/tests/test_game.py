"""Tests for spin_slots.game — session setup, spin flow and settling."""
from __future__ import annotations

import random

import pytest

from spin import ManualFrameClock
from spin_reel import RecordingSurface, ReelSettings
from spin_slots import (
    GameConfig,
    apply_layout,
    change_cash_by_progress,
    get_winnings,
    new_session,
    settle,
    spin,
)


class FixedRandom:
    """randrange stand-in that always lands on the same offset."""

    def __init__(self, value: int) -> None:
        self.value = value

    def randrange(self, stop: int) -> int:
        return self.value % stop


def run_spin(clock: ManualFrameClock, step: float = 16.0) -> None:
    frames = 0
    while clock.pending:
        clock.advance(step)
        frames += 1
        assert frames < 10_000


class TestConfig:
    def test_defaults(self) -> None:
        cfg = GameConfig()
        assert cfg.default_cash == 100
        assert cfg.bet == 10
        assert cfg.values == (0, 1, 2, 3, 4, 5, 6, 7)

    def test_reel_durations_accumulate_shrinking_steps(self) -> None:
        durations = GameConfig().reel_durations()
        assert durations == [
            pytest.approx(1500.0),
            pytest.approx(2850.0),
            pytest.approx(4065.0),
        ]

    def test_config_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            GameConfig().bet = 5  # type: ignore[misc]


class TestSession:
    def test_new_session(self) -> None:
        session = new_session()
        assert session.cash == 100
        assert session.bet == 10
        assert len(session.reels) == 3
        assert session.cash_display.amount == 100
        assert session.can_spin

    def test_reels_share_surface(self) -> None:
        surface = RecordingSurface()
        session = new_session(surface=surface)
        assert all(reel.surface is surface for reel in session.reels)

    def test_apply_layout(self) -> None:
        session = new_session()
        session.reels[0].turn(2)
        apply_layout(
            session,
            [ReelSettings(x=i * 100, y=50, w=100, h=80) for i in range(3)],
        )
        assert [reel.x for reel in session.reels] == [0, 100, 200]
        assert all(reel.h == 80 for reel in session.reels)
        assert session.reels[0].index == 2


class TestCashFade:
    def test_first_half_fades_out(self) -> None:
        session = new_session()
        session.cash = 90
        change_cash_by_progress(session, 0.25)
        assert session.cash_display.opacity == pytest.approx(0.5)
        assert session.cash_display.amount == 100

    def test_second_half_shows_new_amount(self) -> None:
        session = new_session()
        session.cash = 90
        change_cash_by_progress(session, 0.75)
        assert session.cash_display.opacity == pytest.approx(0.5)
        assert session.cash_display.amount == 90

    def test_end_fully_visible(self) -> None:
        session = new_session()
        change_cash_by_progress(session, 1.0)
        assert session.cash_display.opacity == 1.0


class TestSpin:
    def test_debits_bet_and_locks(self) -> None:
        session = new_session()
        clock = ManualFrameClock()
        scheduler = spin(session, clock, random.Random(3))
        assert scheduler is not False
        assert session.cash == 90
        assert session.spinning
        assert not session.can_spin

    def test_reentry_rejected(self) -> None:
        session = new_session()
        clock = ManualFrameClock()
        spin(session, clock, random.Random(3))
        assert spin(session, clock, random.Random(3)) is False
        assert session.cash == 90

    def test_depleted_balance_refilled(self) -> None:
        session = new_session()
        session.cash = 0
        spin(session, ManualFrameClock(), random.Random(3))
        assert session.cash == 90

    def test_targets_cover_extra_revolutions(self) -> None:
        session = new_session()
        spin(session, ManualFrameClock(), random.Random(11))
        for i, target in enumerate(session.targets, start=1):
            assert 8 * i <= target < 8 * (i + 1)

    def test_reels_spin_unsettled(self) -> None:
        session = new_session()
        clock = ManualFrameClock()
        spin(session, clock, random.Random(3))
        clock.advance(16)
        assert all(not reel.stopped for reel in session.reels)

    def test_full_spin_settles_on_targets(self) -> None:
        session = new_session()
        clock = ManualFrameClock()
        spin(session, clock, random.Random(5))
        run_spin(clock)

        values = session.config.values
        combo = tuple(reel.current_value for reel in session.reels)
        assert combo == tuple(values[t % len(values)] for t in session.targets)
        assert all(reel.stopped for reel in session.reels)
        assert not session.spinning
        assert session.spins == 1
        assert session.last_combo == combo
        assert session.cash == 90 + get_winnings(combo, 10)
        assert session.cash_display.amount == session.cash
        assert session.cash_display.opacity == 1.0

    def test_reels_stop_in_order(self) -> None:
        session = new_session()
        clock = ManualFrameClock()
        spin(session, clock, random.Random(5))
        clock.advance(1600)
        stopped = [reel.stopped for reel in session.reels]
        assert stopped == [True, False, False]
        clock.advance(1300)
        assert [reel.stopped for reel in session.reels] == [True, True, False]

    def test_jackpot_credits_winnings(self) -> None:
        session = new_session()
        clock = ManualFrameClock()
        spin(session, clock, FixedRandom(7))  # type: ignore[arg-type]
        run_spin(clock)
        assert session.last_combo == (7, 7, 7)
        assert session.last_result is not None
        assert session.last_result.weight == 3
        assert session.last_winnings == 1_000_000
        assert session.cash == 90 + 1_000_000

    def test_odd_reel_size_settles_on_targets(self) -> None:
        """Seven values: every target is 3 mod 7, so the combo is three 3s."""
        session = new_session(GameConfig(values=tuple(range(7))))
        clock = ManualFrameClock()
        spin(session, clock, FixedRandom(3))  # type: ignore[arg-type]
        assert session.targets == [10, 17, 24]
        run_spin(clock)
        assert [reel.index for reel in session.reels] == [3, 3, 3]
        assert all(reel.offset_y == 0.0 for reel in session.reels)
        assert session.last_combo == (3, 3, 3)
        assert session.last_result is not None
        assert session.last_result.weight == 3

    def test_render_called_every_frame_until_settled(self) -> None:
        session = new_session()
        clock = ManualFrameClock()
        frames: list[float] = []
        scheduler = spin(
            session, clock, random.Random(1), render=lambda: frames.append(clock.now())
        )
        assert scheduler is not False
        while scheduler.running:
            clock.advance(100)
        assert len(frames) == 41
        assert frames[-1] == pytest.approx(4100.0)

    def test_default_render_draws_reels(self) -> None:
        surface = RecordingSurface()
        session = new_session(surface=surface)
        clock = ManualFrameClock()
        spin(session, clock, random.Random(1))
        clock.advance(16)
        assert surface.names().count("clip") == 3

    def test_can_spin_again_after_settle(self) -> None:
        session = new_session()
        clock = ManualFrameClock()
        spin(session, clock, random.Random(2))
        run_spin(clock)
        assert spin(session, clock, random.Random(2)) is not False
        run_spin(clock)
        assert session.spins == 2


class TestSettle:
    def test_scores_current_values(self) -> None:
        session = new_session()
        session.spinning = True
        session.cash = 50
        for reel, units in zip(session.reels, (3, 3, 5)):
            reel.turn(units)
        won = settle(session, ManualFrameClock())
        assert won == 300
        assert session.cash == 350
        assert session.last_result is not None
        assert session.last_result.weight == 2
        assert not session.spinning
