"""Slot Machine — three-reel slot game on a resizable pygame window.

Exercises spin (frame clock, easing, scheduler), spin-reel and spin-slots.

Controls:
  Space / Enter   Spin (ignored while the reels are turning)
  Click           Spin, when clicking the SPIN button
  Esc             Quit

Resize the window to re-lay out the reels; rotation state is kept.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import replace

import pygame

from spin import FrameClock
from spin_slots import GameConfig, GameSession, apply_layout, new_session, render_reels, spin

from ui.canvas import PygameCanvas
from ui.constants import BG_COLOR, DEFAULT_W, FPS
from ui.hud import draw_balance, draw_spin_button
from ui.layout import compute_button, compute_canvas_size, compute_reels

log = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Slot Machine — spin visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--cash", type=float, default=100, help="Starting balance (default: 100)")
    p.add_argument("--bet", type=float, default=10, help="Bet per spin (default: 10)")
    p.add_argument("--width", type=int, default=DEFAULT_W, help=f"Window width (default: {DEFAULT_W})")
    p.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return p.parse_args()


class SlotMachine:
    """Holds the session, frame clock and the retained reel canvas."""

    def __init__(self, width: int, config: GameConfig, seed: int | None) -> None:
        self.frame_clock = FrameClock()
        self.rng = random.Random(seed)
        self.session: GameSession = new_session(config)
        self.refresh_layout(width)

    def refresh_layout(self, width: int) -> None:
        """Resize the window and move the reels to fit it."""
        w, h = compute_canvas_size(width)
        self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
        self.canvas = PygameCanvas(pygame.Surface((w, h)))

        button_font_size, self.button_rect = compute_button(w, h)
        self.button_font = pygame.font.SysFont("monospace", button_font_size, bold=True)
        self.font = pygame.font.SysFont("monospace", max(12, w // 40))

        settings = [
            replace(s, surface=self.canvas)
            for s in compute_reels(w, h, self.button_rect.height)
        ]
        apply_layout(self.session, settings)
        log.debug("layout %dx%d, reels %s", w, h, settings)
        self.render_canvas()

    def render_canvas(self) -> None:
        self.canvas.target.set_clip(None)
        self.canvas.target.fill(BG_COLOR)
        render_reels(self.session)

    def try_spin(self) -> None:
        spin(self.session, self.frame_clock, self.rng, render=self.render_canvas)

    def draw(self) -> None:
        self.screen.blit(self.canvas.target, (0, 0))
        draw_spin_button(
            self.screen, self.button_font, self.button_rect, self.session.can_spin
        )
        draw_balance(
            self.screen,
            self.font,
            self.session.cash_display,
            self.session.bet,
            self.session.last_winnings,
        )


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = GameConfig(default_cash=args.cash, bet=args.bet)

    pygame.init()
    pygame.display.set_caption("Slot Machine — spin demo")
    clock = pygame.time.Clock()
    machine = SlotMachine(args.width, config, args.seed)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    machine.try_spin()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if machine.button_rect.collidepoint(event.pos):
                    machine.try_spin()

            elif event.type == pygame.VIDEORESIZE:
                machine.refresh_layout(event.w)

        # --- Animation frame ---
        machine.frame_clock.pump()

        # --- Render ---
        machine.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
