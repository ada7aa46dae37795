"""Balance, bet and spin-button overlays."""
from __future__ import annotations

import pygame

from spin_slots import CashDisplay

from ui.constants import (
    BUTTON_BG,
    BUTTON_BG_DISABLED,
    BUTTON_TEXT,
    TEXT_COLOR,
    TEXT_DIM,
    WIN_COLOR,
)


def _format_amount(amount: float) -> str:
    return f"{amount:,.0f}" if amount == int(amount) else f"{amount:,.2f}"


def draw_spin_button(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    enabled: bool,
) -> None:
    """Draw the spin button, greyed out while reels are turning."""
    bg = BUTTON_BG if enabled else BUTTON_BG_DISABLED
    pygame.draw.rect(surface, bg, rect, border_radius=rect.height // 4)
    label = font.render("SPIN", True, BUTTON_TEXT)
    surface.blit(label, label.get_rect(center=rect.center))


def draw_balance(
    surface: pygame.Surface,
    font: pygame.font.Font,
    display: CashDisplay,
    bet: float,
    last_winnings: float,
) -> None:
    """Draw cash (faded by the display opacity), bet and last win along the bottom."""
    w, h = surface.get_size()
    pad = 12
    y = h - pad - font.get_height()

    cash_label = font.render("Cash: ", True, TEXT_DIM)
    surface.blit(cash_label, (pad, y))
    amount = font.render(_format_amount(display.amount), True, TEXT_COLOR)
    amount.set_alpha(round(255 * max(0.0, min(1.0, display.opacity))))
    surface.blit(amount, (pad + cash_label.get_width(), y))

    bet_label = font.render(f"Bet: {_format_amount(bet)}", True, TEXT_COLOR)
    surface.blit(bet_label, bet_label.get_rect(bottomright=(w - pad, h - pad)))

    if last_winnings:
        won = font.render(f"Won {_format_amount(last_winnings)}!", True, WIN_COLOR)
        surface.blit(won, won.get_rect(midbottom=(w // 2, h - pad)))
