# jumprunner/game/render.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import pygame
from .config import (
    WIDTH, HEIGHT, GROUND_Y, PLAYER_SIZE, GROUND_STRIP_H,
    BUTTON_W, BUTTON_H, DEBUG_HITBOX_OVERLAY,
    COLOR_BG, COLOR_GROUND, COLOR_PLAYER, COLOR_PLAYER_POWERED, COLOR_PLAYER_SHADOW,
    COLOR_OBSTACLE, COLOR_POWERUP, COLOR_POWERUP_RIM, COLOR_TEXT, COLOR_DANGER,
    COLOR_BUTTON, COLOR_BUTTON_RIM, COLOR_BUTTON_TEXT
)
from .session import Session
from .strings import text


@dataclass(frozen=True)
class HudState:
    score_text: str
    powerup_visible: bool


def hud_state(session: Session, lang: str = "ja") -> HudState:
    return HudState(
        score_text=text("score", lang, score=session.score),
        powerup_visible=session.powerup_active,
    )


def button_rect() -> pygame.Rect:
    return pygame.Rect((WIDTH - BUTTON_W) // 2, (HEIGHT - BUTTON_H) // 2 + 60, BUTTON_W, BUTTON_H)


def draw_button(surf: pygame.Surface, rect: pygame.Rect, label: str, font: pygame.font.Font):
    pygame.draw.rect(surf, COLOR_BUTTON, rect, border_radius=10)
    pygame.draw.rect(surf, COLOR_BUTTON_RIM, rect, width=2, border_radius=10)
    txt = font.render(label, True, COLOR_BUTTON_TEXT)
    surf.blit(txt, (rect.centerx - txt.get_width() // 2, rect.centery - txt.get_height() // 2))


def _blit_centered(surf: pygame.Surface, font: pygame.font.Font, msg: str, color, cy: int):
    txt = font.render(msg, True, color)
    surf.blit(txt, (WIDTH // 2 - txt.get_width() // 2, cy - txt.get_height() // 2))


def draw(surf: pygame.Surface,
         session: Session,
         font: Optional[pygame.font.Font] = None,
         big_font: Optional[pygame.font.Font] = None,
         lang: str = "ja"):
    """Draw the session. Reads only; calling it twice on the same state gives the same frame."""
    surf.fill(COLOR_BG)

    # ground strip right under the player's feet
    pygame.draw.rect(surf, COLOR_GROUND, pygame.Rect(0, GROUND_Y + PLAYER_SIZE, WIDTH, GROUND_STRIP_H))

    # player with a soft offset shadow
    p = session.player
    pygame.draw.rect(surf, COLOR_PLAYER_SHADOW, p.rect.move(2, 2), border_radius=3)
    color = COLOR_PLAYER_POWERED if session.powerup_active else COLOR_PLAYER
    pygame.draw.rect(surf, color, p.rect)
    if DEBUG_HITBOX_OVERLAY:
        x, y, w, h = p.hitbox()
        pygame.draw.rect(surf, COLOR_DANGER, pygame.Rect(int(x), int(y), int(w), int(h)), width=1)

    for obs in session.obstacles:
        pygame.draw.rect(surf, COLOR_OBSTACLE, obs.rect)

    for pu in session.powerups:
        pygame.draw.circle(surf, COLOR_POWERUP, pu.center, pu.radius)
        pygame.draw.circle(surf, COLOR_POWERUP_RIM, pu.center, pu.radius, width=1)

    if font is None:
        return

    hud = hud_state(session, lang)
    surf.blit(font.render(hud.score_text, True, COLOR_TEXT), (12, 10))
    if hud.powerup_visible:
        badge = font.render(text("powerup", lang), True, COLOR_POWERUP_RIM)
        surf.blit(badge, (WIDTH - badge.get_width() - 12, 10))

    if session.game_over:
        _blit_centered(surf, big_font or font, text("game_over", lang), COLOR_DANGER, HEIGHT // 2 - 20)
        _blit_centered(surf, font, text("retry_hint", lang), COLOR_TEXT, HEIGHT // 2 + 20)
