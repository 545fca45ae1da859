# jumprunner/game/entities.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import pygame
from .config import (
    PLAYER_X, PLAYER_SIZE, GROUND_Y, MAX_JUMPS,
    OBSTACLE_W, POWERUP_SIZE, POWERUP_OFFSET_Y, OBSTACLE_HITBOX_INSET
)

# (left, top, width, height) in float world coords
Box = Tuple[float, float, float, float]


def boxes_overlap(a: Box, b: Box) -> bool:
    """Strict AABB overlap: touching edges do not count."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay + ah > by and ay < by + bh


def inset_box(box: Box, inset: float) -> Box:
    x, y, w, h = box
    return (x + inset, y + inset, w - 2 * inset, h - 2 * inset)


@dataclass
class Player:
    """
    Auto-running avatar. Only the vertical axis moves:
    - y is the top edge, GROUND_Y is the lowest value it may take
    - jumps_left is the remaining jump allowance until the next landing
    """
    x: float = float(PLAYER_X)
    y: float = float(GROUND_Y)
    vy: float = 0.0
    jumps_left: int = MAX_JUMPS
    jump_count: int = 0

    def box(self) -> Box:
        return (self.x, self.y, float(PLAYER_SIZE), float(PLAYER_SIZE))

    def hitbox(self) -> Box:
        """Forgiving box used against obstacles."""
        return inset_box(self.box(), OBSTACLE_HITBOX_INSET)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), PLAYER_SIZE, PLAYER_SIZE)


@dataclass
class Obstacle:
    x: float
    y: float
    h: float
    w: float = float(OBSTACLE_W)

    @classmethod
    def at_ground(cls, x: float, h: float) -> "Obstacle":
        """Obstacle whose bottom sits on the ground line."""
        return cls(x=x, y=GROUND_Y + PLAYER_SIZE - h, h=h)

    def box(self) -> Box:
        return (self.x, self.y, self.w, self.h)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(round(self.h)))


@dataclass
class PowerUp:
    x: float
    y: float = float(GROUND_Y - POWERUP_OFFSET_Y)
    size: float = float(POWERUP_SIZE)

    def box(self) -> Box:
        return (self.x, self.y, self.size, self.size)

    @property
    def right(self) -> float:
        return self.x + self.size

    @property
    def center(self) -> Tuple[int, int]:
        return (int(self.x + self.size / 2), int(self.y + self.size / 2))

    @property
    def radius(self) -> int:
        return int(self.size // 2)
