# jumprunner/game/spawner.py
from __future__ import annotations
import random
from typing import List, Optional, Tuple
from .config import (
    WIDTH, OBSTACLE_GAP, OBSTACLE_BASE_H, OBSTACLE_H_JITTER, POWERUP_CHANCE
)
from .entities import Obstacle, PowerUp


def make_rng(seed: Optional[int]) -> Tuple[random.Random, int]:
    """Seeded rng; seed=None picks a fresh seed so the run can still be reproduced."""
    if seed is None:
        seed = random.randrange(0, 2**32 - 1)
    return random.Random(seed), seed


class Spawner:
    """
    Spawns obstacles at the right edge of the screen once the previous one has
    scrolled GAP px in, and occasionally a power-up alongside.
    """
    def __init__(self, rng: random.Random):
        self.rng = rng

    def should_spawn(self, obstacles: List[Obstacle]) -> bool:
        if not obstacles:
            return True
        return obstacles[-1].x < WIDTH - OBSTACLE_GAP

    def maybe_spawn(self, obstacles: List[Obstacle], powerups: List[PowerUp]) -> bool:
        """Appends at most one obstacle and one power-up. Returns True if an obstacle spawned."""
        if not self.should_spawn(obstacles):
            return False

        h = OBSTACLE_BASE_H + self.rng.random() * OBSTACLE_H_JITTER
        obstacles.append(Obstacle.at_ground(float(WIDTH), h))

        if self.rng.random() < POWERUP_CHANCE:
            powerups.append(PowerUp(x=float(WIDTH)))
        return True
