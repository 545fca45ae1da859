# jumprunner/env/observations.py
from __future__ import annotations
from typing import List, Optional
import numpy as np

from jumprunner.game.config import (
    WIDTH, GROUND_Y, PLAYER_X, MAX_JUMPS, POWERUP_DURATION,
    OBSTACLE_BASE_H, OBSTACLE_H_JITTER
)
from jumprunner.game.entities import Obstacle, PowerUp

OBS_SIZE = 10
MAX_VY_OBS = 20.0   # |vy| (px/frame) mapped to 1.0; a full double-jump fall stays under this
MAX_OBSTACLE_H = OBSTACLE_BASE_H + OBSTACLE_H_JITTER

OBS_LOW = np.array([0.0, -1.0] + [0.0] * (OBS_SIZE - 2), dtype=np.float32)
OBS_HIGH = np.ones(OBS_SIZE, dtype=np.float32)


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def _dx_norm(x: Optional[float]) -> float:
    """Distance ahead of the player in screen widths; 1.0 = nothing in sight."""
    if x is None:
        return 1.0
    return _clamp01((x - PLAYER_X) / float(WIDTH))


def _ahead(items: List, limit: int) -> List:
    # entities whose trailing edge has not yet passed the player's left side
    return [e for e in items if e.right > PLAYER_X][:limit]


def build_observation(session) -> np.ndarray:
    """
    Returns a fixed (10,) float32 vector:
      [ height_norm, vy_norm, jumps_left_norm,
        powerup_active, powerup_timer_norm,
        obs1_dx, obs1_h, obs2_dx,
        pu_dx, pu_present ]
    - height_norm: height of the player above ground over GROUND_Y, in [0,1]
    - vy_norm: vy / MAX_VY_OBS clipped to [-1,1] (negative = rising)
    - dx values are in screen widths; 1.0 when the slot is empty
    - obs1_h is the next obstacle's height over MAX_OBSTACLE_H, 0.0 when empty
    """
    p = session.player
    height_norm = _clamp01((GROUND_Y - p.y) / float(GROUND_Y))
    vy_norm = max(-1.0, min(1.0, p.vy / MAX_VY_OBS))
    jumps_norm = p.jumps_left / float(MAX_JUMPS)

    active = 1.0 if session.powerup_active else 0.0
    timer_norm = _clamp01(session.powerup_timer / float(POWERUP_DURATION))

    obstacles: List[Obstacle] = _ahead(session.obstacles, 2)
    obs1: Optional[Obstacle] = obstacles[0] if obstacles else None
    obs2: Optional[Obstacle] = obstacles[1] if len(obstacles) > 1 else None

    powerups: List[PowerUp] = _ahead(session.powerups, 1)
    pu: Optional[PowerUp] = powerups[0] if powerups else None

    feats = [
        height_norm, vy_norm, jumps_norm,
        active, timer_norm,
        _dx_norm(obs1.x if obs1 else None),
        _clamp01(obs1.h / float(MAX_OBSTACLE_H)) if obs1 else 0.0,
        _dx_norm(obs2.x if obs2 else None),
        _dx_norm(pu.x if pu else None),
        1.0 if pu else 0.0,
    ]
    return np.asarray(feats, dtype=np.float32)
