# jumprunner/game/session.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import random
from .config import (
    FIXED_DT, GROUND_Y, GRAVITY, JUMP_VELOCITY, MAX_JUMPS,
    SCROLL_SPEED, POWERUP_BOOST, POWERUP_DURATION, DEBUG_SESSION_LOGS
)
from .entities import Player, Obstacle, PowerUp, boxes_overlap
from .spawner import Spawner, make_rng


def _log(msg: str):
    if DEBUG_SESSION_LOGS:
        print(f"[Session] {msg}")


@dataclass
class Session:
    """
    Whole mutable state of one run. Everything that changes during play lives
    here and is only touched by update(), try_jump() and reset_session().
    """
    seed: int
    rng: random.Random
    player: Player = field(default_factory=Player)
    obstacles: List[Obstacle] = field(default_factory=list)
    powerups: List[PowerUp] = field(default_factory=list)
    score: int = 0
    running: bool = False
    game_over: bool = False
    powerup_active: bool = False
    powerup_timer: float = 0.0
    spawner: Spawner = field(init=False)

    def __post_init__(self):
        self.spawner = Spawner(self.rng)

    @property
    def scroll_speed(self) -> float:
        return SCROLL_SPEED + POWERUP_BOOST if self.powerup_active else SCROLL_SPEED


def new_session(seed: Optional[int] = None) -> Session:
    rng, seed = make_rng(seed)
    return Session(seed=seed, rng=rng)


def reset_session(session: Session, seed: Optional[int] = None) -> Session:
    """
    Put the session back to its initial state. The rng is re-seeded (same seed
    unless a new one is given) so a restarted run spawns the same sequence.
    """
    rng, session.seed = make_rng(session.seed if seed is None else seed)
    session.rng = rng
    session.spawner = Spawner(rng)
    session.player = Player()
    session.obstacles = []
    session.powerups = []
    session.score = 0
    session.running = False
    session.game_over = False
    session.powerup_active = False
    session.powerup_timer = 0.0
    _log(f"reset seed={session.seed}")
    return session


def try_jump(session: Session) -> bool:
    """Jump if the run is live and allowance remains. Returns True if performed."""
    p = session.player
    if not session.running or session.game_over or p.jumps_left <= 0:
        return False
    p.vy = JUMP_VELOCITY
    p.jumps_left -= 1
    p.jump_count += 1
    return True


def _apply_physics(p: Player, dt: float):
    p.vy += GRAVITY * dt
    p.y += p.vy * dt
    if p.y > GROUND_Y:
        # landed
        p.y = float(GROUND_Y)
        p.vy = 0.0
        p.jumps_left = MAX_JUMPS


def _scroll(session: Session, dt: float):
    dx = session.scroll_speed * dt
    for obs in session.obstacles:
        obs.x -= dx
    for pu in session.powerups:
        pu.x -= dx


def _prune(session: Session):
    session.obstacles = [o for o in session.obstacles if o.right > 0]
    session.powerups = [p for p in session.powerups if p.right > 0]


def _check_obstacles(session: Session) -> bool:
    me = session.player.hitbox()
    hit = False
    for obs in session.obstacles:
        if boxes_overlap(me, obs.box()):
            hit = True
    if hit and not session.game_over:
        session.running = False
        session.game_over = True
        _log(f"game over score={session.score}")
    return hit


def _collect_powerup(session: Session) -> bool:
    me = session.player.box()
    for i, pu in enumerate(session.powerups):
        if boxes_overlap(me, pu.box()):
            del session.powerups[i]
            session.powerup_active = True
            session.powerup_timer = float(POWERUP_DURATION)
            _log(f"power-up collected score={session.score}")
            return True
    return False


def _tick_powerup(session: Session, dt: float):
    if not session.powerup_active:
        return
    session.powerup_timer -= dt
    if session.powerup_timer <= 0:
        session.powerup_active = False
        session.powerup_timer = 0.0
        _log("power-up expired")


def update(session: Session, dt: float = FIXED_DT) -> bool:
    """
    Advance the run by one fixed step. The order matters:
      physics -> scroll -> spawn -> prune -> obstacle hits -> power-up pickup
      -> power-up countdown -> score.
    Does nothing unless the session is running. Returns session.running.
    """
    if not session.running or session.game_over:
        return False

    _apply_physics(session.player, dt)
    _scroll(session, dt)
    session.spawner.maybe_spawn(session.obstacles, session.powerups)
    _prune(session)
    _check_obstacles(session)
    _collect_powerup(session)
    _tick_powerup(session, dt)
    session.score += 1
    return session.running
