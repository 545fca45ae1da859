# jumprunner/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from jumprunner.game.config import WIDTH, HEIGHT, FPS, FIXED_DT
from jumprunner.game.controller import SessionController, State
from jumprunner.game.render import draw
from jumprunner.env.observations import build_observation, OBS_LOW, OBS_HIGH


class RunnerEnv(gym.Env):
    """
    Jump Runner Gymnasium environment (vector observations).
    - Simulation at 60 Hz (one fixed step per frame).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Observation: shape (10,), float32 (see build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Invalid render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.controller: Optional[SessionController] = None
        self.timestep: int = 0

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # Given seed -> reproducible spawns; None -> derive one from np_random
        spawn_seed = int(seed) if seed is not None else int(self.np_random.integers(0, 2**31 - 1))
        self.controller = SessionController(spawn_seed)
        self.controller.start()
        self.timestep = 0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.controller is not None, "Call reset() before step()"

        if action == 1:
            self.controller.jump()

        for _ in range(self.frame_skip):
            if not self.controller.tick(FIXED_DT):
                break

        alive = self.controller.state == State.RUNNING
        reward = 1.0 if alive else -1.0

        self.timestep += 1
        terminated = not alive
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.controller is not None
        return build_observation(self.controller.session)

    def _info(self) -> Dict[str, Any]:
        s = self.controller.session
        return {
            "score": s.score,
            "seed": s.seed,
            "timestep": self.timestep,
            "powerup_active": s.powerup_active,
            "jump_count": s.player.jump_count,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.controller is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Jump Runner — Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.font = pygame.font.Font(None, 20)

        draw(self.screen, self.controller.session, self.font, lang="en")

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
