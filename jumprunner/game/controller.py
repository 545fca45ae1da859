# jumprunner/game/controller.py
from __future__ import annotations
from enum import Enum
from typing import Callable, Optional
from .config import FIXED_DT, DEBUG_SESSION_LOGS
from .session import Session, new_session, reset_session, try_jump, update
from .strings import text


class State(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class SessionController:
    """
    Owns the single Session and walks it through IDLE -> RUNNING -> GAME_OVER.
    Input handlers (start / retry / jump) and the frame loop both go through here.
    """
    def __init__(self, seed: Optional[int] = None):
        self.session: Session = new_session(seed)
        self.state = State.IDLE

    def _set_state(self, state: State):
        if DEBUG_SESSION_LOGS and state != self.state:
            print(f"[Controller] {self.state.value} -> {state.value}")
        self.state = state

    def start(self, seed: Optional[int] = None):
        """Reset everything and start running. seed=None keeps the current seed."""
        reset_session(self.session, seed)
        self.session.running = True
        self._set_state(State.RUNNING)

    def retry(self, seed: Optional[int] = None):
        if self.state == State.RUNNING:
            return
        self.start(seed)

    def jump(self) -> bool:
        if self.state != State.RUNNING:
            return False
        return try_jump(self.session)

    def tick(self, dt: float = FIXED_DT) -> bool:
        """One update step if running. Returns True if another frame should be scheduled."""
        if self.state != State.RUNNING:
            return False
        update(self.session, dt)
        if self.session.game_over:
            self._set_state(State.GAME_OVER)
        return self.session.running

    def button_label(self, lang: str) -> Optional[str]:
        """Label of the start/retry button, or None while it is hidden."""
        if self.state == State.IDLE:
            return text("start", lang)
        if self.state == State.GAME_OVER:
            return text("retry", lang)
        return None


def run_frames(controller: SessionController,
               render: Optional[Callable[[Session], None]] = None,
               max_frames: Optional[int] = None,
               dt: float = FIXED_DT) -> int:
    """
    Headless frame loop: update then render, and keep scheduling while the
    session is running. Returns the number of frames executed.
    """
    frames = 0
    while max_frames is None or frames < max_frames:
        if controller.state != State.RUNNING:
            break
        keep_going = controller.tick(dt)
        frames += 1
        if render is not None:
            render(controller.session)
        if not keep_going:
            break
    return frames
